"""Run HUD: the score readout.

Holds the label state separately from drawing so the run logic can update
it without a GL context; `draw()` is handed a TextRenderer by the scene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from endless_runner.config import SCORE_POS, SCORE_FONT_SIZE, SCORE_FILL

if TYPE_CHECKING:  # pragma: no cover
    from endless_runner.ui.text_renderer import TextRenderer


def css_color(value: str, alpha: int = 255) -> Tuple[int, int, int, int]:
    """'#fff' or '#ffffff' -> (r, g, b, a)."""
    h = value.lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"unsupported color: {value!r}")
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), alpha)


@dataclass
class ScoreLabel:
    text: str = "Score: 0"
    position: Tuple[float, float] = SCORE_POS
    font_size: int = SCORE_FONT_SIZE
    fill: str = SCORE_FILL

    def set_text(self, text: str) -> None:
        self.text = text


class RunHUD:
    def __init__(self) -> None:
        self.score_label = ScoreLabel()

    def set_score(self, score: int) -> None:
        self.score_label.set_text("Score: " + str(score))

    def draw(self, text: "TextRenderer") -> None:  # pragma: no cover - visual
        label = self.score_label
        x, y = label.position
        text.begin()
        text.draw_text(label.text, x, y, css_color(label.fill), key="score")
        text.end()


__all__ = ["RunHUD", "ScoreLabel", "css_color"]
