import pytest

from endless_runner.config import (
    GROUND_Y,
    PLAYER_START,
    OBSTACLE_START_SPEED,
    SPEED_UP_INTERVAL_MS,
)
from endless_runner.controls.keyboard import KeyState
from endless_runner.world.run_controller import RunController

from conftest import FixedRng, make_harness


def test_create_builds_the_world(harness) -> None:
    c = harness.controller

    assert tuple(c.player.position) == PLAYER_START
    assert c.player.collide_world_bounds
    assert not c.barrier.visible
    assert c.barrier.immovable
    assert len(c.obstacles) == 0
    assert [b.texture_key for b in c.backdrops] == ["background", "foreground"]
    assert c.hud.score_label.text == "Score: 0"
    assert len(c.timers.events) == 2
    assert len(c.physics.colliders) == 2
    assert c.state.obstacle_speed == OBSTACLE_START_SPEED


def test_create_twice_is_an_error(harness) -> None:
    with pytest.raises(RuntimeError):
        harness.controller.create()


def test_update_scrolls_backdrops_at_independent_rates(harness) -> None:
    harness.run(10)

    assert harness.controller.background.tile_position_x == pytest.approx(5.0)
    assert harness.controller.foreground.tile_position_x == pytest.approx(10.0)


def test_score_increments_by_one_per_frame(harness) -> None:
    for expected in range(1, 51):
        harness.frame()
        assert harness.state.score == expected
        assert harness.controller.hud.score_label.text == f"Score: {expected}"


def test_ground_clamp_applies_to_player_and_obstacles(harness) -> None:
    c = harness.controller
    obstacle = c.spawner.spawn()
    c.player.y = 700
    obstacle.y = 640

    c.update()

    assert c.player.y == GROUND_Y
    assert obstacle.y == GROUND_Y


def test_ground_clamp_leaves_higher_positions_alone(harness) -> None:
    c = harness.controller
    c.player.y = 300

    c.update()

    assert c.player.y == 300


def test_ground_clamp_still_applies_after_game_over(harness) -> None:
    c = harness.controller
    c.state.is_game_over = True
    c.player.y = 900

    c.update()

    assert c.player.y == GROUND_Y


def test_game_over_stops_score_scroll_and_input(harness) -> None:
    c = harness.controller
    harness.run(5)
    c.state.is_game_over = True
    harness.keys.current = KeyState(right=True)
    bg, fg = c.background.tile_position_x, c.foreground.tile_position_x

    for _ in range(5):
        c.update()

    assert c.state.score == 5
    assert c.background.tile_position_x == bg
    assert c.foreground.tile_position_x == fg
    assert c.player.velocity.x == 0


def test_landing_restores_can_jump(harness) -> None:
    harness.state.can_jump = False
    harness.settle()

    assert harness.state.can_jump
    assert harness.player.y == pytest.approx(GROUND_Y)


def test_can_jump_stays_false_while_airborne(harness) -> None:
    harness.settle()
    harness.keys.current = KeyState(up=True)
    harness.frame()
    assert not harness.state.can_jump
    harness.keys.current = KeyState()

    # Rising and falling back takes about a second at 600 px/s^2
    for _ in range(20):
        harness.frame()
        assert not harness.state.can_jump

    harness.settle()
    assert harness.state.can_jump


def test_escalation_timer_speeds_up_future_obstacles(harness) -> None:
    c = harness.controller
    c.timers.advance(SPEED_UP_INTERVAL_MS * 3)

    assert c.state.obstacle_speed == OBSTACLE_START_SPEED - 3 * 75


def test_escalation_keeps_running_after_game_over(harness) -> None:
    c = harness.controller
    c.state.is_game_over = True

    c.timers.advance(SPEED_UP_INTERVAL_MS)

    assert c.state.obstacle_speed == OBSTACLE_START_SPEED - 75


def test_spawn_timer_uses_random_delay_in_range() -> None:
    h = make_harness(rng=FixedRng(1000))
    h.controller.timers.advance(999)
    assert len(h.controller.obstacles) == 0
    h.controller.timers.advance(1)
    assert len(h.controller.obstacles) == 1
    h.controller.timers.advance(2000)
    assert len(h.controller.obstacles) == 3


def test_next_spawn_delay_bounds() -> None:
    import random

    c = RunController(keys=KeyState, rng=random.Random(7))
    delays = [c.next_spawn_delay() for _ in range(500)]
    assert min(delays) >= 1000
    assert max(delays) <= 3000


def test_visible_bodies_excludes_barrier(harness) -> None:
    c = harness.controller
    obstacle = c.spawner.spawn()

    bodies = c.visible_bodies()

    assert c.player in bodies
    assert obstacle in bodies
    assert c.barrier not in bodies
