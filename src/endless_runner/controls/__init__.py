from .keyboard import KeyState, poll_keyboard

__all__ = ["KeyState", "poll_keyboard"]
