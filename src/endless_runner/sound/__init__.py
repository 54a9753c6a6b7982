from .sound_utils import Sounds

__all__ = ["Sounds"]
