# Component package initialization
from .reflex import Side, Key, KEY_TO_SIDE, ViewModel
from .reflex import Init, Preparing, Running, FalseStart, Result, GameState
