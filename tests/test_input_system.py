import pygame
import pytest

from components.reflex import Key
from systems.input_system import InputSystem


@pytest.mark.parametrize(
    "pygame_key,key",
    [
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_SPACE, Key.SPACE),
        (pygame.K_UP, Key.OTHER),
        (pygame.K_a, Key.OTHER),
        (pygame.K_RETURN, Key.OTHER),
    ],
)
def test_map_key(pygame_key: int, key: Key) -> None:
    assert InputSystem.map_key(pygame_key) == key


def test_translate_only_reacts_to_key_down() -> None:
    system = InputSystem()
    assert system.translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)) == Key.LEFT
    assert system.translate(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)) is None
    assert system.translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))) is None
