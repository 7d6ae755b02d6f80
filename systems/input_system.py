import pygame
from components.reflex import Key

KEY_MAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
}

class InputSystem:
    """pygame 키 이벤트를 게임 Key로 변환합니다. (KEYDOWN 1회 = 입력 1회)"""

    @staticmethod
    def map_key(pygame_key):
        return KEY_MAP.get(pygame_key, Key.OTHER)

    def translate(self, event):
        if event.type != pygame.KEYDOWN:
            return None
        return self.map_key(event.key)
