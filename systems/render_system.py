from dataclasses import dataclass
import pygame
from core.resource_manager import ResourceManager
from settings import SCREEN_WIDTH, SCREEN_HEIGHT, BASE_WIDTH, BASE_PADDING, BASE_FONT_SIZE, BG_COLOR, TEXT_COLOR

@dataclass(frozen=True)
class Layout:
    padding: float
    font_size: int
    side_top: float
    side_width: float
    side_height: float

    @property
    def left_rect(self):
        return pygame.Rect(round(self.padding), round(self.side_top),
                           round(self.side_width), round(self.side_height))

    @property
    def right_rect(self):
        return pygame.Rect(round(self.side_width + self.padding * 2), round(self.side_top),
                           round(self.side_width), round(self.side_height))

    @property
    def text_pos(self):
        return (round(self.padding), round(self.padding))

def compute_layout(w, h):
    # 창 폭 기준으로 전체 스케일
    padding = w / BASE_WIDTH * BASE_PADDING
    font_size = int(w / BASE_WIDTH * BASE_FONT_SIZE)
    # 텍스트 영역을 비워두고 아래에 좌/우 사각형
    side_top = font_size + padding * 2
    return Layout(
        padding=padding,
        font_size=font_size,
        side_top=side_top,
        side_width=w * 0.5 - padding * 1.5,
        side_height=h - side_top - padding
    )

def intensity_to_color(intensity):
    red = max(0, min(255, round(intensity * 255)))
    return (red, 0, 0)

class RenderSystem:
    def __init__(self):
        self.resource_manager = ResourceManager.get_instance()

        # Caching
        self.layout = None
        self.last_size = (0, 0)
        self._text_cache = {}

        # 폰트는 시작 시 한 번만 로드 (창 크기 고정)
        self.font_size = compute_layout(SCREEN_WIDTH, SCREEN_HEIGHT).font_size
        self.resource_manager.get_font("main", self.font_size)

    def _get_layout(self, screen):
        size = screen.get_size()
        if self.layout is None or self.last_size != size:
            self.layout = compute_layout(*size)
            self.last_size = size
            self._text_cache.clear()
        return self.layout

    def _render_text(self, text, font_size):
        if text not in self._text_cache:
            font = self.resource_manager.get_font("main", font_size)
            self._text_cache[text] = font.render(text, True, TEXT_COLOR)
            # 경과 시간 텍스트는 매 프레임 바뀌므로 캐시가 무한히 커지지 않게 제한
            if len(self._text_cache) > 64:
                self._text_cache.pop(next(iter(self._text_cache)))
        return self._text_cache[text]

    def draw(self, screen, view):
        layout = self._get_layout(screen)

        screen.fill(BG_COLOR)

        # 1. Text
        screen.blit(self._render_text(view.text, layout.font_size), layout.text_pos)

        # 2. Sides
        pygame.draw.rect(screen, intensity_to_color(view.left_intensity), layout.left_rect)
        pygame.draw.rect(screen, intensity_to_color(view.right_intensity), layout.right_rect)
