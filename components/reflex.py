from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from settings import BRIGHTNESS_BASE, BRIGHTNESS_DIFF

class Side(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"

class Key(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    SPACE = "SPACE"
    OTHER = "OTHER"

# 방향키 -> 사이드 (LEFT/RIGHT 외의 키는 방향이 없음)
KEY_TO_SIDE = {
    Key.LEFT: Side.LEFT,
    Key.RIGHT: Side.RIGHT,
}

# --- Game States ---
# 상태 전이는 항상 새 값으로 통째로 교체 (frozen)

@dataclass(frozen=True)
class Init:
    pass

@dataclass(frozen=True)
class Preparing:
    remaining_time: float

@dataclass(frozen=True)
class Running:
    elapsed_time: float
    side: Side

@dataclass(frozen=True)
class FalseStart:
    pass

@dataclass(frozen=True)
class Result:
    elapsed_time: float
    side: Side
    correct: bool

GameState = Union[Init, Preparing, Running, FalseStart, Result]

@dataclass(frozen=True)
class ViewModel:
    """
    화면에 그릴 내용을 담는 값 객체입니다.
    창 크기와 무관하며, 레이아웃 계산은 RenderSystem의 몫입니다.
    """
    text: str
    highlighted_side: Optional[Side] = None

    @property
    def left_intensity(self):
        if self.highlighted_side is None:
            return BRIGHTNESS_BASE
        if self.highlighted_side == Side.LEFT:
            return BRIGHTNESS_BASE + BRIGHTNESS_DIFF
        return BRIGHTNESS_BASE - BRIGHTNESS_DIFF

    @property
    def right_intensity(self):
        if self.highlighted_side is None:
            return BRIGHTNESS_BASE
        if self.highlighted_side == Side.RIGHT:
            return BRIGHTNESS_BASE + BRIGHTNESS_DIFF
        return BRIGHTNESS_BASE - BRIGHTNESS_DIFF
