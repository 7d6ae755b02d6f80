# 화면 설정
SCREEN_WIDTH = 512
SCREEN_HEIGHT = 512
FPS = 60
WINDOW_TITLE = "Left/Right"

# 게임 규칙
PREPARE_TIME = 1.0  # 카운트다운 (초)
TIME_PRECISION = 2

# 좌/우 사각형 밝기 (빨강 채널, 0.0 ~ 1.0)
BRIGHTNESS_BASE = 0.5
BRIGHTNESS_DIFF = 0.125

# Layout (기준 폭 512px)
BASE_WIDTH = 512.0
BASE_PADDING = 20.0
BASE_FONT_SIZE = 32.0

# Colors
BG_COLOR = (128, 128, 128)
TEXT_COLOR = (0, 0, 0)

# Resources
ASSETS_FOLDER = "assets"
FONT_FILE = "FiraSans-Regular.ttf"
ASSET_SEARCH_PARENTS = 3
ASSET_SEARCH_KIDS = 3

# Logging
LOG_LEVEL = "INFO"
