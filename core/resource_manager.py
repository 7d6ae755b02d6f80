import os
import pygame
from systems.logger import GameLogger
from settings import ASSETS_FOLDER, FONT_FILE, ASSET_SEARCH_PARENTS, ASSET_SEARCH_KIDS

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

def _search_kids(path, folder_name, depth):
    candidate = os.path.join(path, folder_name)
    if os.path.isdir(candidate):
        return candidate
    if depth <= 0:
        return None

    try:
        children = sorted(os.listdir(path))
    except OSError:
        return None

    for child in children:
        child_path = os.path.join(path, child)
        if os.path.isdir(child_path) and not child.startswith('.'):
            found = _search_kids(child_path, folder_name, depth - 1)
            if found:
                return found
    return None

def find_folder(folder_name, start, parents=ASSET_SEARCH_PARENTS, kids=ASSET_SEARCH_KIDS):
    """1) start와 부모 parents단계까지 바로 아래 folder_name 확인  2) 없으면 start에서 kids단계 아래까지 탐색"""
    start = os.path.abspath(start)

    path = start
    for _ in range(parents + 1):
        candidate = os.path.join(path, folder_name)
        if os.path.isdir(candidate):
            return candidate
        parent = os.path.dirname(path)
        if parent == path:
            break
        path = parent

    return _search_kids(start, folder_name, kids)

class ResourceManager:
    _instance = None

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = ResourceManager()
        return cls._instance

    def __init__(self, base_dir=PROJECT_ROOT):
        if ResourceManager._instance is not None:
            raise Exception("This class is a singleton!")
        ResourceManager._instance = self

        self.logger = GameLogger.get_instance()
        self.fonts = {}  # (name, size) -> Font

        if not pygame.font.get_init():
            pygame.font.init()

        self.assets_dir = find_folder(ASSETS_FOLDER, base_dir)
        if self.assets_dir:
            self.logger.info("RESOURCE", f"Assets folder: {self.assets_dir}")
        else:
            self.logger.warning("RESOURCE", f"'{ASSETS_FOLDER}' folder not found from {base_dir}")

    @property
    def font_path(self):
        if not self.assets_dir:
            return None
        return os.path.join(self.assets_dir, FONT_FILE)

    def get_font(self, name, size):
        key = (name, size)
        if key in self.fonts:
            return self.fonts[key]

        path = self.font_path
        font = None
        if path and os.path.exists(path):
            try:
                font = pygame.font.Font(path, size)
                self.logger.info("RESOURCE", f"Loaded font {FONT_FILE} ({size}px)")
            except (OSError, pygame.error) as e:
                self.logger.error("RESOURCE", f"Failed to load font: {path} / {e}")
        else:
            self.logger.warning("RESOURCE", f"Font not found: {FONT_FILE}, using default")

        if font is None:
            font = pygame.font.Font(None, size)

        self.fonts[key] = font
        return font
