import os

# 창 없이 pygame을 쓰기 위해 import 전에 설정
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from core.resource_manager import ResourceManager


@pytest.fixture(autouse=True)
def _reset_resource_manager():
    ResourceManager._instance = None
    yield
    ResourceManager._instance = None
