from systems.logger import GameLogger

class BaseState:
    """씬 공통 인터페이스. engine에서 event_bus를 꺼내 하위 씬이 바로 쓰도록 함"""

    def __init__(self, engine):
        self.engine = engine
        self.event_bus = engine.event_bus
        self.logger = GameLogger.get_instance()

    def enter(self, **kwargs):
        pass

    def exit(self):
        pass

    def update(self, dt):
        pass

    def draw(self, screen):
        pass

    def handle_event(self, event):
        pass
