from systems.logger import GameLogger

class StateMachine:
    """이름으로 등록된 씬(State) 간 전환을 관리합니다."""

    def __init__(self):
        self.states = {}
        self.current_state = None
        self.current_name = None
        self.logger = GameLogger.get_instance()

    def add_state(self, name, state):
        self.states[name] = state

    def change_state(self, name, **kwargs):
        if name not in self.states:
            raise KeyError(f"Unknown state: {name}")

        if self.current_state:
            self.current_state.exit()

        self.logger.info("SCENE", f"{self.current_name} -> {name}")
        self.current_name = name
        self.current_state = self.states[name]
        self.current_state.enter(**kwargs)

    def update(self, dt):
        if self.current_state:
            self.current_state.update(dt)

    def draw(self, screen):
        if self.current_state:
            self.current_state.draw(screen)
