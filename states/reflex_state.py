from .base_state import BaseState
from systems.reflex_system import ReflexSystem
from systems.input_system import InputSystem
from systems.render_system import RenderSystem

class ReflexState(BaseState):
    def __init__(self, engine, rng=None, renderer=None):
        super().__init__(engine)

        # Systems
        self.reflex_system = ReflexSystem(rng=rng, event_bus=self.event_bus)
        self.input_system = InputSystem()
        self.render_system = renderer if renderer is not None else RenderSystem()

    def enter(self, **kwargs):
        # Event Binding
        self.event_bus.subscribe("ROUND_FINISHED", self._on_round_finished)
        self.event_bus.subscribe("FALSE_START", self._on_false_start)
        self.reflex_system.reset()

    def exit(self):
        self.event_bus.unsubscribe("ROUND_FINISHED", self._on_round_finished)
        self.event_bus.unsubscribe("FALSE_START", self._on_false_start)

    def update(self, dt):
        self.reflex_system.advance(dt)

    def handle_event(self, event):
        key = self.input_system.translate(event)
        if key is not None:
            self.reflex_system.handle_key(key)

    def draw(self, screen):
        self.render_system.draw(screen, self.reflex_system.current_view())

    def _on_round_finished(self, data):
        outcome = "WIN" if data['correct'] else "LOSE"
        self.logger.info("ROUND", f"{outcome} side={data['side'].value} time={data['elapsed_time']:.3f}s")

    def _on_false_start(self, data):
        self.logger.info("ROUND", "False start")
