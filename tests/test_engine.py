import pygame
import pytest

from core.engine import GameEngine


class StubScene:
    def __init__(self):
        self.events = []

    def handle_event(self, event):
        self.events.append(event)


class StubStateMachine:
    def __init__(self, engine=None):
        self.engine = engine
        self.current_state = StubScene()
        self.updates = []
        self.draws = 0

    def update(self, dt):
        self.updates.append(dt)
        if self.engine:
            self.engine.stop()

    def draw(self, screen):
        self.draws += 1


@pytest.fixture()
def engine():
    return GameEngine()


def test_run_without_state_machine_raises(engine) -> None:
    with pytest.raises(RuntimeError):
        engine.run()


def test_quit_and_escape_stop_the_loop(engine) -> None:
    sm = StubStateMachine()
    engine.set_state_machine(sm)

    engine.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert engine.running is False
    assert sm.current_state.events == []

    engine.running = True
    engine.handle_event(pygame.event.Event(pygame.QUIT))
    assert engine.running is False


def test_key_events_forwarded_to_current_scene(engine) -> None:
    sm = StubStateMachine()
    engine.set_state_machine(sm)

    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    engine.handle_event(event)
    assert sm.current_state.events == [event]


def test_run_ticks_in_seconds(engine) -> None:
    sm = StubStateMachine(engine)
    engine.set_state_machine(sm)
    engine.run()

    assert len(sm.updates) == 1
    assert 0.0 <= sm.updates[0] < 1.0
    assert sm.draws == 1
