import pytest

from core.state_machine import StateMachine


class RecordingState:
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def enter(self, **kwargs):
        self.calls.append((self.name, "enter", kwargs))

    def exit(self):
        self.calls.append((self.name, "exit"))

    def update(self, dt):
        self.calls.append((self.name, "update", dt))

    def draw(self, screen):
        self.calls.append((self.name, "draw", screen))


def test_change_state_exits_previous_and_enters_next() -> None:
    calls = []
    sm = StateMachine()
    sm.add_state("A", RecordingState("A", calls))
    sm.add_state("B", RecordingState("B", calls))

    sm.change_state("A")
    sm.change_state("B", round=2)

    assert calls == [("A", "enter", {}), ("A", "exit"), ("B", "enter", {'round': 2})]
    assert sm.current_name == "B"


def test_update_and_draw_go_to_current_state() -> None:
    calls = []
    sm = StateMachine()
    sm.update(0.1)  # 현재 상태 없음
    sm.add_state("A", RecordingState("A", calls))
    sm.change_state("A")
    sm.update(0.1)
    sm.draw("screen")
    assert calls[1:] == [("A", "update", 0.1), ("A", "draw", "screen")]


def test_unknown_state_raises() -> None:
    sm = StateMachine()
    with pytest.raises(KeyError):
        sm.change_state("MISSING")
