import random
from components.reflex import (
    Side, Key, KEY_TO_SIDE, ViewModel,
    Init, Preparing, Running, FalseStart, Result,
)
from systems.logger import GameLogger
from settings import PREPARE_TIME, TIME_PRECISION

class ReflexSystem:
    """
    반응속도 게임의 상태 머신입니다.

    - advance(dt): 시간 경과 (카운트다운 감소 / 경과 시간 누적)
    - handle_key(key): 키 입력에 따른 상태 전이
    - current_view(): 현재 상태 -> ViewModel (부작용 없음)

    rng는 getrandbits()를 가진 객체라면 무엇이든 주입 가능 (테스트용 고정 시퀀스 등).
    """

    def __init__(self, rng=None, prepare_time=PREPARE_TIME, event_bus=None):
        self.rng = rng if rng is not None else random.Random()
        self.prepare_time = prepare_time
        self.event_bus = event_bus
        self.logger = GameLogger.get_instance()
        self._state = Init()

    @property
    def state(self):
        return self._state

    def reset(self):
        self._set_state(Init())

    def _random_side(self):
        return Side.LEFT if self.rng.getrandbits(1) else Side.RIGHT

    def _start_round(self):
        return Preparing(remaining_time=self.prepare_time)

    def _set_state(self, new_state):
        old_state = self._state
        self._state = new_state

        if type(old_state) is type(new_state):
            return

        self.logger.debug("GAME", f"{type(old_state).__name__} -> {type(new_state).__name__}")
        if self.event_bus is None:
            return

        self.event_bus.publish("STATE_CHANGED", {'old_state': old_state, 'new_state': new_state})
        if isinstance(new_state, Result):
            self.event_bus.publish("ROUND_FINISHED", {
                'correct': new_state.correct,
                'elapsed_time': new_state.elapsed_time,
                'side': new_state.side
            })
        elif isinstance(new_state, FalseStart):
            self.event_bus.publish("FALSE_START")

    def advance(self, dt):
        state = self._state

        if isinstance(state, Preparing):
            remaining_time = state.remaining_time - dt
            if remaining_time < 0:
                # 초과분은 버리고 0부터 시작
                self._set_state(Running(elapsed_time=0.0, side=self._random_side()))
            else:
                self._set_state(Preparing(remaining_time=remaining_time))

        elif isinstance(state, Running):
            self._set_state(Running(elapsed_time=state.elapsed_time + dt, side=state.side))

        # Init / FalseStart / Result: 키 입력 전까지 변화 없음

    def handle_key(self, key):
        state = self._state

        if isinstance(state, Preparing):
            self._set_state(FalseStart())

        elif isinstance(state, Running):
            guess = KEY_TO_SIDE.get(key)
            if guess is not None:
                self._set_state(Result(
                    elapsed_time=state.elapsed_time,
                    side=state.side,
                    correct=(guess == state.side)
                ))

        elif isinstance(state, (Init, Result, FalseStart)):
            if key == Key.SPACE:
                self._set_state(self._start_round())

    @staticmethod
    def format_time(seconds):
        return f"{seconds:.{TIME_PRECISION}f}"

    def current_view(self):
        state = self._state

        if isinstance(state, Preparing):
            return ViewModel(f"time to start: {self.format_time(state.remaining_time)}")

        if isinstance(state, Running):
            return ViewModel(f"elapsed time: {self.format_time(state.elapsed_time)}", state.side)

        if isinstance(state, FalseStart):
            return ViewModel("False start!")

        if isinstance(state, Result):
            outcome = "win" if state.correct else "lose"
            return ViewModel(f"You {outcome}! Elapsed time: {self.format_time(state.elapsed_time)}", state.side)

        return ViewModel("Press <Space> to start")
