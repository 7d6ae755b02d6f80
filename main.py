from core.engine import GameEngine
from core.state_machine import StateMachine
from states.reflex_state import ReflexState

def main():
    # 1. 엔진 초기화
    engine = GameEngine()

    # 2. 상태 머신 초기화
    sm = StateMachine()
    sm.add_state("REFLEX", ReflexState(engine))
    sm.change_state("REFLEX")

    # 3. 엔진에 상태 머신 주입
    engine.set_state_machine(sm)

    # 4. 게임 실행
    engine.run()

if __name__ == "__main__":
    main()
