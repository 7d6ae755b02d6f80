from typing import Callable, Dict, List, Any
from systems.logger import GameLogger

Listener = Callable[[Dict[str, Any]], None]

class EventBus:
    def __init__(self):
        self.listeners: Dict[str, List[Listener]] = {}
        self.logger = GameLogger.get_instance()

    def subscribe(self, event_type: str, callback: Listener):
        """이벤트 리스너 등록 (중복 등록은 무시)"""
        callbacks = self.listeners.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, event_type: str, callback: Listener):
        """이벤트 리스너 제거"""
        callbacks = self.listeners.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def publish(self, event_type: str, data: Dict[str, Any] = None):
        """이벤트 발생 및 전파. 리스너 하나가 실패해도 나머지는 계속 호출"""
        data = dict(data) if data else {}
        data.setdefault('event_type', event_type)

        # 복사본으로 순회 (콜백 실행 중 구독 변경 대비)
        for callback in self.listeners.get(event_type, [])[:]:
            try:
                callback(data)
            except Exception as e:
                self.logger.error("EVENT", f"Error in listener for {event_type}: {e}")
