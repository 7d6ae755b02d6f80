import logging
from settings import LOG_LEVEL

class GameLogger:
    """
    카테고리 태그가 붙은 로그를 남기는 싱글톤 로거입니다.
    출력 형식: [CATEGORY] message
    """
    _instance = None

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = GameLogger()
        return cls._instance

    def __init__(self, name="reflex"):
        if GameLogger._instance is not None:
            raise Exception("This class is a singleton!")
        GameLogger._instance = self

        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%H:%M:%S"))
            self.logger.addHandler(handler)
        self.logger.setLevel(LOG_LEVEL)

    def _format(self, category, message):
        return f"[{category}] {message}"

    def debug(self, category, message):
        self.logger.debug(self._format(category, message))

    def info(self, category, message):
        self.logger.info(self._format(category, message))

    def warning(self, category, message):
        self.logger.warning(self._format(category, message))

    def error(self, category, message):
        self.logger.error(self._format(category, message))
