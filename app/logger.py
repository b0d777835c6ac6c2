import logging

from pythonjsonlogger import jsonlogger

from .config import get_settings


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


class Logger(logging.LoggerAdapter):
    _instance = None
    _initialized = False

    def __new__(cls) -> "Logger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if Logger._initialized:
            return

        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "@timestamp", "levelname": "log_level"},
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)

        base = logging.getLogger("site_chat")
        # settings loads .env before the level is read
        base.setLevel(resolve_level(get_settings().log_level))
        base.addHandler(handler)
        base.propagate = False

        super().__init__(base, {})
        Logger._initialized = True

    def process(self, msg, kwargs):
        # keyword fields become json extras: logger.info("done", flow="answer")
        passthrough = {
            key: kwargs.pop(key)
            for key in ("exc_info", "stack_info", "stacklevel")
            if key in kwargs
        }
        if kwargs:
            passthrough["extra"] = kwargs
        return msg, passthrough


logger = Logger()
