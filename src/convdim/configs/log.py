from __future__ import annotations

from _collections_abc import dict_items, dict_keys, dict_values
from logging import FileHandler, Formatter, Logger, StreamHandler, getLogger
from pprint import pformat
from typing import Any, ClassVar

from devtools import pformat as pydantic_pformat
from pydantic import BaseModel

from ..utils.env import ConvDimEnv


class Color:
    red: ClassVar[str] = "\x1b[31m"
    green: ClassVar[str] = "\x1b[32m"
    yellow: ClassVar[str] = "\x1b[33m"
    blue: ClassVar[str] = "\x1b[34m"
    magenta: ClassVar[str] = "\x1b[35m"
    cyan: ClassVar[str] = "\x1b[36m"
    white: ClassVar[str] = "\x1b[97m"


class Loggable:
    log_name: ClassVar[str] = "main"
    """The name to use when calling the log function"""
    color: ClassVar[str] = Color.white
    """Chose a color to use when printing"""

    _logger: ClassVar[Logger]
    _loggers: ClassVar[set[str]] = set()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.log_name not in cls._loggers:
            cls._loggers.add(cls.log_name)
            cls._logger = cls._configure_new_logger()

    @classmethod
    def _configure_new_logger(cls):
        """Configure a logger writing debug records to a file and the rest to stderr"""
        logger = getLogger(f"convdim-{cls.log_name}")

        if logger.hasHandlers():
            # Avoid adding duplicate handlers
            return logger

        log_p = ConvDimEnv.tmp_log_p / cls.log_name
        log_p.mkdir(exist_ok=True)

        # FILES ====================
        debug_handler = FileHandler(log_p / "debug.txt", mode="a", delay=True)
        debug_handler.setFormatter(
            Formatter("PID %(process)d|%(asctime)s|%(levelname)s|%(message)s")
        )
        debug_handler.setLevel("DEBUG")
        logger.addHandler(debug_handler)

        # CLI ====================
        # Stream handlers default to stderr, stdout only carries results
        colors = [("INFO", ""), ("WARNING", Color.yellow), ("ERROR", Color.red)]
        for level, color in colors:
            handler = StreamHandler()
            reset = "\033[0m" if color else ""
            handler.setFormatter(
                Formatter(
                    f"{cls.color}{cls._log_prefix()}\033[0m{color}%(message)s{reset}"
                )
            )
            handler.setLevel(level)
            levelno = handler.level
            handler.addFilter(lambda record, levelno=levelno: record.levelno == levelno)
            logger.addHandler(handler)

        logger.setLevel("DEBUG")
        logger.propagate = False

        return logger

    @classmethod
    def _log_prefix(cls) -> str:
        return f"[{cls.log_name.capitalize()}] " if cls.log_name else ""

    @classmethod
    def _resolve_msg(cls, msg: tuple[Any, ...]):
        new_msg = []
        for m in msg:
            if isinstance(m, (dict_items, dict_keys, dict_values)):
                m = list(m)
            if isinstance(m, (dict, list, set)):
                new_msg.append(pformat(m))
            elif isinstance(m, BaseModel):
                new_msg.append(pydantic_pformat(m))
            else:
                new_msg.append(f"{m} ")
        return "".join(new_msg).strip()

    @classmethod
    def debug(cls, *msg: Any):
        cls._logger.debug(cls._resolve_msg(msg))

    @classmethod
    def info(cls, *msg: Any):
        cls._logger.info(cls._resolve_msg(msg))

    @classmethod
    def warn(cls, *msg: Any):
        cls._logger.warning(cls._resolve_msg(msg))

    @classmethod
    def error(cls, *msg: Any):
        cls._logger.error(cls._resolve_msg(msg))


# Define the main logger on loggable
Loggable._logger = Loggable._configure_new_logger()
Loggable._loggers.add(Loggable.log_name)
