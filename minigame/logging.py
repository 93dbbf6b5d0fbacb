"""
Minigame Logging

Leveled console logging shared by the runtime and the games. Works the same
natively and in a pygbag (WASM) build, where lines are mirrored to the
browser console.

Usage:
    from minigame.logging import get_logger

    log = get_logger('scheduler')
    log.trace("Tick %d", tick)
    log.info("Paused")

Levels are resolved per logger name. A dotted name falls back to its
parents, so 'astronum.generator' uses the 'astronum' level unless it has
its own.

Configuration:
    Environment variables (read once at import):
        MINIGAME_LOG_LEVEL=DEBUG          # Default level
        MINIGAME_LOG_SCHEDULER=TRACE      # Level for 'scheduler'
        MINIGAME_LOG_ASTRONUM=WARNING     # Level for 'astronum' and 'astronum.*'

    Or programmatically:
        from minigame.logging import configure_logging
        configure_logging(level='DEBUG', modules={'scheduler': 'INFO'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Callable, Dict, Mapping, Optional


class LogLevel(IntEnum):
    """Severity levels, numerically compatible with the logging module."""
    TRACE = 5      # Per-tick detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100

    @classmethod
    def parse(cls, name: str) -> 'LogLevel':
        """Level for a name such as 'debug' or 'WARN'; INFO if unknown."""
        key = name.strip().upper()
        if key == 'WARN':
            key = 'WARNING'
        return cls.__members__.get(key, cls.INFO)


# Short labels used in the output
_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

ENV_PREFIX = 'MINIGAME_LOG_'

Output = Callable[[str], None]


def _console(line: str) -> None:
    print(line)
    if sys.platform == 'emscripten':
        try:
            import platform
            platform.window.console.log(line)
        except (ImportError, AttributeError):
            pass


class _Settings:
    """Process-wide level table and output."""

    def __init__(self):
        self.default = LogLevel.INFO
        self.modules: Dict[str, LogLevel] = {}
        self.output: Output = _console

    def level_for(self, key: str) -> LogLevel:
        while key:
            if key in self.modules:
                return self.modules[key]
            key = key.rpartition('.')[0]
        return self.default


_settings = _Settings()


def _module_key(name: str) -> str:
    return name.strip().lower().replace('/', '.')


def configure_logging(
    level: Optional[str] = None,
    modules: Optional[Mapping[str, str]] = None,
    output: Optional[Output] = None,
) -> None:
    """
    Change levels or output at runtime.

    Args:
        level: New default level; unchanged if None
        modules: Logger name -> level overrides to add
        output: Callable receiving each formatted line; unchanged if None
    """
    if level is not None:
        _settings.default = LogLevel.parse(level)
    for name, mod_level in (modules or {}).items():
        _settings.modules[_module_key(name)] = LogLevel.parse(mod_level)
    if output is not None:
        _settings.output = output


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> None:
    """Apply MINIGAME_LOG_* variables from `environ` (os.environ by default)."""
    environ = os.environ if environ is None else environ
    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX):]
        if name == 'LEVEL':
            _settings.default = LogLevel.parse(value)
        else:
            # MINIGAME_LOG_ASTRONUM_GENERATOR configures 'astronum_generator'
            _settings.modules[_module_key(name)] = LogLevel.parse(value)


def reset_logging() -> None:
    """Back to INFO for everything, printing to the console."""
    _settings.default = LogLevel.INFO
    _settings.modules.clear()
    _settings.output = _console


def disable_logging() -> None:
    """Silence every logger."""
    _settings.default = LogLevel.OFF
    _settings.modules.clear()


load_env_config()


class MinigameLogger:
    """Named logger writing "[name] LEVEL: message" lines."""

    def __init__(self, name: str):
        self.name = name
        self._key = _module_key(name)

    @property
    def level(self) -> LogLevel:
        """Effective level after module and parent overrides."""
        return _settings.level_for(self._key)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        """Format msg % args and write it if `level` is enabled."""
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        _settings.output(f"[{self.name}] {_LABELS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self.log(LogLevel.CRITICAL, msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR, followed by the traceback being handled."""
        self.log(LogLevel.ERROR, msg, *args)
        if sys.exc_info()[0] is None:
            return
        for line in traceback.format_exc().rstrip().splitlines():
            self.log(LogLevel.ERROR, "  %s", line)


@lru_cache(maxsize=64)
def get_logger(name: str) -> MinigameLogger:
    """
    Get the logger for `name`.

    Loggers are cached: repeated calls with the same name return the same
    instance.

    Args:
        name: Logger name (e.g., 'scheduler', 'astronum.generator')
    """
    return MinigameLogger(name)
