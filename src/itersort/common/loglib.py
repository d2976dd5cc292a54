## loglib - itersort.common

from enum import Enum, IntEnum
from .naming import bind_enum, export
from .iterlib import merge_map
import logging
import logging.config
import os
## type hints
from types import ModuleType
from typing import Optional, Union, Type


class LogLevel(IntEnum):
    """log level enum, extended with a `TRACE` level

    `TRACE` is defined at one half of the priority of `DEBUG`. The
    algorithms in `itersort.uniquify` log their per-call counts at
    this level.

    ## See Also

    `ensure_log_levels()`
    """
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    ## new: TRACE log level
    TRACE = int(logging.DEBUG / 2)
    NOTSET = logging.NOTSET

bind_enum(LogLevel, __name__)

VERBOSE_ENV = "ITERSORT_LOG_VERBOSE"


def ensure_log_levels(level_enum: Enum = LogLevel):
    """register a level name with `logging` for each member of `level_enum`"""
    levels = logging.getLevelNamesMapping().values()
    for m in level_enum.__members__.values():
        value = m.value
        if value not in levels:
            logging.addLevelName(value, m.name)


def default_level() -> LogLevel:
    """`TRACE` when the `ITERSORT_LOG_VERBOSE` environment variable is set, else `WARNING`"""
    return LogLevel.TRACE if VERBOSE_ENV in os.environ else LogLevel.WARNING


def create_logging_config(
    # fmt: off
    name: Optional[str] = "log",
    disable_existing_loggers: bool = False,
    incremental: bool = False,
    handler: Optional[str] = "consoleHandler",
    handler_class: Union[Type, str] = logging.StreamHandler,
    level: LogLevel = LogLevel.INFO,
    **kwargs
    # fmt: on
):
    """Return a mapping for `logging.config.dictConfig()`

    ## Usage

    `name`
    : the name of the logger to configure

    `handler`
    : if not a _falsey_ value, the name of a handler to create for the
      logger, of the class `handler_class` and at the provided `level`

    `handler_class`
    : a class, or the dotted name of a class

    `kwargs`
    : further configuration, merged onto the result with `merge_map()`
    """
    config = {
        "version": 1,
        "disable_existing_loggers": disable_existing_loggers,
        "incremental": incremental,
        "loggers": {name: {"level": level}},
    }
    if handler:
        config['loggers'][name]['handlers'] = [handler]
        if isinstance(handler_class, str):
            clsname = handler_class
        else:
            clsname = handler_class.__module__ + "." + handler_class.__name__
        handler_config = {
            'class': clsname,
            'level': level
        }
        config['handlers'] = dict()
        config['handlers'][handler] = handler_config
    merge_map(kwargs, config)
    return config


def get_logger(context: Union[str, Type, ModuleType], **args) -> logging.Logger:
    """return a logger for `context`, configured per `args`

    ## Usage

    `context`
    : a logger name, or a class or module. For a class, the logger
      name is the qualified class name.

    `args`
    : passed to `create_logging_config()`. A `name` in `args` overrides
      the name determined from `context`.
    """
    config = dict(**args)
    if "name" in args:
        name = args["name"]
    elif isinstance(context, str):
        name = context
    else:
        has_module = hasattr(context, "__module__")
        has_name = hasattr(context, "__name__")
        if has_module and has_name:
            name = "%s.%s" % (context.__module__, context.__name__)
        elif has_name:
            name = context.__name__
        elif has_module:
            name = context.__module__
        else:
            name = "log"
    config["name"] = name
    ensure_log_levels()
    logger = logging.getLogger(name)
    dct = create_logging_config(**config)
    logging.config.dictConfig(dct)
    return logger


__all__ = ["VERBOSE_ENV"]
export(__name__, LogLevel, ensure_log_levels, default_level, create_logging_config, get_logger)
