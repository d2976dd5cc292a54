## itersort.cmdline

"""Base class for argparse command line applications"""

import argparse
from dataclasses import dataclass
import logging
import sys
from typing import Sequence, Tuple

from typing_extensions import Self

from .common.loglib import LogLevel, ensure_log_levels
from .common.naming import export, origin_name


@dataclass(init=False, eq=False, order=False, frozen=True)
class ArgparseAction():
    ## approximation of a StrEnum class,
    ## limited to the actions used here
    STORE: str = "store"
    STORE_TRUE: str = "store_true"
    APPEND: str = "append"
    COUNT: str = "count"


class Cmdline:
    """base class for a command line application

    An implementing class provides `configure_argparser()` and a `main()`
    method, and may override `init_argparser()`, `program_name`
    and `log_level`
    """

    def __init__(self):
        self.option_namespace = argparse.Namespace()

    @classmethod
    def init_argparser(cls, instance: Self) -> argparse.ArgumentParser:
        """Initialize and return a new argument parser for `instance`

        This class method is called within `consume_args()`. It may be
        overridden in an implementing class, such as to provide further
        arguments to the `argparse.ArgumentParser` constructor.
        """
        return argparse.ArgumentParser(prog=instance.program_name)

    @property
    def program_name(self) -> str:
        return self.__class__.__name__.lower()

    def configure_argparser(self, parser: argparse.ArgumentParser):
        """add arguments to the `parser` for this application

        The implementing class should override this method.
        """
        pass

    def consume_args(self, args: Sequence[str]) -> Tuple[Sequence[str], argparse.ArgumentParser]:
        """parse a sequence of command line arguments for this application

        Initializes a parser with `init_argparser()`, configures it with
        `configure_argparser()`, then parses `args` onto the
        `option_namespace`.

        Returns a tuple of the list of unrecognized args and the parser.
        """
        parser = self.__class__.init_argparser(self)
        self.configure_argparser(parser)
        _, other_args = parser.parse_known_args(args, namespace=self.option_namespace)
        return (other_args, parser,)

    @property
    def log_level(self) -> int:
        ## default protocol method
        return LogLevel.INFO

    @property
    def logger(self) -> logging.Logger:
        if hasattr(self, "_logger"):
            return self._logger
        else:
            ensure_log_levels()
            logger = logging.getLogger(origin_name(self.__class__))
            logger.setLevel(self.log_level)
            self.add_log_handlers(logger)
            self._logger = logger
            return logger

    def add_log_handlers(self, logger: logging.Logger):
        handler = logging.StreamHandler(stream=sys.stderr)
        datefmt = ""
        level = self.log_level
        if level < LogLevel.CRITICAL:
            datefmt = "%F %X"
        # fmt: off
        formatter = logging.Formatter('[%(process)d %(asctime)s %(thread)x] [%(levelname)s] %(message)s', datefmt=datefmt)
        # fmt: on
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)


# autopep8: off
# fmt: off
__all__ = []
export(__name__, __all__, ArgparseAction, Cmdline)
