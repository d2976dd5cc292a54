# itersort.common.exception

from .naming import export


class GeneralException(Exception):
    """exception class storing keyword arguments as attributes

    Each keyword argument is bound as an attribute of the exception and
    is shown in its `str()` and `repr()` forms after the positional args.
    """
    def __init__(self, *args, **kwargs):
        items = kwargs.items()
        super().__init__(*args)
        self._keywords = kwargs
        for it in items:
            setattr(self, str(it[0]), it[1])

    def _opts_str(self):
        tail_args = [str(val) for val in self.args]
        tail_args.extend(
            [str(k) + "=" + str(self._keywords[k]) for k in self._keywords]
        )
        return ", ".join(tail_args)

    def __repr__(self):
        clsname = self.__class__.__name__
        return clsname + "(" + self._opts_str() + ")"

    def __str__(self):
        return "(" + self._opts_str() + ")"


class RangeError(GeneralException, IndexError):
    """raised for a `begin`, `end` pair not denoting a range within a sequence

    Attributes: `begin`, `end`, `size`
    """
    pass


class SwapError(GeneralException, RuntimeError):
    """raised when exchanging two elements of a sequence has failed

    `position` is the element being moved, and `boundary` is the end of the
    compacted region at the time of failure, being the destination of the
    exchange. The original exception is available as `__cause__`.
    """
    pass


# autopep8: off
# fmt: off
__all__ = []
export(__name__, __all__, GeneralException, RangeError, SwapError)
