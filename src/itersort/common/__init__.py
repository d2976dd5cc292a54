'''common utilities for the itersort project

## Overview

Helpers shared by the `itersort` modules: module export management,
iterator utilities, logging configuration, and exception classes.
'''

__all__ = []

from .naming import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".naming"))  # NOQA: F405

from .iterlib import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".iterlib"))  # NOQA: F405

from .loglib import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".loglib"))  # NOQA: F405

from .exception import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".exception"))  # NOQA: F405
