'''Order-preserving duplicate removal by sorting position handles

## Overview

`itersort` removes duplicate elements from random-access sequences by
sorting a list of integer positions, rather than sorting or hashing the
elements themselves.

```python
from itersort import stable_uniquify

data = [5, 3, 5, 1, 3, 5]
stable_uniquify(data)
assert data == [5, 3, 1]
```

The public API is defined in `itersort.uniquify`, `itersort.relations`
and `itersort.sequence`.
'''

from .common.naming import export, module_all

__all__ = []

from .relations import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".relations"))  # NOQA: F405

from .sequence import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".sequence"))  # NOQA: F405

from .uniquify import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".uniquify"))  # NOQA: F405

from .common.exception import GeneralException, RangeError, SwapError  # NOQA E402
export(__name__, __all__, GeneralException, RangeError, SwapError)
