"""
Auto-import all curve evaluator modules to ensure registration side-effects run.

After importing this package, `registry.list_keys()` and `registry.create_evaluator()`
will know about all available curve types.
"""
from __future__ import annotations

import importlib
import pkgutil

for _module in pkgutil.iter_modules(__path__, __name__ + "."):
    importlib.import_module(_module.name)
