"""Class loader: resolve ``module:Class`` or ``path/to/file.py:Class`` targets."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path


def load_class(target: str) -> type:
    """Import and return the class named by ``target``.

    Args:
        target: ``package.module:ClassName`` or ``path/to/models.py:ClassName``
    """
    module_ref, sep, class_name = target.rpartition(":")
    if not sep or not module_ref or not class_name:
        raise ValueError(f"Target must look like 'module:Class', got '{target}'")

    if module_ref.endswith(".py"):
        path = Path(module_ref).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Models path not found: {module_ref}")
        # Add parent to sys.path so import works
        parent = str(path.parent)
        if parent not in sys.path:
            sys.path.insert(0, parent)
        module = importlib.import_module(path.stem)
    else:
        module = importlib.import_module(module_ref)

    obj = getattr(module, class_name, None)
    if not isinstance(obj, type):
        raise ValueError(f"'{class_name}' is not a class in {module_ref}")
    return obj
