from __future__ import annotations
from curvesketch.curves.base import CurveEvaluator

_REGISTRY: dict[str, type[CurveEvaluator]] = {}

def register_evaluator(cls: type[CurveEvaluator]) -> type[CurveEvaluator]:
    """Class decorator to register an evaluator by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key or key == CurveEvaluator.KEY:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls

def create_evaluator(key: str) -> CurveEvaluator:
    cls = _REGISTRY.get(str(key))
    if not cls:
        raise KeyError(f"No curve evaluator registered for key '{key}'")
    return cls()

def list_keys() -> list[str]:
    return list(_REGISTRY.keys())

def label_for(key: str) -> str:
    cls = _REGISTRY.get(str(key))
    return cls.LABEL if cls else str(key)
