from __future__ import annotations

import math
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np


def _to_jsonable(value: Any) -> Any:
    """Convert a value into something ``json.dumps`` accepts.

    Records and wrappers serialize through their own ``to_js``; numpy
    values are unwrapped; tuples become lists. Non-finite floats become
    ``None`` so the output stays strict JSON. Anything unknown falls back
    to ``str``.
    """
    if isinstance(value, Enum):
        return _to_jsonable(value.value)
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value) if math.isfinite(value) else None
    if hasattr(value, "to_js"):
        return value.to_js()
    if isinstance(value, np.ndarray):
        return [_to_jsonable(v) for v in value.tolist()]
    if isinstance(value, np.generic):
        return _to_jsonable(value.item())
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_jsonable(getattr(value, f.name)) for f in fields(value)}
    return str(value)


def _present(entries: Dict[str, Any]) -> Dict[str, Any]:
    """Drop absent (``None``) entries and convert the rest."""
    return {k: _to_jsonable(v) for k, v in entries.items() if v is not None}


def _freeze(values: Optional[Iterable[Any]]) -> Optional[Tuple[Any, ...]]:
    """Store a sequence as a tuple so records stay immutable."""
    if values is None or isinstance(values, tuple):
        return values
    if isinstance(values, np.ndarray):
        return tuple(values.tolist())
    if isinstance(values, (str, bytes)):
        raise TypeError(f"Expected a sequence of values, got {type(values).__name__}")
    return tuple(values)


def _join_tokens(tokens: Optional[Iterable[Enum]]) -> Optional[str]:
    """Encode a sequence of enum tokens as an ``a+b`` string.

    Order and repeats are kept as given.
    """
    if tokens is None:
        return None
    return "+".join(str(t.value) for t in tokens)
