"""
Case identity (internal).

A case is identified by its elements in positional order. Each element
encodes as a ``[label, value]`` pair and the whole list is hashed, so two
cases holding the same values under different labels get different ids.

Values encode to JSON-compatible data. JSON scalars pass through; every
other supported type becomes a one-key object naming its kind, so that for
example the float ``1.0`` and the string ``"1.0"`` never collide:

- ``float`` -> ``{"float": repr}`` (NaN and infinities are rejected)
- ``Enum`` member -> ``{"enum": "Qualname.MEMBER"}``
- ``bytes`` -> ``{"bytes": hex}``
- ``list`` / ``tuple`` -> JSON array
- ``set`` / ``frozenset`` -> ``{"set": [...]}`` in encoded order
- ``dict`` -> ``{"map": [[key, value], ...]}`` in encoded key order
- dataclass instance -> ``{"dataclass": qualname, "fields": {...}}``
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
import math
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kaselab.kase import Kase


class CanonicalizeError(Exception):
    """Raised when a case value has no stable encoding."""


def _dumps(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _encode(value: Any) -> Any:
    # Before the scalar check: IntEnum and StrEnum members are ints and strs
    if isinstance(value, Enum):
        return {"enum": f"{type(value).__qualname__}.{value.name}"}
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise CanonicalizeError(f"{value!r} cannot identify a case")
        return {"float": repr(value)}
    if isinstance(value, bytes):
        return {"bytes": value.hex()}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return {"set": sorted((_encode(item) for item in value), key=_dumps)}
    if isinstance(value, dict):
        pairs = [[_encode(k), _encode(v)] for k, v in value.items()]
        return {"map": sorted(pairs, key=lambda pair: _dumps(pair[0]))}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            "dataclass": type(value).__qualname__,
            "fields": {
                f.name: _encode(getattr(value, f.name))
                for f in dataclasses.fields(value)
            },
        }
    raise CanonicalizeError(
        f"Cannot identify a case by a {type(value).__name__} value: {value!r}"
    )


def encode_kase(kase: Kase) -> str:
    """
    Encode a case as compact JSON.

    Raises:
        CanonicalizeError: If a value has no stable encoding.
    """
    return _dumps([[e.label, _encode(e.value)] for e in kase.elements])


def fingerprint_kase(kase: Kase) -> str:
    """
    Compute a stable fingerprint for a case.

    Returns:
        The first 16 hex characters of the SHA-256 of `encode_kase`.

    Raises:
        CanonicalizeError: If a value has no stable encoding.
    """
    return hashlib.sha256(encode_kase(kase).encode("utf-8")).hexdigest()[:16]
