"""
KaseElement: a single case value paired with its display label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class HasLabel(Protocol):
    """
    Protocol for values that name themselves inside a case.

    When a value passed to `kase()` exposes a string ``label`` attribute,
    that label is used instead of the positional one from the label set.

    Example:
    ```python
    @dataclass(frozen=True)
    class Dialect:
        value: str
        label: str = "dialect"

    kase(Dialect("sqlite"), 3).elements[0].label  # "dialect"
    ```
    """

    @property
    def label(self) -> str:
        """The label to display for this value."""
        ...


@dataclass(frozen=True)
class KaseElement(Generic[T]):
    """
    One labeled value of a case.

    Attributes:
        value: The argument value handed to the test action.
        label: The human-readable label shown in display names.
    """

    value: T
    label: str

    def __iter__(self):
        # (label, value) unpacking, the order used when rendering
        yield self.label
        yield self.value

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"


def own_label(value: Any) -> str | None:
    """Return the label a value carries for itself, if any."""
    if isinstance(value, HasLabel) and isinstance(value.label, str):
        return value.label
    return None


def element(value: T, label: str) -> KaseElement[T]:
    """Create a `KaseElement`."""
    return KaseElement(value=value, label=label)
