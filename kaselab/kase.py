"""
Kase: an immutable, fixed-arity tuple of labeled values.

One class covers every arity. Positional access goes through ``a1..aN``
attributes, destructuring, or indexing; generic code (naming,
materialization) works on the untyped `Kase.elements` view.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVarTuple, Unpack

from kaselab._ids import fingerprint_kase
from kaselab.element import KaseElement, element, own_label
from kaselab.labels import KaseLabels
from kaselab.naming import display_name

Ts = TypeVarTuple("Ts")

_POSITIONAL_ATTR = re.compile(r"^a([1-9][0-9]*)$")


@dataclass(frozen=True, repr=False)
class Kase(Generic[Unpack[Ts]]):
    """
    One combination of test inputs.

    Cases compare and hash by their elements. They are never mutated; use
    `Kase.plus` to build a wider case from two narrower ones.

    Attributes:
        elements: The labeled values, in declared order.

    Example:
    ```python
    case = kase(1, "x")
    case.a2          # "x"
    a, b = case      # destructuring yields raw values
    str(case)        # "[a1: 1 | a2: x]"
    ```
    """

    elements: tuple[KaseElement[Any], ...]

    def __post_init__(self) -> None:
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))
        if not self.elements:
            raise ValueError("A case needs at least one element")

    def __getattr__(self, name: str) -> Any:
        match = _POSITIONAL_ATTR.match(name)
        elements = self.__dict__.get("elements")
        if match is None or elements is None:
            raise AttributeError(name)
        position = int(match.group(1))
        if position > len(elements):
            raise AttributeError(
                f"{name!r} is out of range for a case of arity {len(elements)}"
            )
        return elements[position - 1].value

    @property
    def arity(self) -> int:
        """Number of elements."""
        return len(self.elements)

    @property
    def values(self) -> tuple[Any, ...]:
        """The raw values, in order."""
        return tuple(e.value for e in self.elements)

    @property
    def labels(self) -> tuple[str, ...]:
        """The element labels, in order."""
        return tuple(e.label for e in self.elements)

    @property
    def case_id(self) -> str:
        """
        A stable 16-character content fingerprint.

        Raises:
            CanonicalizeError: If a value cannot be canonically encoded.
        """
        return fingerprint_kase(self)

    def display_name(self, labels: KaseLabels | None = None) -> str:
        """Render this case's display name (see `kaselab.naming.display_name`)."""
        return display_name(self, labels)

    def plus(self, other: Kase) -> Kase:
        """Return a new case holding this case's elements followed by *other*'s."""
        return Kase(self.elements + other.elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return tuple(e.value for e in self.elements[index])
        return self.elements[index].value

    def __str__(self) -> str:
        return self.display_name()

    def __repr__(self) -> str:
        inner = ", ".join(f"{e.label}={e.value!r}" for e in self.elements)
        return f"Kase({inner})"


def kase(*values: Unpack[Ts], labels: KaseLabels | None = None) -> Kase[Unpack[Ts]]:
    """
    Create a case from positional values.

    Each value is labeled with its own `HasLabel` label when it has one,
    otherwise with the label set's label for its position.

    Args:
        *values: The case values, in order.
        labels: Label set of the same arity. Defaults to ``a1..aN``.

    Returns:
        A new `Kase`.

    Raises:
        ValueError: If no values are given.
        ArityMismatchError: If *labels* has a different arity.
    """
    if not values:
        raise ValueError("A case needs at least one value")
    if labels is None:
        labels = KaseLabels.default(len(values))
    else:
        labels.require_arity(len(values))

    elements = []
    for value, positional in zip(values, labels.labels):
        label = own_label(value)
        elements.append(element(value, positional if label is None else label))
    return Kase(tuple(elements))
