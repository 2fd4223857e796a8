"""
KaseLabels: per-arity field labels plus display-name formatting.

A label set is shared read-only by every case it names. Its arity (the
number of labels) must match the arity of each case it is used with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DELIMITER_DEFAULT = ": "
SEPARATOR_DEFAULT = " | "
PREFIX_DEFAULT = "["
POSTFIX_DEFAULT = "]"


class ArityMismatchError(ValueError):
    """Raised when a label set and a case (or argument list) differ in arity."""

    def __init__(self, expected: int, actual: int, what: str = "labels") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Arity mismatch: expected {expected} element(s) but {what} has {actual}"
        )


def default_label(position: int) -> str:
    """Return the default label for a 1-based position (``"a1"``, ``"a2"``, ...)."""
    return f"a{position}"


@dataclass(frozen=True)
class KaseLabels:
    """
    Labels and formatting options for cases of one arity.

    Attributes:
        labels: One label per case position.
        delimiter: Placed between a label and its rendered value.
        separator: Placed between rendered elements.
        prefix: Placed before the whole name.
        postfix: Placed after the whole name.
    """

    labels: tuple[str, ...]
    delimiter: str = DELIMITER_DEFAULT
    separator: str = SEPARATOR_DEFAULT
    prefix: str = PREFIX_DEFAULT
    postfix: str = POSTFIX_DEFAULT

    def __post_init__(self) -> None:
        # Accept any sequence, store a tuple
        if not isinstance(self.labels, tuple):
            object.__setattr__(self, "labels", tuple(self.labels))

    @classmethod
    def default(cls, arity: int) -> KaseLabels:
        """Return the label set ``a1..aN`` with default formatting."""
        return cls(labels=tuple(default_label(i) for i in range(1, arity + 1)))

    @property
    def arity(self) -> int:
        """Number of positions this label set names."""
        return len(self.labels)

    def require_arity(self, arity: int) -> None:
        """
        Fail fast if this label set cannot name a case of *arity* elements.

        Raises:
            ArityMismatchError: If the arities differ.
        """
        if arity != self.arity:
            raise ArityMismatchError(expected=arity, actual=self.arity)

    def with_format(
        self,
        delimiter: str | None = None,
        separator: str | None = None,
        prefix: str | None = None,
        postfix: str | None = None,
    ) -> KaseLabels:
        """Return a copy with the given formatting options replaced."""
        return KaseLabels(
            labels=self.labels,
            delimiter=self.delimiter if delimiter is None else delimiter,
            separator=self.separator if separator is None else separator,
            prefix=self.prefix if prefix is None else prefix,
            postfix=self.postfix if postfix is None else postfix,
        )

    def __iter__(self):
        return iter(self.labels)

    def __len__(self) -> int:
        return self.arity


def labels(
    *names: str | None,
    arity: int | None = None,
    delimiter: str = DELIMITER_DEFAULT,
    separator: str = SEPARATOR_DEFAULT,
    prefix: str = PREFIX_DEFAULT,
    postfix: str = POSTFIX_DEFAULT,
) -> KaseLabels:
    """
    Create a label set.

    Each position takes the given name, or its default ``"a<i>"`` when the
    name is ``None`` or omitted. Duplicate names are allowed.

    Args:
        *names: Labels by position.
        arity: Total number of positions. Trailing positions without a name
            get defaults. Defaults to ``len(names)``.
        delimiter: Between a label and its value.
        separator: Between elements.
        prefix: Before the name.
        postfix: After the name.

    Returns:
        An immutable `KaseLabels`.

    Raises:
        ArityMismatchError: If more names than *arity* are given.
        ValueError: If the resulting arity is zero.

    Example:
        >>> labels("dialect", None, arity=3).labels
        ('dialect', 'a2', 'a3')
    """
    if arity is None:
        arity = len(names)
    if len(names) > arity:
        raise ArityMismatchError(expected=arity, actual=len(names))
    if arity < 1:
        raise ValueError("A label set needs at least one position")

    padded = list(names) + [None] * (arity - len(names))
    resolved = tuple(
        default_label(i) if name is None else name
        for i, name in enumerate(padded, start=1)
    )
    return KaseLabels(
        labels=resolved,
        delimiter=delimiter,
        separator=separator,
        prefix=prefix,
        postfix=postfix,
    )
