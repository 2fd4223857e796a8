"""
Cartesian products of value domains.

`KaseGrid` enumerates every combination of N domains as a `Kase`, in
row-major order with the last domain varying fastest:

    domains [1, 2] and [1, 2, 3] -> (1,1) (1,2) (1,3) (2,1) (2,2) (2,3)

Consumers may depend on this order (golden files, report layout), so it
is part of the contract.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Iterable, Iterator, TypeVar

from kaselab.kase import Kase, kase
from kaselab.labels import ArityMismatchError, KaseLabels

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KaseGrid:
    """
    Lazy cartesian product of value domains.

    Each domain is read once into a tuple at construction, so one-shot
    iterables (generators) are fine. Cases are built on demand while
    iterating or indexing; nothing is cached.

    Example:
    ```python
    grid = KaseGrid([1, 2], ["x", "y", "z"], labels=labels("n", "s"))
    len(grid)        # 6
    grid[4]          # Kase(n=2, s='y')
    list(grid)[4] == grid[4]
    ```
    """

    def __init__(
        self, *domains: Iterable[Any], labels: KaseLabels | None = None
    ) -> None:
        """
        Initialize with one iterable of values per case position.

        Args:
            *domains: Value domains, one per position. May be empty.
            labels: Label set with one label per domain.

        Raises:
            ValueError: If no domains are given.
            ArityMismatchError: If *labels* does not have one label per domain.
        """
        if not domains:
            raise ValueError("A grid needs at least one domain")
        self._domains: tuple[tuple[Any, ...], ...] = tuple(tuple(d) for d in domains)
        if labels is None:
            labels = KaseLabels.default(len(self._domains))
        elif labels.arity != len(self._domains):
            raise ArityMismatchError(
                expected=len(self._domains), actual=labels.arity
            )
        self._labels = labels
        logger.debug(
            f"KaseGrid: {len(self._domains)} domain(s) of sizes "
            f"{[len(d) for d in self._domains]}, {len(self)} case(s)"
        )

    @property
    def labels(self) -> KaseLabels:
        """The label set applied to every case."""
        return self._labels

    @property
    def domains(self) -> tuple[tuple[Any, ...], ...]:
        """The materialized domains."""
        return self._domains

    @property
    def arity(self) -> int:
        """Number of positions per case."""
        return len(self._domains)

    def __iter__(self) -> Iterator[Kase]:
        """Yield every combination, last domain fastest."""
        for combo in itertools.product(*self._domains):
            yield kase(*combo, labels=self._labels)

    def __len__(self) -> int:
        """Product of the domain sizes (0 if any domain is empty)."""
        total = 1
        for domain in self._domains:
            total *= len(domain)
        return total

    def __getitem__(self, index: int) -> Kase:
        """
        Get the case at *index* without enumerating the ones before it.

        The ordering matches iteration. Negative indices count from the end.

        Raises:
            IndexError: If index is out of range.
        """
        total = len(self)
        if index < 0:
            index = total + index
        if index < 0 or index >= total:
            raise IndexError(f"Index {index} out of range [0, {total})")

        # Mixed-radix decode, rightmost position fastest
        positions = []
        remaining = index
        for domain in reversed(self._domains):
            positions.append(remaining % len(domain))
            remaining //= len(domain)
        positions.reverse()

        values = [domain[i] for domain, i in zip(self._domains, positions)]
        return kase(*values, labels=self._labels)

    def __repr__(self) -> str:
        sizes = "x".join(str(len(d)) for d in self._domains)
        return f"KaseGrid({sizes}, labels={list(self._labels.labels)})"


def kases(*domains: Iterable[Any], labels: KaseLabels | None = None) -> list[Kase]:
    """
    Return every combination of the given domains as a list of cases.

    Args:
        *domains: Value domains, one per case position.
        labels: Label set with one label per domain. Defaults to ``a1..aN``.

    Returns:
        Cases in row-major order, last domain fastest. Empty if any domain
        is empty.

    Raises:
        ValueError: If no domains are given.
        ArityMismatchError: If *labels* does not have one label per domain.

    Example:
        >>> [c.values for c in kases([1, 2], [1, 2, 3])]
        [(1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3)]
    """
    return list(KaseGrid(*domains, labels=labels))


def times(
    left: Iterable[Kase],
    right: Iterable[Kase],
    combine: Callable[[Kase, Kase], T] = Kase.plus,
) -> list[T]:
    """
    Combine two case lists into their product.

    Every case of *left* is joined with every case of *right*; left is the
    outer loop.

    Args:
        left: Outer cases.
        right: Inner cases. Read once.
        combine: Builds one item from a left and a right case. Defaults to
            `Kase.plus`, which concatenates their elements.

    Example:
        >>> [c.values for c in times(kases([1, 2]), kases(["x"], [True]))]
        [(1, 'x', True), (2, 'x', True)]
    """
    right = tuple(right)
    return [combine(a, b) for a in left for b in right]
