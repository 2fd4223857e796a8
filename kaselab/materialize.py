"""
Turn cases into named, executable test units.

Every function here only binds names to actions. Nothing runs until the
host runner calls a produced `DynamicTest`, and the produced sequences are
generators: they are meant to be consumed once per test run, and each
unit holds only its name and a bound partial of the action. Per-test
environments, when requested, are likewise created only as a test runs.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Iterable, Iterator, Sequence, TypeVar

from kaselab.environment import EnvironmentFactory, run_in_environment
from kaselab.kase import Kase
from kaselab.labels import ArityMismatchError, KaseLabels
from kaselab.naming import display_name, render_value
from kaselab.nodes import DynamicContainer, DynamicTest, TestNode

logger = logging.getLogger(__name__)

E = TypeVar("E")

KaseNamer = Callable[[Kase], str]


def kase_namer(labels: KaseLabels | None, kase_name: KaseNamer | None) -> KaseNamer:
    """Resolve the test-naming options shared by the materializing functions."""
    if labels is not None and kase_name is not None:
        raise ValueError("Pass either labels or kase_name, not both")
    if kase_name is not None:
        return kase_name
    return functools.partial(_display_name_with, labels)


def _display_name_with(labels: KaseLabels | None, kase: Kase) -> str:
    return display_name(kase, labels)


def _bind(
    kase: Kase,
    namer: KaseNamer,
    action: Callable[..., Any],
    environment: EnvironmentFactory | None,
) -> DynamicTest:
    if environment is None:
        executable = functools.partial(action, *kase.values)
    else:
        executable = functools.partial(run_in_environment, environment, kase, action)
    return DynamicTest(display_name=namer(kase), executable=executable)


def as_tests(
    kases: Iterable[Kase],
    action: Callable[..., Any],
    *,
    labels: KaseLabels | None = None,
    kase_name: KaseNamer | None = None,
    environment: EnvironmentFactory | None = None,
) -> Iterator[DynamicTest]:
    """
    Lazily bind each case to *action* as a named test.

    Args:
        kases: Cases, in the order the tests should appear.
        action: Called with the destructured case values when a test runs.
            Raising signals failure; returning normally signals success.
        labels: Label set used to name each test via `display_name`.
        kase_name: Alternative to *labels*: maps a case to its test name.
        environment: Builds a per-test environment from the case. When
            given, each test creates its environment as it runs, calls
            ``action(env, *values)`` and tears the environment down
            afterwards (see `kaselab.environment.run_in_environment`).

    Returns:
        A one-shot iterator of `DynamicTest`, one per case, in input order.
        Names are computed as tests are produced, so an arity mismatch
        between *labels* and a case raises at that point.

    Raises:
        ValueError: If both *labels* and *kase_name* are given.

    Example:
    ```python
    tests = as_tests(kases([1, 2], ["x", "y"]), lambda n, s: check(n, s))
    next(tests).display_name   # "[a1: 1 | a2: x]"
    ```
    """
    namer = kase_namer(labels, kase_name)
    logger.debug(f"Binding tests to {getattr(action, '__name__', action)!r}")
    return (_bind(k, namer, action, environment) for k in kases)


def test_factory(
    *kases: Kase,
    action: Callable[..., Any],
    labels: KaseLabels | None = None,
    kase_name: KaseNamer | None = None,
    environment: EnvironmentFactory | None = None,
) -> Iterator[DynamicTest]:
    """Variadic form of `as_tests`."""
    return as_tests(
        kases, action, labels=labels, kase_name=kase_name, environment=environment
    )


# pytest would otherwise collect it from test modules that import it
test_factory.__test__ = False  # type: ignore[attr-defined]


def as_containers(
    items: Iterable[E],
    children: Callable[[E], Iterable[TestNode]],
    *,
    display_name: Callable[[E], str] = render_value,
) -> Iterator[DynamicContainer]:
    """
    Lazily group child nodes under one container per item.

    Args:
        items: One container is produced per item, in order.
        children: Builds the child nodes of an item. Called only when the
            container's children are walked.
        display_name: Names each container.

    Returns:
        A one-shot iterator of `DynamicContainer`.
    """

    def deferred(item: E) -> Iterator[TestNode]:
        yield from children(item)

    return (
        DynamicContainer(display_name=display_name(item), children=deferred(item))
        for item in items
    )


def nested_tests(
    *domains: Iterable[Any],
    action: Callable[..., Any],
    namers: Sequence[Callable[[Any], str]] | None = None,
) -> Iterator[TestNode]:
    """
    Build a container tree over value domains.

    Each domain except the last becomes a level of containers named after
    its values; the last domain becomes the leaf tests. The action receives
    the values along the path from the root to the leaf.

    Args:
        *domains: Value domains, outermost first.
        action: Called with one value per domain.
        namers: One naming function per domain. Defaults to `render_value`.

    Returns:
        A one-shot iterator of the top-level nodes.

    Raises:
        ValueError: If no domains are given.
        ArityMismatchError: If *namers* does not have one entry per domain.

    Example:
    ```python
    nested_tests(["sqlite", "postgres"], [1, 2], action=check)
    # sqlite
    #   1
    #   2
    # postgres
    #   1
    #   2
    ```
    """
    if not domains:
        raise ValueError("nested_tests needs at least one domain")
    materialized = tuple(tuple(d) for d in domains)
    if namers is None:
        namers = [render_value] * len(materialized)
    elif len(namers) != len(materialized):
        raise ArityMismatchError(
            expected=len(materialized), actual=len(namers), what="namers"
        )
    return _level(materialized, tuple(namers), (), action)


def _level(
    domains: tuple[tuple[Any, ...], ...],
    namers: tuple[Callable[[Any], str], ...],
    path: tuple[Any, ...],
    action: Callable[..., Any],
) -> Iterator[TestNode]:
    domain, rest = domains[0], domains[1:]
    namer = namers[0]
    if not rest:
        return (
            DynamicTest(
                display_name=namer(value),
                executable=functools.partial(action, *path, value),
            )
            for value in domain
        )
    return as_containers(
        domain,
        lambda value: _level(rest, namers[1:], path + (value,), action),
        display_name=namer,
    )
