"""
pytest integration.

pytest has no native dynamic test nodes, so cases and node trees are
turned into ``pytest.param`` entries for ``pytest.mark.parametrize``:

```python
CASES = kases(["sqlite", "postgres"], [1, 2], labels=labels("db", "n"))

@parametrize("db, n", CASES)
def test_insert(db, n):
    ...
# test_insert[[db: sqlite | n: 1]], test_insert[[db: sqlite | n: 2]], ...
```

Duplicate ids are left to pytest, which suffixes them.
"""

from __future__ import annotations

from typing import Any, Iterable

import pytest

from kaselab.kase import Kase
from kaselab.labels import ArityMismatchError, KaseLabels
from kaselab.materialize import KaseNamer, kase_namer
from kaselab.nodes import TestNode, iter_tests


def pytest_params(
    kases: Iterable[Kase],
    labels: KaseLabels | None = None,
    kase_name: KaseNamer | None = None,
) -> list[Any]:
    """
    Convert cases to ``pytest.param`` entries named by their display names.

    Raises:
        ValueError: If both *labels* and *kase_name* are given.
        ArityMismatchError: If *labels* does not match a case.
    """
    namer = kase_namer(labels, kase_name)
    return [pytest.param(*k.values, id=namer(k)) for k in kases]


def parametrize(
    argnames: str | list[str] | tuple[str, ...],
    kases: Iterable[Kase],
    labels: KaseLabels | None = None,
    kase_name: KaseNamer | None = None,
) -> pytest.MarkDecorator:
    """
    Build a ``pytest.mark.parametrize`` marker over cases.

    Args:
        argnames: Test function argument names, one per case position,
            comma-separated or as a sequence.
        kases: The cases.
        labels: Label set used for test ids.
        kase_name: Alternative to *labels*: maps a case to its test id.

    Raises:
        ArityMismatchError: If a case's arity differs from the argument count.
    """
    if isinstance(argnames, str):
        names = [n.strip() for n in argnames.split(",") if n.strip()]
    else:
        names = list(argnames)
    params = pytest_params(kases, labels=labels, kase_name=kase_name)
    for param in params:
        if len(param.values) != len(names):
            raise ArityMismatchError(
                expected=len(param.values), actual=len(names), what="argnames"
            )
    return pytest.mark.parametrize(names, params)


def node_params(nodes: Iterable[TestNode], sep: str = " / ") -> list[Any]:
    """
    Flatten a node tree into ``pytest.param`` entries, one per leaf test.

    Each entry holds the `DynamicTest`; its id joins the container path and
    the test name with *sep*. Run them from a single test function:

    ```python
    @pytest.mark.parametrize("test", node_params(nested_tests(...)))
    def test_matrix(test):
        test()
    ```
    """
    return [pytest.param(test, id=sep.join(path)) for path, test in iter_tests(nodes)]
