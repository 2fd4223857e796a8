"""
kaselab: parameterized test cases from cartesian products of value domains.

Provides:
- Kase / kase(): Immutable N-ary case of labeled values
- KaseLabels / labels(): Per-arity labels and display-name formatting
- KaseGrid / kases() / times(): Cartesian products of domains and case lists
- display_name(): Deterministic test identifiers
- as_tests() / test_factory() / nested_tests(): Lazy named test units
- DynamicTest / DynamicContainer: Node tree handed to the host runner
- WorkingDirFactory: Per-test working directories named after each case

Example:
```python
from kaselab import as_tests, kases, labels

cases = kases([1, 2], ["x", "y"], labels=labels("n", "s"))
for test in as_tests(cases, lambda n, s: check(n, s)):
    print(test.display_name)  # [n: 1 | s: x], [n: 1 | s: y], ...
```
"""

from kaselab._ids import CanonicalizeError
from kaselab.config import NamingConfig, load_config
from kaselab.element import HasLabel, KaseElement, element
from kaselab.environment import (
    KaseEnvironment,
    WorkingDirEnvironment,
    WorkingDirFactory,
)
from kaselab.kase import Kase, kase
from kaselab.labels import ArityMismatchError, KaseLabels, labels
from kaselab.materialize import as_containers, as_tests, nested_tests, test_factory
from kaselab.naming import display_name, display_names, render_value
from kaselab.nodes import DynamicContainer, DynamicTest, TestNode, iter_tests
from kaselab.product import KaseGrid, kases, times

__version__ = "0.1.0"

__all__ = [
    # Core types
    "Kase",
    "KaseElement",
    "KaseLabels",
    "KaseGrid",
    "HasLabel",
    # Constructors
    "kase",
    "element",
    "labels",
    "kases",
    "times",
    # Naming
    "display_name",
    "display_names",
    "render_value",
    # Materialization
    "as_tests",
    "test_factory",
    "as_containers",
    "nested_tests",
    # Per-test environments
    "KaseEnvironment",
    "WorkingDirEnvironment",
    "WorkingDirFactory",
    # Node tree
    "DynamicTest",
    "DynamicContainer",
    "TestNode",
    "iter_tests",
    # Config
    "NamingConfig",
    "load_config",
    # Errors
    "ArityMismatchError",
    "CanonicalizeError",
]
