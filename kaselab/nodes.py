"""
Test node tree handed to the host runner.

Two node kinds:

- DynamicTest: a named, zero-argument executable (a leaf)
- DynamicContainer: a named, ordered group of child nodes

Any runner that can walk this tree can discover, run, and report the
generated tests. `iter_tests` flattens the tree for runners without
native nesting (see `kaselab.pytest_support`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Union


@dataclass(frozen=True)
class DynamicTest:
    """
    A leaf test.

    Calling the node runs its executable. Exceptions from the executable
    propagate unchanged; the runner decides what they mean.

    Attributes:
        display_name: The test identifier.
        executable: Zero-argument callable performing the check.
    """

    display_name: str
    executable: Callable[[], Any]

    def __call__(self) -> None:
        self.executable()


@dataclass(frozen=True)
class DynamicContainer:
    """
    A named group of child nodes.

    Children keep their input order. They may be a lazy iterable, in which
    case the container can be walked only once.

    Attributes:
        display_name: The group name.
        children: Child nodes, in order.
    """

    display_name: str
    children: Iterable[TestNode]


TestNode = Union[DynamicTest, DynamicContainer]


def iter_tests(
    nodes: Iterable[TestNode], parents: tuple[str, ...] = ()
) -> Iterator[tuple[tuple[str, ...], DynamicTest]]:
    """
    Walk a node tree depth first and yield its leaves.

    Args:
        nodes: Top-level nodes.
        parents: Names of enclosing containers, prepended to every path.

    Yields:
        ``(path, test)`` pairs, where *path* holds the names of all enclosing
        containers followed by the test's own name.

    Raises:
        TypeError: If a node is neither a test nor a container.
    """
    for node in nodes:
        if isinstance(node, DynamicTest):
            yield parents + (node.display_name,), node
        elif isinstance(node, DynamicContainer):
            yield from iter_tests(node.children, parents + (node.display_name,))
        else:
            raise TypeError(f"Not a test node: {type(node).__name__}")
