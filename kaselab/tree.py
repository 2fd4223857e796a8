"""
Terminal preview of a test node tree.

Useful for checking what a factory will generate before running it:

```python
from kaselab.tree import print_tree

print_tree(nested_tests(["sqlite", "postgres"], [1, 2], action=check))
```

Walking the tree consumes lazy children, so preview a freshly built tree,
not the one handed to the runner.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from kaselab.nodes import DynamicContainer, DynamicTest, TestNode


def _add_nodes(branch: Tree, nodes: Iterable[TestNode]) -> int:
    count = 0
    for node in nodes:
        if isinstance(node, DynamicTest):
            branch.add(Text(node.display_name, style="green"))
            count += 1
        elif isinstance(node, DynamicContainer):
            child = branch.add(Text(node.display_name, style="bold cyan"))
            count += _add_nodes(child, node.children)
        else:
            raise TypeError(f"Not a test node: {type(node).__name__}")
    return count


def build_tree(nodes: Iterable[TestNode], title: str = "tests") -> Tree:
    """
    Build a rich `Tree` mirroring the node tree.

    The root label shows *title* and the number of leaf tests.
    """
    root = Tree(Text(title, style="bold"))
    count = _add_nodes(root, nodes)
    root.label = Text.assemble((title, "bold"), (f" ({count} tests)", "dim"))
    return root


def print_tree(
    nodes: Iterable[TestNode],
    title: str = "tests",
    console: Console | None = None,
) -> None:
    """Print the node tree to *console* (a new stdout console by default)."""
    (console or Console()).print(build_tree(nodes, title))
