"""
Minimal Working Example: a dialect x batch-size test matrix.

Usage:
    uv run python examples/sql_matrix/run.py

This demonstrates the core kaselab workflow:
- Build cases from value domains with kases()
- Name them with a label set
- Materialize them as lazy tests and preview the tree
- Run each test the way a host runner would
"""

import logging

from kaselab import as_containers, as_tests, kases, labels
from kaselab.tree import print_tree

logging.basicConfig(level=logging.DEBUG)


# The test action receives the destructured case values.
# Raising means failure, returning normally means success.
def check_insert(dialect, batch_size):
    assert batch_size >= 0, f"negative batch for {dialect}"


# kases(): cartesian product, last domain fastest → 2 x 3 = 6 cases
CASES = kases(["sqlite", "postgres"], [0, 1, 100], labels=labels("dialect", "batch"))


def build():
    # One container per dialect, holding that dialect's cases as tests.
    # Children are built lazily, nothing runs until a test is called.
    return as_containers(
        ["sqlite", "postgres"],
        lambda dialect: as_tests(
            [c for c in CASES if c.a1 == dialect], check_insert
        ),
    )


if __name__ == "__main__":
    # Preview consumes the tree, so build a fresh one for running
    print_tree(build(), title="sql_matrix")

    for container in build():
        for test in container.children:
            test()
            print(f"passed: {container.display_name} / {test.display_name}")
