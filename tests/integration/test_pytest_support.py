"""Integration tests: cases and node trees run under pytest."""

from __future__ import annotations

import pytest

from kaselab import ArityMismatchError, kase, kases, labels, nested_tests
from kaselab.pytest_support import node_params, parametrize, pytest_params

DIALECTS = ["sqlite", "postgres"]
SIZES = [0, 1, 10]

CASES = kases(DIALECTS, SIZES, labels=labels("db", "n"))


@parametrize("db, n", CASES)
def test_parametrized_cases(db, n):
    """Every case runs with its destructured values."""
    assert db in DIALECTS
    assert n in SIZES


def _check_pair(db, n):
    assert isinstance(db, str)
    assert n >= 0


TREE = nested_tests(DIALECTS, SIZES, action=_check_pair)


@pytest.mark.parametrize("test", node_params(TREE))
def test_node_tree(test):
    """Leaves of a node tree run as individual pytest tests."""
    test()


class TestPytestParams:
    """Tests for pytest_params()."""

    def test_ids_are_display_names(self):
        """Each param id is the case display name."""
        params = pytest_params(CASES)
        assert [p.id for p in params] == [c.display_name() for c in CASES]
        assert params[0].id == "[db: sqlite | n: 0]"

    def test_values_are_destructured(self):
        """Each param holds the case values."""
        params = pytest_params(CASES)
        assert [tuple(p.values) for p in params] == [c.values for c in CASES]

    def test_labels_override(self):
        """A label set renames the ids."""
        params = pytest_params([kase(1)], labels=labels("x", prefix="", postfix=""))
        assert params[0].id == "x: 1"

    def test_kase_name(self):
        """A naming function can produce the ids."""
        params = pytest_params([kase(1, 2)], kase_name=lambda k: k.case_id)
        assert params[0].id == kase(1, 2).case_id


class TestParametrize:
    """Tests for parametrize()."""

    def test_marker(self):
        """The marker carries the argnames and params."""
        marker = parametrize(["db", "n"], CASES)
        argnames, params = marker.args
        assert list(argnames) == ["db", "n"]
        assert len(params) == len(CASES)

    def test_argnames_string(self):
        """Comma-separated argnames are split and stripped."""
        marker = parametrize(" db ,n ", CASES)
        assert list(marker.args[0]) == ["db", "n"]

    def test_argnames_arity_mismatch(self):
        """Argument count must match the case arity."""
        with pytest.raises(ArityMismatchError):
            parametrize("db", CASES)


class TestNodeParams:
    """Tests for node_params()."""

    def test_ids_join_paths(self):
        """Ids join container and test names."""
        params = node_params(nested_tests(["a"], [1, 2], action=_check_pair))
        assert [p.id for p in params] == ["a / 1", "a / 2"]

    def test_custom_separator(self):
        """The path separator is configurable."""
        params = node_params(nested_tests(["a"], [1], action=_check_pair), sep="::")
        assert params[0].id == "a::1"

