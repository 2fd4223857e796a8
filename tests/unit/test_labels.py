"""Tests for label sets."""

from __future__ import annotations

import pytest

from kaselab.labels import ArityMismatchError, KaseLabels, labels


class TestLabelsConstructor:
    """Tests for labels()."""

    def test_defaults_for_arity(self):
        """No names produces a1..aN."""
        assert labels(arity=6).labels == ("a1", "a2", "a3", "a4", "a5", "a6")

    def test_default_formatting(self):
        """Formatting defaults match the documented values."""
        result = labels(arity=1)
        assert result.delimiter == ": "
        assert result.separator == " | "
        assert result.prefix == "["
        assert result.postfix == "]"

    def test_names_by_position(self):
        """Given names are used in order."""
        assert labels("db", "n").labels == ("db", "n")

    def test_none_means_default(self):
        """None at a position falls back to that position's default."""
        assert labels(None, "n", None).labels == ("a1", "n", "a3")

    def test_padding_to_arity(self):
        """Trailing positions without names get defaults."""
        assert labels("db", arity=3).labels == ("db", "a2", "a3")

    def test_duplicates_allowed(self):
        """Duplicate labels are not an error."""
        assert labels("x", "x").labels == ("x", "x")

    def test_too_many_names(self):
        """More names than the arity fails fast."""
        with pytest.raises(ArityMismatchError):
            labels("a", "b", "c", arity=2)

    def test_zero_arity(self):
        """A label set needs at least one position."""
        with pytest.raises(ValueError):
            labels()

    def test_custom_formatting(self):
        """Formatting options are stored as given."""
        result = labels("x", delimiter="=", separator=", ", prefix="", postfix="")
        assert (result.delimiter, result.separator, result.prefix, result.postfix) == (
            "=",
            ", ",
            "",
            "",
        )


class TestKaseLabels:
    """Tests for the KaseLabels value object."""

    def test_default_classmethod(self):
        """KaseLabels.default(n) equals labels(arity=n)."""
        assert KaseLabels.default(3) == labels(arity=3)

    def test_immutable(self):
        """Label sets are frozen."""
        result = labels(arity=2)
        with pytest.raises(AttributeError):
            result.delimiter = "="  # type: ignore[misc]

    def test_list_input_becomes_tuple(self):
        """Labels given as a list are stored as a tuple."""
        result = KaseLabels(labels=["a", "b"])  # type: ignore[arg-type]
        assert result.labels == ("a", "b")
        assert hash(result) == hash(KaseLabels(labels=("a", "b")))

    def test_arity_and_len(self):
        """arity and len() both report the number of labels."""
        result = labels(arity=4)
        assert result.arity == 4
        assert len(result) == 4
        assert list(result) == ["a1", "a2", "a3", "a4"]

    def test_require_arity(self):
        """require_arity raises only on mismatch."""
        result = labels(arity=2)
        result.require_arity(2)
        with pytest.raises(ArityMismatchError) as excinfo:
            result.require_arity(3)
        assert excinfo.value.expected == 3
        assert excinfo.value.actual == 2

    def test_arity_mismatch_is_value_error(self):
        """ArityMismatchError can be caught as ValueError."""
        assert issubclass(ArityMismatchError, ValueError)

    def test_with_format(self):
        """with_format replaces only the given options."""
        result = labels("x", "y").with_format(separator=", ")
        assert result.labels == ("x", "y")
        assert result.separator == ", "
        assert result.delimiter == ": "
