"""Tests for case encoding and fingerprints."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum, IntEnum

import pytest

from kaselab._ids import CanonicalizeError, encode_kase, fingerprint_kase
from kaselab.kase import kase
from kaselab.labels import labels


class Mode(Enum):
    FAST = "fast"
    SLOW = "slow"


class Level(IntEnum):
    LOW = 1


@dataclass
class Point:
    x: int
    y: int


def _encoded_value(value):
    """The encoded form of a single-value case's value."""
    [[_, encoded]] = json.loads(encode_kase(kase(value)))
    return encoded


class TestEncodeKase:
    """Tests for encode_kase()."""

    def test_label_value_pairs(self):
        """Each element encodes as a [label, value] pair, in order."""
        case = kase(1, "x", labels=labels("n", "s"))
        assert encode_kase(case) == '[["n",1],["s","x"]]'

    def test_scalars_pass_through(self):
        """JSON scalars are kept as they are."""
        assert [_encoded_value(v) for v in (None, True, 3, "s")] == [None, True, 3, "s"]

    def test_float_is_tagged(self):
        """Floats keep full precision and never collide with strings."""
        assert _encoded_value(0.1) == {"float": "0.1"}
        assert encode_kase(kase(1.0)) != encode_kase(kase("1.0"))

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value):
        """NaN and infinities have no stable encoding."""
        with pytest.raises(CanonicalizeError):
            encode_kase(kase(value))

    def test_enum(self):
        """Enum members encode by qualified name."""
        assert _encoded_value(Mode.FAST) == {"enum": "Mode.FAST"}

    def test_int_enum_is_not_an_int(self):
        """IntEnum members encode as enums, not as their int value."""
        assert _encoded_value(Level.LOW) == {"enum": "Level.LOW"}

    def test_bytes(self):
        """Bytes encode as hex."""
        assert _encoded_value(b"\x01\xff") == {"bytes": "01ff"}

    def test_sequences(self):
        """Lists and tuples encode alike and keep their order."""
        assert _encoded_value((3, 1)) == _encoded_value([3, 1]) == [3, 1]

    def test_set_order_independent(self):
        """Set members are sorted by their encoding."""
        assert _encoded_value({"b", "a"}) == {"set": ["a", "b"]}
        assert encode_kase(kase(frozenset({2, "x"}))) == encode_kase(kase({"x", 2}))

    def test_dict_order_independent(self):
        """Dict entries are sorted by key, and keys keep their type."""
        forward = encode_kase(kase({"b": 1, "a": 2}))
        assert forward == encode_kase(kase({"a": 2, "b": 1}))
        assert encode_kase(kase({1: "x"})) != encode_kase(kase({"1": "x"}))

    def test_dataclass(self):
        """Dataclasses encode their type name and fields."""
        assert _encoded_value(Point(1, 2)) == {
            "dataclass": "Point",
            "fields": {"x": 1, "y": 2},
        }

    def test_unsupported_type_rejected(self):
        """Values without a stable encoding raise CanonicalizeError."""
        with pytest.raises(CanonicalizeError, match="function"):
            encode_kase(kase(lambda: None))


class TestFingerprintKase:
    """Tests for fingerprint_kase()."""

    def test_deterministic(self):
        """Equal cases have equal fingerprints."""
        case = kase(1, Mode.SLOW)
        assert fingerprint_kase(case) == fingerprint_kase(kase(1, Mode.SLOW))

    def test_length(self):
        """Fingerprints are 16 hex characters."""
        fp = fingerprint_kase(kase([1, "x"]))
        assert len(fp) == 16
        int(fp, 16)

    def test_matches_case_id(self):
        """Kase.case_id is the case fingerprint."""
        case = kase(Point(0, 0), labels=labels("origin"))
        assert case.case_id == fingerprint_kase(case)
