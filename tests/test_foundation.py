"""
Tests for the building blocks: index sets, bit sequence views, errors.

These tests verify that:
1. SetOfNaturals only grows and iterates in ascending order
2. Each view answers, or records what it could not answer, as documented
3. Invariant violations carry their fault code
"""

import pytest

from impossible.errors import (
    Fault,
    InvariantViolation,
    OutOfRangeError,
    ReentrantSearchError,
    UndecidedError,
)
from impossible.examples import EXAMPLE_FUNCTIONS, func_f, func_g, get_example
from impossible.naturals import SetOfNaturals
from impossible.sequences import (
    PartialBitSequence,
    StrictBitSequence,
    StridedBitSequence,
)


# =============================================================================
# SET OF NATURALS
# =============================================================================

class TestSetOfNaturals:
    """Test the growable index set."""

    def test_empty_set(self):
        """A new set has no members."""
        s = SetOfNaturals()

        assert s.size() == 0
        assert len(s) == 0
        assert list(s) == []
        assert not s.contains(0)
        assert s.max() == -1

    def test_insert_is_idempotent(self):
        """Inserting the same index twice counts once."""
        s = SetOfNaturals()
        s.insert(3)
        s.insert(3)

        assert s.size() == 1
        assert 3 in s

    def test_sparse_inserts_iterate_ascending(self):
        """Non-contiguous indices come back smallest first."""
        s = SetOfNaturals()
        for idx in [9, 2, 5, 0]:
            s.insert(idx)

        assert list(s) == [0, 2, 5, 9]
        assert s.max() == 9
        assert not s.contains(1)
        assert not s.contains(100)

    def test_for_each_visits_in_order(self):
        """for_each calls back once per member, ascending."""
        s = SetOfNaturals()
        for idx in [7, 1, 4]:
            s.insert(idx)

        visited = []
        s.for_each(visited.append)

        assert visited == [1, 4, 7]

    def test_clear_empties_set(self):
        """clear() removes every member."""
        s = SetOfNaturals()
        s.insert(1)
        s.insert(6)
        s.clear()

        assert s.size() == 0
        assert list(s) == []
        assert not s.contains(6)

    def test_negative_index_rejected(self):
        """Only naturals can be members."""
        s = SetOfNaturals()

        with pytest.raises(ValueError, match="natural expected"):
            s.insert(-1)
        assert not s.contains(-1)


# =============================================================================
# BIT SEQUENCE VIEWS
# =============================================================================

class TestStrictBitSequence:
    """Test the fully known finite view."""

    def test_get_returns_bits(self):
        """Every in-range position answers with its bit."""
        seq = StrictBitSequence([True, False, True])

        assert seq.get(0) is True
        assert seq.get(1) is False
        assert seq[2] is True
        assert len(seq) == 3

    def test_from_string(self):
        """Bit strings parse with whitespace ignored."""
        seq = StrictBitSequence.from_string("01 10")

        assert [seq.get(i) for i in range(4)] == [False, True, True, False]

    def test_from_string_rejects_other_characters(self):
        """Only 0 and 1 are bits."""
        with pytest.raises(ValueError, match="only contain 0 and 1"):
            StrictBitSequence.from_string("0120")

    def test_out_of_range_is_a_defect(self):
        """Reading past the end raises OutOfRangeError, never returns None."""
        seq = StrictBitSequence.from_string("010")

        with pytest.raises(OutOfRangeError, match="out_of_range") as excinfo:
            seq.get(3)

        assert excinfo.value.fault is Fault.OUT_OF_RANGE
        assert excinfo.value.index == 3
        assert excinfo.value.length == 3

    def test_out_of_range_is_an_index_error(self):
        """OutOfRangeError is also an IndexError."""
        seq = StrictBitSequence([])

        with pytest.raises(IndexError):
            seq.get(-1)


class TestPartialBitSequence:
    """Test the view the engine hands to predicates."""

    def _view(self, values, present_indices):
        present = SetOfNaturals()
        for idx in present_indices:
            present.insert(idx)
        requested = SetOfNaturals()
        return PartialBitSequence(values, present, requested), requested

    def test_present_position_answers(self):
        """Present positions read from the backing values."""
        view, requested = self._view([False, True], [0, 1])

        assert view.get(0) is False
        assert view.get(1) is True
        assert requested.size() == 0

    def test_missing_position_is_recorded(self):
        """A miss answers None and is remembered as requested."""
        view, requested = self._view([False, True], [1])

        assert view.get(0) is None
        assert view.get(12) is None
        assert list(requested) == [0, 12]

    def test_reads_follow_first_read_order(self):
        """reads lists served positions once each, in the order first read."""
        view, _ = self._view([True] * 6, [0, 2, 5])

        view.get(5)
        view.get(0)
        view.get(5)
        view.get(3)
        view.get(2)

        assert view.reads == [5, 0, 2]


class TestStridedBitSequence:
    """Test interleaving of two logical sequences."""

    def test_even_and_odd_offsets(self):
        """Stride 2 splits one sequence into its even and odd positions."""
        source = StrictBitSequence.from_string("010011")
        a = StridedBitSequence(source, stride=2, offset=0)
        b = StridedBitSequence(source, stride=2, offset=1)

        assert [a.get(i) for i in range(3)] == [False, False, True]
        assert [b.get(i) for i in range(3)] == [True, False, True]

    def test_misses_are_recorded_at_physical_positions(self):
        """A strided miss records the underlying position."""
        present = SetOfNaturals()
        requested = SetOfNaturals()
        source = PartialBitSequence([], present, requested)
        b = StridedBitSequence(source, stride=2, offset=1)

        assert b.get(3) is None
        assert list(requested) == [7]

    def test_invalid_stride_rejected(self):
        """Offsets must lie inside the stride."""
        source = StrictBitSequence([True])

        with pytest.raises(ValueError):
            StridedBitSequence(source, stride=2, offset=2)
        with pytest.raises(ValueError):
            StridedBitSequence(source, stride=0, offset=0)


# =============================================================================
# ERRORS
# =============================================================================

class TestErrors:
    """Test the invariant violation hierarchy."""

    def test_messages_carry_fault_code(self):
        """Messages are prefixed with the fault code."""
        error = UndecidedError("no answer")

        assert str(error) == "[undecided] no answer"
        assert error.reason == "no answer"

    def test_all_faults_are_invariant_violations(self):
        """Callers can catch every fault through the base class."""
        assert issubclass(ReentrantSearchError, InvariantViolation)
        assert issubclass(OutOfRangeError, InvariantViolation)
        assert issubclass(UndecidedError, InvariantViolation)
        assert ReentrantSearchError().fault is Fault.REENTRANT_SEARCH


# =============================================================================
# EXAMPLE FUNCTIONS
# =============================================================================

class TestExampleFunctions:
    """Test the example functions on concrete and partial sequences."""

    def test_func_f_on_concrete_sequences(self):
        """func_f is a[4] or (a[0] and a[7])."""
        assert func_f(StrictBitSequence.from_string("00001000")) is True
        assert func_f(StrictBitSequence.from_string("10000001")) is True
        assert func_f(StrictBitSequence.from_string("10000000")) is False
        assert func_f(StrictBitSequence.from_string("00000001")) is False

    def test_func_g_on_concrete_sequences(self):
        """func_g is a[4] and (a[12] if a[7] else a[1])."""
        assert func_g(StrictBitSequence.from_string("0100100000000")) is True
        assert func_g(StrictBitSequence.from_string("0000100100001")) is True
        assert func_g(StrictBitSequence.from_string("0100100100000")) is False
        assert func_g(StrictBitSequence.from_string("0100000000000")) is False

    def test_unknown_propagates(self):
        """Without position 4 both functions ask for it and answer None."""
        for fn in (func_f, func_g):
            requested = SetOfNaturals()
            view = PartialBitSequence([], SetOfNaturals(), requested)

            assert fn(view) is None
            assert list(requested) == [4]

    def test_registry_lookup(self):
        """Example functions are found by name, case-insensitively."""
        assert get_example("F") is func_f
        assert set(EXAMPLE_FUNCTIONS) == {"f", "g"}

        with pytest.raises(KeyError, match="unknown example function"):
            get_example("h")
