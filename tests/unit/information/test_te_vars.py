"""Tests for the variable partition descriptor."""

import numpy as np
import pytest

from ksgte.information.te_vars import TEVars, as_row_indices
from ksgte.information.errors import PartitionIndexError


class TestAsRowIndices:
    """Test normalisation of index group representations."""

    def test_single_int(self):
        assert as_row_indices(3) == (3,)

    def test_range(self):
        assert as_row_indices(range(1, 4)) == (1, 2, 3)

    def test_list_and_tuple(self):
        assert as_row_indices([2, 0]) == (2, 0)
        assert as_row_indices((5,)) == (5,)

    def test_numpy_integers(self):
        """Numpy integer arrays and scalars are accepted."""
        assert as_row_indices(np.array([1, 2])) == (1, 2)
        assert as_row_indices(np.int64(4)) == (4,)
        assert as_row_indices([np.int32(0), 1]) == (0, 1)

    def test_none_and_empty(self):
        assert as_row_indices(None) == ()
        assert as_row_indices([]) == ()

    def test_duplicates_kept(self):
        """Each index selects a row, so repeats are preserved."""
        assert as_row_indices([1, 1, 2]) == (1, 1, 2)

    @pytest.mark.parametrize("bad", [1.0, "0", [0.5], [[0, 1]], True, [True], {0, 1}])
    def test_type_mismatch(self, bad):
        with pytest.raises(TypeError):
            as_row_indices(bad)

    def test_float_array_rejected(self):
        with pytest.raises(TypeError):
            as_row_indices(np.array([0.0, 1.0]))


class TestTEVars:
    """Test TEVars construction and derived groups."""

    def test_fields_stored_verbatim(self):
        v = TEVars(0, range(1, 3), [3], (4, 5))
        assert v.target_future == (0,)
        assert v.target_presentpast == (1, 2)
        assert v.source_presentpast == (3,)
        assert v.conditioned_presentpast == (4, 5)

    def test_conditioning_defaults_to_empty(self):
        v = TEVars([0], [1], [2])
        assert v.conditioned_presentpast == ()
        assert v == TEVars([0], [1], [2], [])

    def test_derived_groups(self):
        v = TEVars([0], [1, 2], [3], [4])
        assert v.X == (0,)
        assert v.Y == (1, 2)
        assert v.Z == (3, 4)
        assert v.XY == (0, 1, 2)
        assert v.YZ == (1, 2, 3, 4)
        assert v.XYZ == (0, 1, 2, 3, 4)

    def test_z_without_conditioning(self):
        """Empty conditioning reduces Z to the source rows."""
        v = TEVars([0], [1], [2, 3])
        assert v.Z == (2, 3)

    def test_immutable(self):
        v = TEVars([0], [1], [2])
        with pytest.raises(AttributeError):
            v.target_future = (1,)

    def test_construction_type_error(self):
        with pytest.raises(TypeError):
            TEVars([0], "1", [2])


class TestTEVarsValidate:
    """Test fitting a partition to a point matrix."""

    def test_valid(self):
        TEVars([0], [1], [2], [3]).validate(4)

    def test_index_out_of_range(self):
        with pytest.raises(PartitionIndexError, match=r"\[3\]"):
            TEVars([0], [1], [3]).validate(3)

    def test_negative_index(self):
        with pytest.raises(PartitionIndexError):
            TEVars([-1], [1], [2]).validate(3)

    @pytest.mark.parametrize(
        "groups",
        [([], [1], [2]), ([0], [], [2]), ([0], [1], [])],
    )
    def test_empty_required_group(self, groups):
        with pytest.raises(PartitionIndexError):
            TEVars(*groups).validate(3)

    def test_is_index_error(self):
        """Partition errors can be caught as IndexError."""
        with pytest.raises(IndexError):
            TEVars([0], [1], [9]).validate(3)
