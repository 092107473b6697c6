"""Tests for DOMMatrixInit validation and fixup."""

import math

import pytest
from pydantic import ValidationError as PydanticValidationError

from domxform.errors import ConflictingAliasError, Invalid2DStateError, MatrixInitError
from domxform.matrix_init import is_valid_2d, to_array, validate_and_fixup
from domxform.models import MATRIX_2D_ONE_FIELDS, MATRIX_2D_ZERO_FIELDS, NormalizedMatrix


class TestDefaults:
    def test_empty_init_is_2d_identity(self):
        m = validate_and_fixup({})
        assert m.is_2d is True
        assert to_array(m) == [1.0, 0.0, 0.0, 1.0, 0.0, 0.0]

    def test_all_sixteen_fields_filled(self):
        m = validate_and_fixup({"a": 4})
        assert m.m11 == 4.0
        assert m.m33 == 1.0
        assert m.m44 == 1.0
        assert m.m13 == 0.0

    def test_aliases_fill_canonical_fields(self, init_2d):
        m = validate_and_fixup(init_2d)
        assert to_array(m) == [2.0, 0.5, -1.0, 3.0, 10.0, 20.0]

    def test_alias_properties(self, init_2d):
        m = validate_and_fixup(init_2d)
        assert (m.a, m.b, m.c, m.d, m.e, m.f) == (2.0, 0.5, -1.0, 3.0, 10.0, 20.0)

    def test_unknown_keys_ignored(self):
        m = validate_and_fixup({"a": 1, "color": "red", "z": [1, 2]})
        assert to_array(m) == [1.0, 0.0, 0.0, 1.0, 0.0, 0.0]

    def test_input_not_mutated(self, init_2d):
        before = dict(init_2d)
        validate_and_fixup(init_2d)
        assert init_2d == before

    def test_result_is_frozen(self):
        m = validate_and_fixup({})
        with pytest.raises(PydanticValidationError):
            m.m11 = 5.0


class TestAliasConflicts:
    def test_equal_alias_and_canonical_accepted(self):
        m = validate_and_fixup({"a": 2, "m11": 2.0})
        assert m.m11 == 2.0

    @pytest.mark.parametrize(
        "alias,name",
        [("a", "m11"), ("b", "m12"), ("c", "m21"), ("d", "m22"), ("e", "m41"), ("f", "m42")],
    )
    def test_conflict_rejected(self, alias, name):
        with pytest.raises(ConflictingAliasError, match="invalid matrix init"):
            validate_and_fixup({alias: 1, name: 2})

    def test_nan_equals_nan(self):
        m = validate_and_fixup({"e": float("nan"), "m41": float("nan")})
        assert math.isnan(m.m41)

    def test_nan_against_number_rejected(self):
        with pytest.raises(ConflictingAliasError):
            validate_and_fixup({"e": float("nan"), "m41": 0})

    def test_conflict_checked_before_2d_state(self):
        with pytest.raises(ConflictingAliasError):
            validate_and_fixup({"a": 1, "m11": 2, "is2D": True, "m13": 1})

    def test_conflict_is_a_type_error(self):
        with pytest.raises(TypeError):
            validate_and_fixup({"b": 1, "m12": 2})


class TestDimensionality:
    def test_3d_fields_at_identity_stay_2d(self):
        m = validate_and_fixup({"m13": 0, "m33": 1, "m44": 1.0})
        assert m.is_2d is True

    @pytest.mark.parametrize("name", MATRIX_2D_ZERO_FIELDS)
    def test_nonzero_3d_field_auto_detects_3d(self, name):
        assert validate_and_fixup({name: 0.5}).is_2d is False

    @pytest.mark.parametrize("name", MATRIX_2D_ONE_FIELDS)
    def test_non_one_field_auto_detects_3d(self, name):
        assert validate_and_fixup({name: 2}).is_2d is False

    @pytest.mark.parametrize("name", MATRIX_2D_ZERO_FIELDS)
    def test_is2d_true_with_nonzero_field_rejected(self, name):
        with pytest.raises(Invalid2DStateError, match="invalid 2D state"):
            validate_and_fixup({"is2D": True, name: 1})

    @pytest.mark.parametrize("name", MATRIX_2D_ONE_FIELDS)
    def test_is2d_true_with_non_one_field_rejected(self, name):
        with pytest.raises(Invalid2DStateError):
            validate_and_fixup({"is2D": True, name: 0})

    def test_is2d_true_with_valid_fields(self):
        assert validate_and_fixup({"is2D": True, "m33": 1, "a": 3}).is_2d is True

    def test_is2d_false_forces_3d(self):
        m = validate_and_fixup({"is2D": False})
        assert m.is_2d is False
        assert len(to_array(m)) == 16

    def test_is2d_falsy_skips_2d_check(self):
        assert validate_and_fixup({"is2D": 0, "m33": 5}).is_2d is False

    def test_nan_3d_field_is_not_2d(self):
        assert is_valid_2d({"m31": float("nan")}) is False


class TestInvalidInput:
    def test_non_mapping_rejected(self):
        with pytest.raises(MatrixInitError, match="expected a mapping"):
            validate_and_fixup([1, 0, 0, 1, 0, 0])

    def test_string_value_rejected(self):
        with pytest.raises(MatrixInitError, match="expected a number"):
            validate_and_fixup({"a": "2"})

    def test_bool_value_rejected(self):
        with pytest.raises(MatrixInitError):
            validate_and_fixup({"m44": True})

    def test_int_beyond_float_range_rejected(self):
        with pytest.raises(MatrixInitError, match="number out of range"):
            validate_and_fixup({"m11": 10**400})

    def test_huge_alias_value_rejected(self):
        with pytest.raises(MatrixInitError, match="m42: number out of range"):
            validate_and_fixup({"f": -(10**400)})

    def test_non_number_reported_before_2d_state(self):
        with pytest.raises(MatrixInitError, match="m13: expected a number") as excinfo:
            validate_and_fixup({"is2D": True, "m13": "0"})
        assert not isinstance(excinfo.value, Invalid2DStateError)


class TestToArray:
    def test_3d_array_order(self, init_3d):
        m = validate_and_fixup(init_3d)
        assert m.is_2d is False
        assert to_array(m) == [
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, -0.01,
            0.0, 0.0, 5.0, 1.0,
        ]  # fmt: skip

    def test_2d_array_order(self):
        m = validate_and_fixup({"m11": 1, "m12": 2, "m21": 3, "m22": 4, "m41": 5, "m42": 6})
        assert to_array(m) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


class TestIdempotence:
    def test_renormalizing_model(self, init_3d):
        first = validate_and_fixup(init_3d)
        assert validate_and_fixup(first) == first

    def test_renormalizing_dumped_mapping(self, init_2d):
        first = validate_and_fixup(init_2d)
        again = validate_and_fixup(first.to_init())
        assert again == first
        assert isinstance(again, NormalizedMatrix)

    def test_dump_uses_is2d_key(self):
        dumped = validate_and_fixup({}).to_init()
        assert dumped["is2D"] is True
        assert "is_2d" not in dumped
