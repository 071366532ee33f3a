"""
Тесты для Scale — диагонального affine transform

Проверяемые инварианты:
1. apply / apply_inverse — взаимно обратны
2. inverse().inverse() is self (пара создаётся вместе)
3. Матричное представление (get, row_packed_copy)
4. Differential не зависит от точки
5. Предусловие размерности (DimensionMismatchError)
6. Нулевой коэффициент: ±inf в inverse, строгий режим по конфигурации
"""

import logging
import math

import pytest

from pixalg.core.domain import RealPoint
from pixalg.realtransform import (
    AffineGet,
    DimensionMismatchError,
    Scale,
    ScaleConfig,
    ZeroScaleFactorError,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def scale_2d() -> Scale:
    return Scale(2.0, 3.0)


@pytest.fixture
def scale_3d() -> Scale:
    return Scale(2.0, 3.0, 4.0)


# =============================================================================
# ТЕСТЫ: apply / apply_inverse
# =============================================================================


class TestApply:
    """Прямое и обратное преобразование"""

    def test_apply(self, scale_2d: Scale) -> None:
        assert scale_2d.apply([1.0, 1.0]) == [2.0, 3.0]

    def test_apply_inverse(self, scale_2d: Scale) -> None:
        assert scale_2d.apply_inverse([2.0, 3.0]) == [1.0, 1.0]

    def test_round_trip(self, scale_3d: Scale) -> None:
        point = [0.25, -7.0, 1e6]
        assert scale_3d.apply_inverse(scale_3d.apply(point)) == pytest.approx(point)

    def test_inverse_transform_applies_reciprocals(self, scale_2d: Scale) -> None:
        assert scale_2d.inverse().apply([2.0, 3.0]) == pytest.approx([1.0, 1.0])
        assert scale_2d.inverse().apply_inverse([1.0, 1.0]) == pytest.approx([2.0, 3.0])

    def test_trailing_components_ignored(self, scale_2d: Scale) -> None:
        assert scale_2d.apply([1.0, 1.0, 5.0]) == [2.0, 3.0]

    def test_apply_into_target(self, scale_2d: Scale) -> None:
        """Результат пишется в переданный target, лишние компоненты не трогаются"""
        target = [0.0, 0.0, 9.0]
        returned = scale_2d.apply([1.0, 2.0], target)
        assert returned is target
        assert target == [2.0, 6.0, 9.0]

    def test_apply_inverse_into_source(self, scale_2d: Scale) -> None:
        source = [0.0, 0.0]
        scale_2d.apply_inverse([4.0, 9.0], source)
        assert source == [2.0, 3.0]

    def test_real_point(self, scale_2d: Scale) -> None:
        target = RealPoint(2)
        scale_2d.apply(RealPoint([1.0, 1.0]), target)
        assert target == RealPoint([2.0, 3.0])

        source = RealPoint(2)
        scale_2d.apply_inverse(target, source)
        assert source == RealPoint([1.0, 1.0])

    def test_input_not_mutated(self, scale_2d: Scale) -> None:
        source = [1.0, 1.0]
        scale_2d.apply(source)
        assert source == [1.0, 1.0]


# =============================================================================
# ТЕСТЫ: inverse
# =============================================================================


class TestInverse:
    """Пара transform ↔ inverse"""

    def test_inverse_of_inverse_is_self(self, scale_2d: Scale) -> None:
        assert scale_2d.inverse().inverse() is scale_2d

    def test_inverse_is_stable(self, scale_2d: Scale) -> None:
        assert scale_2d.inverse() is scale_2d.inverse()

    def test_inverse_factors(self, scale_2d: Scale) -> None:
        inverse = scale_2d.inverse()
        assert inverse.get_scales() == (0.5, 1.0 / 3.0)
        for d in range(2):
            assert scale_2d.get_scale(d) * inverse.get_scale(d) == pytest.approx(1.0)

    def test_inverse_affine(self, scale_2d: Scale) -> None:
        assert scale_2d.inverse_affine() is scale_2d.inverse()

    def test_inverse_shares_config(self) -> None:
        config = ScaleConfig(check_dimensions=False)
        assert Scale(2.0, config=config).inverse().config is config


# =============================================================================
# ТЕСТЫ: Размерности и матрица
# =============================================================================


class TestMatrix:
    """Матричное представление"""

    def test_dimensions(self, scale_3d: Scale) -> None:
        assert scale_3d.num_source_dimensions() == 3
        assert scale_3d.num_target_dimensions() == 3
        assert scale_3d.inverse().num_source_dimensions() == 3

    def test_get(self, scale_2d: Scale) -> None:
        assert scale_2d.get(0, 0) == 2.0
        assert scale_2d.get(0, 1) == 0.0
        assert scale_2d.get(1, 0) == 0.0
        assert scale_2d.get(1, 1) == 3.0

    def test_get_translation_column_is_zero(self, scale_2d: Scale) -> None:
        assert scale_2d.get(0, 2) == 0.0
        assert scale_2d.get(1, 2) == 0.0

    def test_row_packed_copy(self, scale_3d: Scale) -> None:
        assert scale_3d.row_packed_copy() == [
            2.0, 0.0, 0.0, 0.0,
            0.0, 3.0, 0.0, 0.0,
            0.0, 0.0, 4.0, 0.0,
        ]

    def test_row_packed_copy_matches_get(self, scale_3d: Scale) -> None:
        n = scale_3d.num_source_dimensions()
        matrix = scale_3d.row_packed_copy()
        for row in range(n):
            for col in range(n + 1):
                assert matrix[row * (n + 1) + col] == scale_3d.get(row, col)

    def test_row_packed_copy_is_copy(self, scale_2d: Scale) -> None:
        matrix = scale_2d.row_packed_copy()
        matrix[0] = 100.0
        assert scale_2d.get(0, 0) == 2.0


# =============================================================================
# ТЕСТЫ: Differential
# =============================================================================


class TestDifferential:
    """d(dim) — базисный вектор, умноженный на s[dim]"""

    def test_only_component_is_scale(self, scale_3d: Scale) -> None:
        for d in range(3):
            direction = scale_3d.d(d)
            assert direction.num_dimensions() == 3
            for k in range(3):
                expected = scale_3d.get_scale(d) if k == d else 0.0
                assert direction.get_double_position(k) == expected

    def test_inverse_differential(self) -> None:
        assert Scale(2.0, 4.0).inverse().d(0) == RealPoint([0.5, 0.0])

    def test_differential_matches_apply_difference(self, scale_3d: Scale) -> None:
        """Differential совпадает с разностью образов точек x + e_d и x"""
        x = [1.5, -2.0, 0.25]
        for d in range(3):
            shifted = list(x)
            shifted[d] += 1.0
            diff = [a - b for a, b in zip(scale_3d.apply(shifted), scale_3d.apply(x))]
            assert diff == pytest.approx(list(scale_3d.d(d)))

    def test_returned_point_is_independent(self, scale_2d: Scale) -> None:
        direction = scale_2d.d(0)
        direction.set_position(99.0, 0)
        assert scale_2d.d(0) == RealPoint([2.0, 0.0])


# =============================================================================
# ТЕСТЫ: Предусловие размерности
# =============================================================================


class TestDimensionPrecondition:
    """Векторы короче n — ошибка вызывающей стороны"""

    def test_short_source_raises(self, scale_2d: Scale) -> None:
        with pytest.raises(DimensionMismatchError, match="Input dimensions too small"):
            scale_2d.apply([1.0])

    def test_short_target_raises(self, scale_2d: Scale) -> None:
        with pytest.raises(DimensionMismatchError):
            scale_2d.apply([1.0, 1.0], [0.0])

    def test_short_inverse_input_raises(self, scale_2d: Scale) -> None:
        with pytest.raises(DimensionMismatchError):
            scale_2d.apply_inverse([1.0])

    def test_is_value_error(self) -> None:
        assert issubclass(DimensionMismatchError, ValueError)

    def test_unchecked_mode_raises_index_error(self) -> None:
        scale = Scale(2.0, 3.0, config=ScaleConfig(check_dimensions=False))
        with pytest.raises(IndexError):
            scale.apply([1.0])


# =============================================================================
# ТЕСТЫ: Нулевой коэффициент
# =============================================================================


class TestZeroFactor:
    """Нулевой коэффициент принимается, inverse бесконечен"""

    def test_zero_factor_accepted(self) -> None:
        scale = Scale(0.0, 2.0)
        assert scale.inverse().get_scale(0) == math.inf
        assert scale.apply([5.0, 1.0]) == [0.0, 2.0]

    def test_zero_factor_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="pixalg.realtransform.scale"):
            Scale(1.0, 0.0)
        assert "zero factor" in caplog.text

    def test_apply_inverse_yields_infinity(self) -> None:
        result = Scale(0.0, 2.0).apply_inverse([1.0, 4.0])
        assert result[0] == math.inf
        assert result[1] == 2.0

    def test_zero_over_zero_is_nan(self) -> None:
        assert math.isnan(Scale(0.0).apply_inverse([0.0])[0])

    def test_negative_zero(self) -> None:
        assert Scale(-0.0).inverse().get_scale(0) == -math.inf

    def test_strict_mode_rejects(self) -> None:
        with pytest.raises(ZeroScaleFactorError, match=r"dimensions \[1\]"):
            Scale(1.0, 0.0, config=ScaleConfig(reject_zero_factors=True))


# =============================================================================
# ТЕСТЫ: Прочее
# =============================================================================


class TestMisc:
    def test_is_affine_get(self, scale_2d: Scale) -> None:
        assert isinstance(scale_2d, AffineGet)

    def test_equality(self, scale_2d: Scale) -> None:
        assert scale_2d == Scale(2, 3)
        assert scale_2d != Scale(2.0, 4.0)
        assert hash(scale_2d) == hash(Scale(2.0, 3.0))

    def test_factors_copied(self) -> None:
        factors = [2.0, 3.0]
        scale = Scale(*factors)
        factors[0] = 100.0
        assert scale.get_scale(0) == 2.0

    def test_repr(self, scale_2d: Scale) -> None:
        assert repr(scale_2d) == "Scale(2.0, 3.0)"

    def test_no_instance_dict(self, scale_2d: Scale) -> None:
        """Атрибуты фиксированы __slots__ по всей иерархии"""
        assert not hasattr(scale_2d, "__dict__")
        with pytest.raises(AttributeError):
            scale_2d.extra = 1.0  # type: ignore[attr-defined]
