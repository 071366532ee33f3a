"""
Records — сериализуемые представления value types и transforms

Immutable Pydantic модели для обмена через JSON. Каждая запись привязана к
JSON схеме из schema/: from_payload() и from_json() сначала проверяют данные
схемой (validators.py), затем Pydantic-моделью. Данные, которые отклоняет
любой из двух контрактов, не декодируются.

- UnsignedLongRecord: беззнаковое значение в [0, 2^64 - 1]
- GammaConstantRecord: параметр RealGammaConstant
- ScaleRecord: коэффициенты Scale
"""

import json
import logging
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, Field, field_validator

from pixalg.core.contracts.validators import validate_contract
from pixalg.core.domain.unsigned_long import UnsignedLongValue
from pixalg.core.math.numerical_safeguards import validate_finite
from pixalg.core.math.unsigned64 import UINT64_MAX
from pixalg.ops.real_gamma_constant import RealGammaConstant
from pixalg.realtransform.scale import Scale, ScaleConfig

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="ContractRecord")


# =============================================================================
# BASE
# =============================================================================


class ContractRecord(BaseModel):
    """Запись, декодируемая только после проверки JSON схемой schema_name."""

    schema_name: ClassVar[str]

    model_config = {"frozen": True}

    @classmethod
    def from_payload(cls: type[R], data: Any) -> R:
        """
        Декодирование уже разобранного JSON (dict).

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            pydantic.ValidationError: Если data не проходит модель
        """
        validate_contract(cls.schema_name, data)
        logger.debug("Decoding %s record", cls.schema_name)
        return cls.model_validate(data)

    @classmethod
    def from_json(cls: type[R], text: str | bytes) -> R:
        """Декодирование JSON-текста (см. from_payload)."""
        return cls.from_payload(json.loads(text))


# =============================================================================
# UNSIGNED LONG
# =============================================================================


class UnsignedLongRecord(ContractRecord):
    """
    Беззнаковое 64-битное значение.

    Хранится беззнаковая интерпретация (не сырой знаковый pattern).
    """

    schema_name: ClassVar[str] = "unsigned_long"

    value: int = Field(..., ge=0, le=UINT64_MAX, description="Беззнаковое значение")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_domain(cls, value: UnsignedLongValue) -> "UnsignedLongRecord":
        return cls(value=value.get_big_integer())

    def to_domain(self) -> UnsignedLongValue:
        return UnsignedLongValue(self.value)


# =============================================================================
# GAMMA CONSTANT
# =============================================================================


class GammaConstantRecord(ContractRecord):
    """Параметр гамма-операции (любое конечное значение)."""

    schema_name: ClassVar[str] = "gamma_constant"

    constant: float = Field(..., allow_inf_nan=False, description="Показатель гаммы")

    @classmethod
    def from_domain(cls, op: RealGammaConstant) -> "GammaConstantRecord":
        return cls(constant=op.constant)

    def to_domain(self) -> RealGammaConstant:
        return RealGammaConstant(self.constant)


# =============================================================================
# SCALE
# =============================================================================


class ScaleRecord(ContractRecord):
    """Коэффициенты диагонального масштабирования."""

    schema_name: ClassVar[str] = "scale"

    scales: list[float] = Field(..., min_length=1, description="Коэффициенты по осям")

    @field_validator("scales")
    @classmethod
    def validate_finite_scales(cls, v: list[float]) -> list[float]:
        """NaN/Inf коэффициенты не сериализуются."""
        for d, x in enumerate(v):
            validate_finite(x, f"scale factor in dimension {d}")
        return v

    @classmethod
    def from_domain(cls, scale: Scale) -> "ScaleRecord":
        return cls(scales=list(scale.get_scales()))

    def to_domain(self, config: ScaleConfig | None = None) -> Scale:
        return Scale(*self.scales, config=config)
