"""
Contract Validation Module

JSON Schema контракты и Pydantic records для сериализации pixalg типов.
"""

from .records import ContractRecord, GammaConstantRecord, ScaleRecord, UnsignedLongRecord
from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_contract,
)

__all__ = [
    # Records
    "ContractRecord",
    "GammaConstantRecord",
    "ScaleRecord",
    "UnsignedLongRecord",
    # Validators
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "get_validator",
    "validate_contract",
]
