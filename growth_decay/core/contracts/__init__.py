"""
Contract Validation Module

Валидация экспортированного состояния записей против JSON Schema контрактов.
"""

from .validators import (
    ContractValidator,
    ExponentialRecordValidator,
    RatioDecayRecordValidator,
    SchemaLoader,
    validate_exponential_record,
    validate_ratio_decay_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ExponentialRecordValidator",
    "RatioDecayRecordValidator",
    # Functions
    "validate_exponential_record",
    "validate_ratio_decay_record",
]
