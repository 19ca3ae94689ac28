"""
Contract Validation Module

Модуль для валидации JSON контрактов входа и выхода движка.
"""

from .validators import (
    ComputationResultValidator,
    ComputeRequestValidator,
    ContractValidator,
    SchemaLoader,
    validate_computation_result,
    validate_compute_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComputeRequestValidator",
    "ComputationResultValidator",
    # Functions
    "validate_compute_request",
    "validate_computation_result",
]
