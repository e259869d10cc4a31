"""Toolkit — фасад Matrix Toolkit для интерактивного слоя.

- Operations: выполнение одной операции с ошибкой как значением
- Properties report: пакетная проверка структурных свойств
- Messages: тексты ошибок по умолчанию
"""

from .messages import DEFAULT_ERROR_MESSAGES, OPERATION_ERROR_MESSAGES, error_message
from .operations import MatrixOperations, Operation, OperationResult
from .properties_report import MatrixProperty, PropertyReport, check_properties

__all__ = [
    "MatrixOperations",
    "Operation",
    "OperationResult",
    "MatrixProperty",
    "PropertyReport",
    "check_properties",
    "DEFAULT_ERROR_MESSAGES",
    "OPERATION_ERROR_MESSAGES",
    "error_message",
]
