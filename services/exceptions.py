"""Исключения сервиса регистрации команд"""
import enum
from dataclasses import dataclass
from typing import List, Optional


class ViolationKind(str, enum.Enum):
    MISSING_FIELD = "MissingField"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_MEMBERS = "InvalidMembers"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    field: Optional[str]
    message: str


class RegistrationError(Exception):
    """Базовое исключение сервиса"""
    pass


class RegistrationValidationError(RegistrationError):
    """Данные регистрации не прошли проверку"""

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))

    @property
    def missing_fields(self) -> List[str]:
        return [
            v.field for v in self.violations
            if v.kind == ViolationKind.MISSING_FIELD
        ]

    def has(self, kind: ViolationKind) -> bool:
        return any(v.kind == kind for v in self.violations)


class StoreError(RegistrationError):
    """Ошибка записи в хранилище"""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to save registration: {cause}")


class StartupError(RegistrationError):
    """Не удалось подключиться к БД при запуске"""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to connect to database: {cause}")
