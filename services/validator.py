"""
Проверка данных регистрации команды.

Принимает сырой payload (dict из JSON), возвращает типизированную
Registration или выбрасывает RegistrationValidationError со списком
всех найденных нарушений. Побочных эффектов нет.

Числа приводятся к строке (rollNo: 12345 -> "12345"), как при приведении
к строковому типу в схеме документа. Пустые значения ("", null, 0, false)
считаются отсутствующими.
"""
import re
from typing import Any, List, Optional

from api.models.registration import Registration
from services.exceptions import RegistrationValidationError, Violation, ViolationKind

REQUIRED_FIELDS = ("event", "teamName", "teamLeader", "phoneNo", "email", "rollNo")

PHONE_RE = re.compile(r"^\d{10}$", re.ASCII)
# \S без U+FEFF: в JS это пробельный символ
NON_SPACE = r"[^\s\ufeff]"
EMAIL_RE = re.compile(r"^" + NON_SPACE + r"+@" + NON_SPACE + r"+\." + NON_SPACE + r"+$")

MISSING_FIELDS_MESSAGE = "All fields are required."
PHONE_MESSAGE = "Phone number must be 10 digits long"
EMAIL_MESSAGE = "Invalid email format"
MEMBERS_MESSAGE = "At least one valid team member name is required."

FORMAT_RULES = {
    "phoneNo": (PHONE_RE, PHONE_MESSAGE),
    "email": (EMAIL_RE, EMAIL_MESSAGE),
}


def _is_missing(value: Any) -> bool:
    if isinstance(value, bool):
        return value is False
    return value is None or value == "" or value == 0


def to_text(value: Any) -> Optional[str]:
    """Привести скалярное значение к строке; None, если привести нельзя"""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _check_required(payload: dict, cleaned: dict) -> List[Violation]:
    violations = []
    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        if _is_missing(value):
            violations.append(Violation(ViolationKind.MISSING_FIELD, field, MISSING_FIELDS_MESSAGE))
            continue

        text = to_text(value)
        if text is None:
            violations.append(Violation(ViolationKind.INVALID_FORMAT, field, f"{field} must be a string"))
            continue
        cleaned[field] = text

        if field in FORMAT_RULES:
            pattern, message = FORMAT_RULES[field]
            if not pattern.fullmatch(text):
                violations.append(Violation(ViolationKind.INVALID_FORMAT, field, message))
    return violations


def clean_members(members: Any) -> Optional[List[str]]:
    """
    Непустой список, каждый участник - непустая строка после strip().
    Возвращает список строк или None, если список невалиден.
    """
    if not isinstance(members, list) or len(members) == 0:
        return None
    cleaned = [to_text(member) for member in members]
    if any(member is None or member.strip() == "" for member in cleaned):
        return None
    return cleaned


def validate_registration(payload: Any) -> Registration:
    """
    Проверить payload регистрации

    Args:
        payload: Тело запроса (ожидается dict)

    Returns:
        Registration со всеми заполненными полями

    Raises:
        RegistrationValidationError: если найдено хотя бы одно нарушение
    """
    if not isinstance(payload, dict):
        raise RegistrationValidationError([
            Violation(ViolationKind.MISSING_FIELD, field, MISSING_FIELDS_MESSAGE)
            for field in REQUIRED_FIELDS
        ])

    cleaned = {}
    violations = _check_required(payload, cleaned)

    members = clean_members(payload.get("members"))
    if members is None:
        violations.append(Violation(ViolationKind.INVALID_MEMBERS, "members", MEMBERS_MESSAGE))
    else:
        cleaned["members"] = members

    if violations:
        raise RegistrationValidationError(violations)

    return Registration.model_validate(cleaned)
