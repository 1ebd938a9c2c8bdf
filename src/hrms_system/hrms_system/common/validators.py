from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)

Converter = Callable[[Any, str], Any]


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_date_order(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("end_date must be on or after start_date")


def require_positive(value: Decimal, field_name: str) -> Decimal:
    if value <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return value


# Field converters. Each accepts an already typed value or its JSON form.


def as_text(value: Any, field_name: str) -> str:
    return require_non_empty(value, field_name)


def as_optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip() or None


def as_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def as_optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    return as_date(value, field_name)


def as_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    return result


def as_optional_decimal(value: Any, field_name: str) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    return as_decimal(value, field_name)


def as_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def as_optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    return as_int(value, field_name)


def as_text_tuple(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ValidationError(f"{field_name} must be a list of strings")
    items = list(value)
    if not all(isinstance(v, str) for v in items):
        raise ValidationError(f"{field_name} must be a list of strings")
    return tuple(v.strip() for v in items if v.strip())


def enum_of(enum_cls: Type[E]) -> Callable[[Any, str], E]:
    def convert(value: Any, field_name: str) -> E:
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            raise ValidationError(f"{field_name} must be one of: {allowed}")

    return convert


def coerce_fields(data: Mapping[str, Any], converters: Mapping[str, Converter], *, entity: str) -> dict[str, Any]:
    """Convert a payload with the per-field converters.

    Unknown field names are rejected so typos never pass silently.
    """

    unknown = sorted(set(data) - set(converters))
    if unknown:
        raise ValidationError(f"Unknown {entity} field(s): {', '.join(unknown)}")
    return {name: converters[name](value, name) for name, value in data.items()}


def require_fields(values: Mapping[str, Any], required: Iterable[str]) -> None:
    missing = [name for name in required if values.get(name) is None]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
