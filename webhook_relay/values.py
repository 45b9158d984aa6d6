"""Classificação e coerção dos valores dinâmicos recebidos no payload JSON."""
import json
import math
from enum import Enum

from .exceptions import CoercionError


class ValueKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    MAPPING = "mapping"
    LIST = "list"


def kind_of(value) -> ValueKind:
    # bool antes de int: True é instância de int em Python
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    raise CoercionError(value, "JSON value")


def coerce_number(value, field=None) -> float:
    """Converte para float finito. Aceita números e strings numéricas."""
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        try:
            number = float(value.strip())
        except ValueError:
            raise CoercionError(value, "number", field) from None
    elif kind is ValueKind.NUMBER:
        # int gigante do JSON não cabe em float
        try:
            number = float(value)
        except OverflowError:
            raise CoercionError(value, "finite number", field) from None
    else:
        raise CoercionError(value, "number", field)
    if not math.isfinite(number):
        raise CoercionError(value, "finite number", field)
    return number


def coerce_mapping(value, field=None) -> dict:
    if kind_of(value) is not ValueKind.MAPPING:
        raise CoercionError(value, "mapping", field)
    return value


def coerce_list(value, field=None) -> list:
    if kind_of(value) is not ValueKind.LIST:
        raise CoercionError(value, "list", field)
    return list(value)


def render_value(value) -> str:
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
