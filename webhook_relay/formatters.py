"""Formatação do payload do webhook em uma mensagem Markdown para o Telegram.

Política dos blocos de timing/recursos:
- todo timestamp é dividido pelo divisor configurado (Settings.timing_divisor) antes da subtração (resultado em ms);
- um intervalo só é exibido quando estritamente positivo;
- campo ausente ou com tipo errado descarta apenas o intervalo que depende dele.
"""
import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import (
    DEFAULT_TIMING_UNIT_DIVISOR,
    MESSAGE_HEADER,
    OPTIONAL_ZERO_FIELDS,
    RESOURCES_HEADER,
    RESOURCE_INTERVALS,
    RESOURCE_TIMESTAMP_FIELDS,
    TIMING_HEADER,
    TIMING_INTERVALS,
)
from .exceptions import CoercionError
from .utils import format_duration, format_field
from .values import coerce_list, coerce_mapping, coerce_number, render_value

logger = logging.getLogger(__name__)

DEFAULT_DIVISOR = float(DEFAULT_TIMING_UNIT_DIVISOR)


def to_milliseconds(raw, field=None, divisor: float = DEFAULT_DIVISOR) -> float:
    milliseconds = coerce_number(raw, field) / divisor
    if not math.isfinite(milliseconds):
        raise CoercionError(raw, "finite number", field)
    return milliseconds


def compute_interval(data: Dict, end_key: str, start_key: str, divisor: float = DEFAULT_DIVISOR) -> Optional[float]:
    if end_key not in data or start_key not in data:
        return None
    try:
        end = to_milliseconds(data[end_key], end_key, divisor)
        start = to_milliseconds(data[start_key], start_key, divisor)
    except CoercionError as exc:
        logger.debug("Intervalo %s-%s ignorado: %s", start_key, end_key, exc)
        return None
    if (end_key in OPTIONAL_ZERO_FIELDS and end == 0) or (start_key in OPTIONAL_ZERO_FIELDS and start == 0):
        return None
    return end - start


def compute_intervals(
    data: Dict,
    intervals: Iterable[Tuple[str, str, str]] = TIMING_INTERVALS,
    divisor: float = DEFAULT_DIVISOR,
) -> List[Tuple[str, float]]:
    """Retorna (rótulo, ms) apenas para os intervalos estritamente positivos."""
    result = []
    for label, end_key, start_key in intervals:
        value = compute_interval(data, end_key, start_key, divisor)
        if value is not None and value > 0:
            result.append((label, value))
    return result


def format_timing_block(timing: Dict, divisor: float = DEFAULT_DIVISOR) -> List[str]:
    return [
        format_field(label, format_duration(value))
        for label, value in compute_intervals(timing, TIMING_INTERVALS, divisor)
    ]


def _resource_duration(resource: Dict, divisor: float) -> Optional[float]:
    if "duration" in resource:
        try:
            return to_milliseconds(resource["duration"], "duration", divisor)
        except CoercionError as exc:
            logger.debug("Duração do recurso ignorada: %s", exc)
            return None
    return compute_interval(resource, "responseEnd", "startTime", divisor)


def format_resource_block(resource: Dict, divisor: float = DEFAULT_DIVISOR) -> List[str]:
    lines = []
    for key, value in resource.items():
        if key in RESOURCE_TIMESTAMP_FIELDS:
            continue
        lines.append(format_field(key, _render(value)))

    duration = _resource_duration(resource, divisor)
    if duration is not None and duration > 0:
        lines.append(format_field("Duration", format_duration(duration)))
    for label, value in compute_intervals(resource, RESOURCE_INTERVALS, divisor):
        lines.append(format_field(label, format_duration(value)))
    return lines


def _render(value) -> str:
    try:
        return render_value(value)
    except CoercionError:
        return str(value)


def format_resources(resources: List, divisor: float = DEFAULT_DIVISOR) -> List[str]:
    """Um bloco por recurso, cada um seguido de linha em branco."""
    lines = []
    for index, item in enumerate(resources):
        try:
            resource = coerce_mapping(item, f"resources[{index}]")
        except CoercionError as exc:
            logger.debug("Recurso ignorado: %s", exc)
            continue
        lines.extend(format_resource_block(resource, divisor))
        lines.append("")
    return lines


def format_message(payload: Dict, divisor: float = DEFAULT_DIVISOR) -> str:
    if not divisor > 0:
        raise ValueError(f"divisor must be positive, got {divisor!r}")
    lines = [MESSAGE_HEADER, ""]

    for key, value in payload.items():
        if key == "timing":
            try:
                timing = coerce_mapping(value, key)
            except CoercionError:
                lines.append(format_field(key, _render(value)))
                continue
            lines.append(TIMING_HEADER)
            lines.extend(format_timing_block(timing, divisor))
        elif key == "resources":
            try:
                resources = coerce_list(value, key)
            except CoercionError:
                lines.append(format_field(key, _render(value)))
                continue
            lines.append(RESOURCES_HEADER)
            lines.extend(format_resources(resources, divisor))
        else:
            lines.append(format_field(key, _render(value)))

    return "\n".join(lines) + "\n"
