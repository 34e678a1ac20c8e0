"""Pydantic field type for ISO8601 durations"""

from datetime import timedelta
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from isoperiod.application.parser import parse_string
from isoperiod.domain.value_objects.duration import Duration


def _validate_duration(value: Any) -> Duration:
    """Accept a duration, a timedelta or an ISO8601 string"""
    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    if isinstance(value, str):
        return parse_string(value)
    raise ValueError(f"Expected an ISO8601 duration string, got {type(value).__name__}")


def _serialize_duration(value: Duration) -> str:
    return str(value)


ISODuration = Annotated[
    Duration,
    PlainValidator(_validate_duration),
    PlainSerializer(_serialize_duration, return_type=str),
    WithJsonSchema({"type": "string", "format": "duration", "example": "P1DT2H"}),
]
