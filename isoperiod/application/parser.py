"""ISO8601 duration parsing

Two forms are accepted, each matching the whole input:

- week form ``P<n>W``
- full form ``P[<n>Y][<n>M][<n>D][T[<n>H][<n>M][<n>S]]``, where only the
  seconds field may carry a decimal fraction
"""

import logging
import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Dict, Optional

from isoperiod.domain.errors import BadFormatError, NumericParseError, UnknownFieldError
from isoperiod.domain.units import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR
from isoperiod.domain.value_objects.duration import Duration

logger = logging.getLogger(__name__)

WEEK_PATTERN = re.compile(r"P(?P<weeks>\d+)W", re.ASCII)

FULL_PATTERN = re.compile(
    r"P"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T(?=[\d.])"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>[\d.]+)S)?"
    r")?",
    re.ASCII,
)

UNIT_LENGTHS: Dict[str, int] = {
    "years": YEAR,
    "months": MONTH,
    "weeks": WEEK,
    "days": DAY,
    "hours": HOUR,
    "minutes": MINUTE,
    "seconds": SECOND,
}

# fractional parts step down by a factor of 1000: ms, us, ns
_FRACTION_STEP = 1000


def _to_nanoseconds(field: str, text: str) -> int:
    """Convert one designator value into nanoseconds"""
    unit = UNIT_LENGTHS.get(field)
    if unit is None:
        raise UnknownFieldError(field)

    try:
        value = Decimal(text)
    except InvalidOperation as e:
        raise NumericParseError(field, text) from e

    total = 0
    # enough precision that no fractional step ever rounds
    with localcontext() as ctx:
        ctx.prec = len(text) + 2 * len(str(_FRACTION_STEP))
        while value and unit:
            whole = int(value)
            total += whole * unit
            value = (value - whole) * _FRACTION_STEP
            unit //= _FRACTION_STEP
    return total


def _match(text: str) -> Optional[re.Match]:
    # week form takes precedence; it only matches an isolated P<n>W
    return WEEK_PATTERN.fullmatch(text) or FULL_PATTERN.fullmatch(text)


def parse_string(text: str) -> Duration:
    """Parse an ISO8601 duration string

    Raises:
        BadFormatError: input matches no form or carries no designator
        NumericParseError: a designator value is not a number
        UnknownFieldError: the grammar captured a field with no unit length
    """
    if not isinstance(text, str):
        raise TypeError(f"Duration text must be a string, got {type(text).__name__}")

    match = _match(text)
    if match is None:
        logger.debug(f"Rejected duration string {text!r}")
        raise BadFormatError(text)

    captured = {name: part for name, part in match.groupdict().items() if part is not None}
    if not captured:
        logger.debug(f"Duration string {text!r} has no designators")
        raise BadFormatError(text)

    result = Duration()
    for field, part in captured.items():
        result = result + Duration(_to_nanoseconds(field, part))

    logger.debug(f"Parsed duration {text!r} as {result.nanoseconds}ns")
    return result


def is_duration_string(text: str) -> bool:
    """Check whether a string parses as a duration"""
    try:
        parse_string(text)
    except (BadFormatError, NumericParseError, TypeError):
        return False
    return True
