"""JSON encoding of durations as JSON strings"""

import logging
from typing import Union

from pydantic import TypeAdapter, ValidationError

from isoperiod.application.parser import parse_string
from isoperiod.domain.errors import DurationJSONError
from isoperiod.domain.value_objects.duration import Duration

logger = logging.getLogger(__name__)

_string_adapter = TypeAdapter(str)


def marshal_json(duration: Duration) -> bytes:
    """Encode a duration as a JSON string"""
    return _string_adapter.dump_json(str(duration))


def unmarshal_json(data: Union[str, bytes]) -> Duration:
    """Decode a JSON string value into a duration

    Raises:
        DurationJSONError: payload is not valid JSON or not a JSON string
        BadFormatError, NumericParseError: the decoded text is not a duration
    """
    try:
        text = _string_adapter.validate_json(data, strict=True)
    except ValidationError as e:
        logger.debug(f"Rejected JSON duration payload {data!r}")
        raise DurationJSONError(
            f"duration JSON value must be a string: {e.errors()[0]['msg']}",
            data.encode() if isinstance(data, str) else data,
        ) from e
    return parse_string(text)
