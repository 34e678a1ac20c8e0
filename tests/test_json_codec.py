"""Tests for JSON encoding of durations"""

import json

import pytest
from pydantic import ValidationError

from isoperiod.application.parser import parse_string
from isoperiod.domain.errors import BadFormatError, DurationError, DurationJSONError
from isoperiod.domain.units import SECOND
from isoperiod.domain.value_objects.duration import Duration
from isoperiod.infrastructure.json_codec import marshal_json, unmarshal_json


def test_marshal_json_emits_json_string() -> None:
    """Test durations encode as a JSON string of the canonical form"""
    assert marshal_json(parse_string("P7D")) == b'"P1W"'
    assert marshal_json(Duration()) == b'"P0D"'
    assert json.loads(marshal_json(parse_string("PT1.5S"))) == "PT1.5S"


def test_unmarshal_json_accepts_bytes_and_str() -> None:
    """Test decoding both bytes and text payloads"""
    assert unmarshal_json(b'"P1DT2H"') == parse_string("P1DT2H")
    assert unmarshal_json('"PT1.5S"') == Duration(SECOND + SECOND // 2)


@pytest.mark.parametrize("text", ["P1Y2M3DT4H5M6.5S", "P2W", "P0D", "PT0.000000001S"])
def test_json_round_trip_keeps_magnitude(text: str) -> None:
    """Test marshal then unmarshal yields an equal magnitude"""
    original = parse_string(text)

    assert unmarshal_json(marshal_json(original)).nanoseconds == original.nanoseconds


@pytest.mark.parametrize(
    "payload", [b"42", b"null", b"true", b'{"value": "P1D"}', b'["P1D"]', b"{", b""]
)
def test_unmarshal_json_rejects_non_strings(payload: bytes) -> None:
    """Test payloads that are not JSON strings raise DurationJSONError"""
    with pytest.raises(DurationJSONError) as exc_info:
        unmarshal_json(payload)

    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert exc_info.value.data == payload
    assert isinstance(exc_info.value, DurationError)


def test_unmarshal_json_propagates_parse_errors() -> None:
    """Test a JSON string that is not a duration raises the parser error"""
    with pytest.raises(BadFormatError):
        unmarshal_json(b'"P1W2D"')
