from decimal import Decimal

import pytest

from geodata.common.errors import NumericFormatError
from geodata.pipeline.classify import LINE_RULES, HEADER_PATTERN, LOCATION_PATTERN, LineType, classify, parse_decimal


def test_classify_header_captures_name_and_description_verbatim():
    result = classify("# Tananarive (Paris) / Laborde Grid [Tananarive (Paris) / Laborde Grid]")
    assert result.line_type is LineType.HEADER
    assert result.fields == {
        "name": "Tananarive (Paris) / Laborde Grid",
        "description": "Tananarive (Paris) / Laborde Grid",
    }


def test_classify_location_extracts_four_bounds_as_text():
    result = classify("# Area of use: (lat: 30.99, 35.00) - (lon: -86.79, -84.89)")
    assert result.line_type is LineType.LOCATION
    assert result.fields == {"min_lat": "30.99", "max_lat": "35.00", "min_lon": "-86.79", "max_lon": "-84.89"}


def test_location_line_that_also_matches_header_classifies_as_location():
    line = "# Area of use: [Madagascar - onshore] (lat: -25.64, -11.89) - (lon: 43.18, 50.56)"
    assert HEADER_PATTERN.search(line) is not None
    assert LOCATION_PATTERN.search(line) is not None

    assert classify(line).line_type is LineType.LOCATION


def test_rule_table_tests_location_before_header():
    order = [line_type for line_type, _pattern in LINE_RULES]
    assert order.index(LineType.LOCATION) < order.index(LineType.HEADER)


@pytest.mark.parametrize("marker", ["DISCONTINUED", "DEPRECATED"])
def test_classify_obsoletion_markers(marker):
    result = classify(f"# {marker}")
    assert result.line_type is LineType.OBSOLETION
    assert result.fields == {"obsolete_description": marker}


def test_classify_rejects_other_status_words():
    assert classify("# RETIRED").line_type is LineType.UNKNOWN


def test_classify_identity_stops_proj_value_at_whitespace():
    result = classify("<26729> +proj=tmerc +lat_0=30.5 +datum=NAD27 +no_defs  <>")
    assert result.line_type is LineType.IDENTITY
    assert result.fields == {"identity": "26729", "proj_value": "tmerc"}


def test_classify_identity_at_end_of_line():
    result = classify("<5> +proj=merc")
    assert result.line_type is LineType.IDENTITY
    assert result.fields == {"identity": "5", "proj_value": "merc"}


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_classify_blank_lines_are_empty(line):
    result = classify(line)
    assert result.line_type is LineType.EMPTY
    assert result.fields == {}


def test_classify_unknown_line_has_no_fields():
    result = classify("this is garbage")
    assert result.line_type is LineType.UNKNOWN
    assert result.fields == {}


def test_classify_is_pure():
    line = "(lat: 1.0, 2.0) - (lon: 3.0, 4.0)"
    assert classify(line) == classify(line)


def test_location_with_malformed_separator_still_classifies_as_location():
    result = classify("(lat: 1,5, 2.0) - (lon: 3.0, 4.0)")
    assert result.line_type is LineType.LOCATION
    assert result.fields["min_lat"] == "1,5"


def test_parse_decimal_accepts_signed_values():
    assert parse_decimal("-86.79") == Decimal("-86.79")
    assert str(parse_decimal("1.0")) == "1.0"


@pytest.mark.parametrize("value", ["1,5", "--1.0", "1_0.5", "1x5"])
def test_parse_decimal_rejects_malformed_values(value):
    with pytest.raises(NumericFormatError) as exc_info:
        parse_decimal(value)
    assert exc_info.value.value == value
