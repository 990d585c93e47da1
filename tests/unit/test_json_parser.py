"""Tests for the JSON response mapper."""

import pytest

from findologic_api.core.exceptions import ResponseParseError
from findologic_api.services.response.coercion import to_bool, to_float, to_int, to_str
from findologic_api.services.response.json_parser import parse_json_response
from tests.fixtures import SamplePayloads


class TestParseJsonResponse:
    """Tests for parse_json_response()."""

    def test_complete_suggestion(self):
        suggestion = parse_json_response(SamplePayloads.suggest_json()).suggestions[0]

        assert suggestion.label == "Blubbergurken"
        assert suggestion.block == "suggest"
        assert suggestion.frequency == "12"
        assert suggestion.image_url == "https://www.blubbergurken.io/gurke.png"
        assert suggestion.price == 3.49
        assert suggestion.identifier == "17"
        assert suggestion.base_price == 6.98
        assert suggestion.base_price_unit == "kg"
        assert suggestion.url == "https://www.blubbergurken.io/gurke"
        assert suggestion.ordernumber == "SW10017"

    def test_sparse_suggestion_defaults_to_none(self):
        suggestion = parse_json_response(SamplePayloads.suggest_json()).suggestions[1]

        assert suggestion.frequency == "4"
        assert suggestion.identifier == "18"
        assert suggestion.image_url is None
        assert suggestion.base_price is None
        assert suggestion.url is None
        assert suggestion.ordernumber is None

    def test_zero_price_is_not_absent(self):
        suggestions = parse_json_response(SamplePayloads.suggest_json()).suggestions

        assert suggestions[1].price == 0.0
        assert suggestions[1].price is not None

    def test_unparsable_price_is_none(self):
        suggestion = parse_json_response(SamplePayloads.suggest_json()).suggestions[2]
        assert suggestion.price is None

    def test_empty_array(self):
        assert parse_json_response("[]").suggestions == ()

    def test_non_object_entries_are_skipped(self):
        response = parse_json_response('[{"label": "a"}, "b", 3, null]')
        assert [s.label for s in response.suggestions] == ["a"]

    def test_missing_label_defaults_to_empty_string(self):
        suggestion = parse_json_response('[{"block": "cat"}]').suggestions[0]
        assert suggestion.label == ""

    @pytest.mark.parametrize("payload", ["not json", "{\"label\": \"a\"}", "42"])
    def test_invalid_payload_raises(self, payload):
        with pytest.raises(ResponseParseError):
            parse_json_response(payload)

    def test_undecodable_bytes_raise_parse_error(self):
        with pytest.raises(ResponseParseError):
            parse_json_response(b'[{"label": "\xff"}]')

    def test_huge_integer_price_is_none(self):
        payload = '[{"label": "a", "price": ' + "9" * 400 + "}]"
        suggestion = parse_json_response(payload).suggestions[0]
        assert suggestion.price is None
        assert suggestion.label == "a"


class TestCoercion:
    """Tests for the scalar coercion helpers."""

    @pytest.mark.parametrize(
        "value, expected",
        [(None, None), ("a", "a"), (3, "3"), (2.5, "2.5"), (True, "1"), ([1], None)],
    )
    def test_to_str(self, value, expected):
        assert to_str(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, None),
            (0, 0.0),
            ("1.5", 1.5),
            (" 2 ", 2.0),
            ("x", None),
            ("", None),
            (True, None),
            (10**400, None),
        ],
    )
    def test_to_float(self, value, expected):
        assert to_float(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [("5", 5), ("5.9", 5), (None, None), ("nan", None), ("inf", None)],
    )
    def test_to_int(self, value, expected):
        assert to_int(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [("1", True), ("0", False), ("true", True), (None, False), (1, True)],
    )
    def test_to_bool(self, value, expected):
        assert to_bool(value) == expected
