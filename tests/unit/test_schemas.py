"""Tests for enums, exceptions and response schemas."""

import pytest
from pydantic import ValidationError

from findologic_api.core.enums import Endpoint, OrderType, QueryParameter
from findologic_api.core.exceptions import (
    FindologicApiError,
    UnknownConfigKeyError,
    UnknownParamError,
)
from findologic_api.core.schemas.json_response import JsonResponse, Suggestion
from findologic_api.core.schemas.xml_response import Filter, Item


class TestDefinitions:
    """Tests for endpoint and parameter vocabularies."""

    def test_all_endpoints_are_available(self):
        assert Endpoint.list() == [
            "alivetest.php",
            "index.php",
            "selector.php",
            "autocomplete.php",
        ]

    def test_query_parameter_vocabulary(self):
        assert QueryParameter.list() == [
            "shopkey",
            "shopurl",
            "userip",
            "referer",
            "revision",
            "query",
            "attrib",
            "order",
            "properties",
            "pushAttrib",
            "count",
            "first",
            "identifier",
            "group",
            "forceOriginalQuery",
            "outputAttrib",
            "selected",
        ]

    @pytest.mark.parametrize(
        "endpoint, expected",
        [
            (Endpoint.ALIVETEST, False),
            (Endpoint.SEARCH, True),
            (Endpoint.NAVIGATION, True),
            (Endpoint.SUGGESTION, False),
        ],
    )
    def test_requires_alivetest(self, endpoint, expected):
        assert endpoint.requires_alivetest is expected

    def test_order_type_values(self):
        assert OrderType.PRICE_ASC.value == "price ASC"
        assert OrderType.RELEVANCE.value == "rank"


class TestExceptions:
    """Tests for the lookup error types."""

    @pytest.mark.parametrize(
        "exc, message",
        [
            (UnknownParamError("x"), "Unknown or unset param."),
            (UnknownConfigKeyError("x"), "Unknown or unset configuration value."),
        ],
    )
    def test_lookup_errors(self, exc, message):
        assert isinstance(exc, LookupError)
        assert isinstance(exc, FindologicApiError)
        assert str(exc) == message


class TestResponseSchemas:
    """Tests for response models."""

    def test_has_items_follows_item_amount(self):
        assert Filter(item_amount=0).has_items() is False
        assert Filter(items={"a": Item(name="a")}, item_amount=1).has_items() is True

    def test_nested_items(self):
        item = Item(name="Buch", items={"Krimi": Item(name="Krimi")})
        assert item.items["Krimi"].name == "Krimi"

    def test_models_are_frozen(self):
        suggestion = Suggestion(label="gurke")
        with pytest.raises(ValidationError):
            suggestion.label = "tomate"

    def test_suggestion_optional_fields_default_to_none(self):
        suggestion = Suggestion(label="gurke")
        assert suggestion.price is None
        assert suggestion.ordernumber is None

    def test_item_mappings_are_frozen_copies(self):
        children = {"Krimi": Item(name="Krimi")}
        item = Item(name="Buch", items=children)
        children["Horror"] = Item(name="Horror")

        assert list(item.items) == ["Krimi"]
        with pytest.raises(TypeError):
            item.items["Horror"] = Item(name="Horror")

    def test_default_items_are_read_only(self):
        with pytest.raises(TypeError):
            Filter().items["a"] = Item(name="a")

    def test_suggestions_are_a_tuple(self):
        response = JsonResponse(suggestions=[Suggestion(label="gurke")])
        assert response.suggestions == (Suggestion(label="gurke"),)

    def test_dump_returns_plain_dicts(self):
        result_filter = Filter(
            name="cat",
            items={"Buch": Item(name="Buch", items={"Krimi": Item(name="Krimi")})},
        )
        dumped = result_filter.model_dump()
        assert dumped["items"]["Buch"]["items"]["Krimi"]["name"] == "Krimi"
