"""Maps suggestion JSON payloads onto JsonResponse."""

import json
from typing import Any

from ...core.exceptions import ResponseParseError
from ...core.schemas.json_response import JsonResponse, Suggestion
from ...observability.logger import get_logger
from .coercion import to_float, to_str

logger = get_logger(__name__)


def parse_json_response(payload: str | bytes) -> JsonResponse:
    """
    Parse a suggestion response.

    Args:
        payload: Raw JSON array of suggestion objects

    Returns:
        JsonResponse; entries that are not objects are skipped

    Raises:
        ResponseParseError: If the payload is not a JSON array
    """
    # JSONDecodeError, UnicodeDecodeError and the int digit limit are all ValueErrors
    try:
        data = json.loads(payload)
    except ValueError as e:
        logger.warning("Malformed JSON response", error=str(e))
        raise ResponseParseError(f"Invalid JSON response: {e}") from e

    if not isinstance(data, list):
        raise ResponseParseError(
            f"Expected a JSON array, got {type(data).__name__}"
        )

    suggestions: list[Suggestion] = []
    for entry in data:
        if not isinstance(entry, dict):
            logger.warning(
                "Skipping suggestion that is not an object",
                entry_type=type(entry).__name__,
            )
            continue
        suggestions.append(_parse_suggestion(entry))

    return JsonResponse(suggestions=suggestions)


def _parse_suggestion(entry: dict[str, Any]) -> Suggestion:
    return Suggestion(
        label=to_str(entry.get("label")) or "",
        block=to_str(entry.get("block")) or "",
        frequency=to_str(entry.get("frequency")) or "",
        image_url=to_str(entry.get("imageUrl")),
        price=to_float(entry.get("price")),
        identifier=to_str(entry.get("identifier")),
        base_price=to_float(entry.get("basePrice")),
        base_price_unit=to_str(entry.get("basePriceUnit")),
        url=to_str(entry.get("url")),
        ordernumber=to_str(entry.get("ordernumber")),
    )
