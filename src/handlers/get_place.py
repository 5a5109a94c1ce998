"""GET /get/{id} — fetch one travel place."""

from typing import Any

from core.clients import get_place_store
from core.config import get_config
from core.errors import PlaceNotFoundError, TravelBucketError
from core.logging_config import setup_logging
from core.responses import error_response, json_response, parse_place_id


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    setup_logging(get_config().log_level)
    try:
        place_id = parse_place_id(event)
        place = get_place_store().get_place_by_id(place_id)
    except TravelBucketError as e:
        return error_response(e)
    if place is None:
        return error_response(PlaceNotFoundError(place_id))
    return json_response(200, place.model_dump(mode="json"))
