"""DELETE /delete/{id} — remove a travel place."""

from typing import Any

from core.clients import get_place_store
from core.config import get_config
from core.errors import TravelBucketError
from core.logging_config import setup_logging
from core.responses import error_response, json_response, parse_place_id


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Delete by id.

    Unknown ids still return 200; deleting is idempotent.
    """
    setup_logging(get_config().log_level)
    try:
        place_id = parse_place_id(event)
        get_place_store().delete_place_by_id(place_id)
    except TravelBucketError as e:
        return error_response(e)
    return json_response(200, {"message": "Travel place deleted"})
