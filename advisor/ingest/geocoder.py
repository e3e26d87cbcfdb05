"""Postcode geocoding: turns a postcodes.io record into a Location."""

import logging

import httpx

from advisor.errors import GeocodeError
from advisor.ingest.postcode_client import PostcodeClient
from advisor.models.forecast import Location

logger = logging.getLogger(__name__)


def resolve_location(client: PostcodeClient, postcode: str) -> Location:
    """Look up a postcode and return its coordinates.

    Every failure is raised as GeocodeError with a user-facing message.
    """
    postcode = postcode.strip()
    if not postcode:
        raise GeocodeError("Postcode is required")

    try:
        raw = client.lookup(postcode)
    except httpx.HTTPStatusError as e:
        raise GeocodeError(f"Postcode error: {e.response.reason_phrase}") from e
    except httpx.RequestError as e:
        raise GeocodeError(f"Postcode lookup failed: {e}") from e
    except ValueError as e:
        raise GeocodeError(f"Invalid postcode response: {e}") from e

    return _extract_location(raw, postcode)


def _extract_location(raw: dict, postcode: str) -> Location:
    if not isinstance(raw, dict):
        raw = {}
    result = raw.get("result")
    if raw.get("status") != 200 or not isinstance(result, dict) or not result:
        raise GeocodeError(f"Invalid postcode response: {raw.get('error')}")

    try:
        latitude = float(result["latitude"])
        longitude = float(result["longitude"])
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodeError(
            "Invalid postcode response: missing coordinates"
        ) from e

    logger.info("Resolved %s to (%.5f, %.5f)", postcode, latitude, longitude)
    return Location(
        postcode=result.get("postcode") or postcode,
        latitude=latitude,
        longitude=longitude,
    )
