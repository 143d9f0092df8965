import logging
import os
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)

GEOCODER_URL = os.getenv("GEOCODER_URL", "https://photon.komoot.io/api/")
GEOCODER_LIMIT = 15
MAX_SUGGESTIONS = 10
MIN_QUERY_LENGTH = 2
TIMEOUT_SECONDS = 10


class GeocoderError(Exception):
    pass


def _fetch_features(q: str, lat: Optional[float], lon: Optional[float]) -> List[dict]:
    params = {"q": q, "limit": GEOCODER_LIMIT}
    if lat is not None and lon is not None:
        params["lat"] = lat
        params["lon"] = lon

    try:
        response = requests.get(GEOCODER_URL, params=params, timeout=TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.json().get("features", [])
    except (requests.RequestException, ValueError) as e:
        logger.error("Location search failed for %r: %s", q, e)
        raise GeocoderError("Error fetching locations") from e


def _to_suggestion(feature: dict) -> dict:
    props = feature.get("properties") or {}
    coords = (feature.get("geometry") or {}).get("coordinates") or [None, None]

    city = props.get("city") or props.get("town") or props.get("village") or ""
    country = props.get("country") or ""

    parts = [
        props.get("name"),
        props.get("street"),
        props.get("district"),
        city,
        props.get("state"),
        country,
    ]

    # keep first occurrence, drop blanks
    address_parts = []
    for part in parts:
        if part and part.strip() and part not in address_parts:
            address_parts.append(part)

    return {
        "id": f"{props.get('osm_id', '')}-{props.get('name', '')}",
        "name": props.get("name") or city or "Unknown Place",
        "address": ", ".join(address_parts),
        "city": city,
        "country": country,
        "coordinates": {"lat": coords[1], "lon": coords[0]},
    }


def search_locations(q: str, lat: Optional[float] = None, lon: Optional[float] = None) -> List[dict]:
    if not q or len(q) < MIN_QUERY_LENGTH:
        return []

    features = _fetch_features(q, lat, lon)

    # broaden when the biased search finds nothing
    if not features and lat is not None and lon is not None:
        features = _fetch_features(q, None, None)

    suggestions = []
    seen = set()

    for suggestion in map(_to_suggestion, features):
        if suggestion["address"] in seen:
            continue
        seen.add(suggestion["address"])
        suggestions.append(suggestion)

    return suggestions[:MAX_SUGGESTIONS]
