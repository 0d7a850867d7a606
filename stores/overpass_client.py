#Purpose: The Overpass (OpenStreetMap) "adapter/client".
#Sole responsibility: talk to the Overpass API via HTTP and return raw map elements.
#Encapsulates Overpass-specific details:
#query language (around:radius,lat,lon filters per facility tag)
#endpoint / timeout configuration from the environment
#response validation
#It should not contain store ranking or inventory rules.

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

import requests
from dotenv import load_dotenv

from .models import LatLon

# Read Overpass endpoint from environment
# Example in .env:
# OVERPASS_URL=https://overpass-api.de/api/interpreter
load_dotenv()
OVERPASS_URL = os.getenv("OVERPASS_URL", "https://overpass-api.de/api/interpreter")
OVERPASS_TIMEOUT = int(os.getenv("OVERPASS_TIMEOUT", "30"))

logger = logging.getLogger(__name__)

# (key, value) OSM tags that identify a place that can dispense medicine
FACILITY_TAGS = [
    ("amenity", "pharmacy"),
    ("shop", "chemist"),
    ("healthcare", "pharmacy"),
    ("amenity", "clinic"),
    ("amenity", "hospital"),
    ("amenity", "doctors"),
    ("dispensing", "yes"),
    ("shop", "medical"),
]


class OverpassError(Exception):
    """Raised when the Overpass API cannot be reached or answers with garbage."""
    pass


class OverpassClient:
    """
    Overpass Adapter / Client

    Sole responsibility:
    - Build the nearby-facility query
    - POST it to Overpass
    - Return the list of raw elements (dicts with id, lat, lon, tags)
    """
    def __init__(self, base_url: str | None = None, timeout: int = OVERPASS_TIMEOUT):
        self.base_url = base_url or OVERPASS_URL
        self.timeout = timeout #seconds to wait for Overpass before giving up

        if not self.base_url:
            raise ValueError("Overpass URL not set. Please set OVERPASS_URL in the .env file.")

    def build_query(self, center: LatLon, radius_km: float) -> str:
        """Overpass QL selecting every facility node within radius_km of center."""
        lat, lon = center
        radius_m = int(radius_km * 1000)
        selectors = "\n".join(
            f"  node[{key}={value}](around:{radius_m},{lat},{lon});"
            for key, value in FACILITY_TAGS
        )
        return f"[out:json][timeout:{self.timeout}];\n(\n{selectors}\n);\nout body;"

    def fetch_facilities(self, center: LatLon, radius_km: float = 10.0) -> List[Dict[str, Any]]:
        """
        Calls the Overpass interpreter endpoint and returns the raw elements.

        Returns:
            [
                {"id": int, "lat": float, "lon": float, "tags": {...}},
                ...
            ]
        """
        if radius_km <= 0:
            raise ValueError("radius_km must be > 0")

        query = self.build_query(center, radius_km)

        try:
            response = requests.post(self.base_url, data=query, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise OverpassError(f"Overpass request failed: {e}") from e

        elements = data.get("elements")
        if elements is None:
            raise OverpassError(f"Overpass error: {data.get('remark', 'missing elements in response')}")

        logger.debug("Overpass returned %d elements around %s", len(elements), center)
        return elements
