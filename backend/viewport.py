from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from config import COUNTRY_PADDING_PX, PORT_MIN_ZOOM
from ports_db import PortRecord
from search_utils import normalize

LatLng = Tuple[float, float]


# ---------------------------
# Camera instructions
# ---------------------------

@dataclass(frozen=True)
class Point:
    """
    Go to (lat, lng) and zoom in to at least `min_zoom`.
    With keep_closer_zoom=False the map must use `min_zoom` as the exact zoom.
    """
    lat: float
    lng: float
    min_zoom: float
    keep_closer_zoom: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "point",
            "lat": self.lat,
            "lng": self.lng,
            "min_zoom": self.min_zoom,
            "keep_closer_zoom": self.keep_closer_zoom,
        }


@dataclass(frozen=True)
class Bounds:
    """Fit the camera to the rectangle, keeping `padding` pixels (x, y) around it."""
    south_west: LatLng
    north_east: LatLng
    padding: Tuple[int, int] = (COUNTRY_PADDING_PX, COUNTRY_PADDING_PX)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "bounds",
            "south_west": list(self.south_west),
            "north_east": list(self.north_east),
            "padding": list(self.padding),
        }


ViewportInstruction = Union[Point, Bounds]


def _finite(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool) and math.isfinite(x)


def _has_finite_coords(rec: PortRecord) -> bool:
    return _finite(rec.lat) and _finite(rec.lng)


# ---------------------------
# Planning
# ---------------------------

def plan_for_country(records: Iterable[PortRecord], country_label: Optional[str]) -> Optional[Bounds]:
    """
    Smallest rectangle around every port of the country.
    None when the country has no port with usable coordinates.
    A single port (or identical ports) gives a zero-area rectangle.
    """
    name = normalize(country_label)
    if not name:
        return None

    pts = [
        (r.lat, r.lng)
        for r in records
        if normalize(r.country) == name and _has_finite_coords(r)
    ]
    if not pts:
        return None

    lats = [p[0] for p in pts]
    lngs = [p[1] for p in pts]
    return Bounds(
        south_west=(min(lats), min(lngs)),
        north_east=(max(lats), max(lngs)),
    )


def plan_for_port(
    port_label: Optional[str],
    records: Iterable[PortRecord],
    current_zoom: float,
    country: Optional[str] = None,
) -> Optional[Point]:
    name = normalize(port_label)
    if not name:
        return None
    wanted_country = normalize(country)

    hit = None
    for r in records:
        if normalize(r.name) != name:
            continue
        if wanted_country and normalize(r.country) != wanted_country:
            continue
        hit = r
        break

    if hit is None or not _has_finite_coords(hit):
        return None

    # never zoom out on a port pick
    return Point(lat=hit.lat, lng=hit.lng, min_zoom=max(current_zoom, PORT_MIN_ZOOM))
