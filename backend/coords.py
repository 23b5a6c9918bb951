from __future__ import annotations
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP
import math
from typing import Dict


@dataclass(frozen=True)
class DmsCoordinates:
    lat: str
    lng: str
    raw: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _fixed(value: float, digits: int) -> str:
    # half away from zero on the exact binary value of the float
    q = Decimal(1).scaleb(-digits)
    out = Decimal(value).quantize(q, rounding=ROUND_HALF_UP)
    if out == 0:
        out = abs(out)
    return f"{out:.{digits}f}"


def _dm(value: float, pos: str, neg: str) -> str:
    hemi = pos if value >= 0 else neg
    a = abs(value)
    deg = math.floor(a)
    minutes = (a - deg) * 60
    return f"{deg}° {_fixed(minutes, 2)} {hemi}"


def format_dms(lat: float, lng: float) -> DmsCoordinates:
    """
    Degrees / decimal minutes for a pointer position, e.g.
    format_dms(-33.865, 151.209) -> "33° 51.90 S", "151° 12.54 E",
    raw "(-33.865000, 151.209000)".
    """
    return DmsCoordinates(
        lat=_dm(lat, "N", "S"),
        lng=_dm(lng, "E", "W"),
        raw=f"({_fixed(lat, 6)}, {_fixed(lng, 6)})",
    )
