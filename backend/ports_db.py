from __future__ import annotations
from dataclasses import dataclass, asdict
from pathlib import Path
import csv
import json
import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from config import PORTS_FILE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortRecord:
    id: str
    name: str
    country: str
    lat: Optional[float]
    lng: Optional[float]

    def has_coords(self) -> bool:
        return self.lat is not None and self.lng is not None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


PortCatalog = Tuple[PortRecord, ...]

_ports_cache: Optional[PortCatalog] = None

# CSV header aliases -> catalog field
_CSV_COLUMNS = {
    "id": "id",
    "name": "name",
    "port_name": "name",
    "country": "country",
    "lat": "lat",
    "latitude": "lat",
    "lon": "lng",
    "lng": "lng",
    "longitude": "lng",
}


def _to_coord(x, limit: float) -> Optional[float]:
    # bools are ints in python; a JSON true is not a coordinate
    if x is None or isinstance(x, bool):
        return None
    try:
        f = float(x)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(f) or abs(f) > limit:
        return None
    return f


def make_record(raw: Dict[str, Any], fallback_id: str) -> PortRecord:
    rid = str(raw.get("id") or "").strip() or fallback_id
    return PortRecord(
        id=rid,
        name=str(raw.get("name") or "").strip(),
        country=str(raw.get("country") or "").strip(),
        lat=_to_coord(raw.get("lat"), 90.0),
        lng=_to_coord(raw.get("lng", raw.get("lon")), 180.0),
    )


def build_catalog(rows: Iterable[Dict[str, Any]]) -> PortCatalog:
    """
    Turns raw rows into the read-only catalog.
    Rows keep their place even with blank names or bad coordinates,
    duplicate ids after the first are dropped.
    """
    seen = set()
    out: List[PortRecord] = []
    for i, raw in enumerate(rows):
        if not isinstance(raw, dict):
            continue
        rec = make_record(raw, fallback_id=f"port-{i + 1}")
        if rec.id in seen:
            logger.warning(f"Duplicate port id '{rec.id}' ignored")
            continue
        seen.add(rec.id)
        out.append(rec)
    return tuple(out)


def _read_json_rows(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("ports", [])
    return data if isinstance(data, list) else []


def _read_csv_rows(path: Path) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            rec: Dict[str, Any] = {}
            for col, value in row.items():
                key = _CSV_COLUMNS.get((col or "").strip().lower())
                if key and key not in rec:
                    rec[key] = value
            rows.append(rec)
    return rows


def read_ports(path: Path) -> PortCatalog:
    if not path.exists():
        logger.warning(f"Ports file not found: {path}")
        return ()

    if path.suffix.lower() == ".csv":
        rows = _read_csv_rows(path)
    else:
        rows = _read_json_rows(path)

    catalog = build_catalog(rows)
    missing = sum(1 for p in catalog if not p.has_coords())
    logger.info(f"Loaded {len(catalog)} ports from {path.name} ({missing} without coordinates)")
    return catalog


def load_ports() -> PortCatalog:
    global _ports_cache
    if _ports_cache is not None:
        return _ports_cache

    _ports_cache = read_ports(PORTS_FILE)
    return _ports_cache


def query_ports(
    catalog: PortCatalog,
    min_lat: float,
    min_lon: float,
    max_lat: float,
    max_lon: float,
    limit: int = 1200,
) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []

    for p in catalog:
        if not p.has_coords():
            continue
        if (min_lat <= p.lat <= max_lat) and (min_lon <= p.lng <= max_lon):
            out.append(p.to_dict())
            if len(out) >= limit:
                break

    return out
