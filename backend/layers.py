from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional

# ----------------------------
# Base maps / overlays offered by the map
# ----------------------------

@dataclass(frozen=True)
class TileLayer:
    key: str
    label: str
    url: str
    kind: str = "tile"          # "tile" or "wms"
    wms_layers: Optional[str] = None
    opacity: float = 1.0
    max_zoom: Optional[int] = None
    attribution: Optional[str] = None
    default_on: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


OSM_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"

BASE_MAPS: Dict[str, TileLayer] = {b.key: b for b in [
    TileLayer("osm", "OpenStreetMap", OSM_URL, default_on=True),
    TileLayer("osmHot", "OpenStreetMap HOT", "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"),
    TileLayer("cartoLight", "Carto Light", "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png"),
    TileLayer("cartoDark", "Carto Dark", "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png"),
    TileLayer("cartoVoyager", "Carto Voyager",
              "https://{s}.basemaps.cartocdn.com/rastertiles/voyager/{z}/{x}/{y}{r}.png"),
    TileLayer("esriSat", "Esri Satellite",
              "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}"),
    TileLayer("esriStreet", "Esri Street Map",
              "https://server.arcgisonline.com/ArcGIS/rest/services/World_Street_Map/MapServer/tile/{z}/{y}/{x}"),
    TileLayer("esriTopo", "Esri Topographic",
              "https://server.arcgisonline.com/ArcGIS/rest/services/World_Topo_Map/MapServer/tile/{z}/{y}/{x}"),
    TileLayer("openTopo", "OpenTopoMap", "https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png"),
    TileLayer("nasaBlueMarble", "NASA Blue Marble",
              "https://gibs.earthdata.nasa.gov/wmts/epsg3857/best/BlueMarble_ShadedRelief/default/2013-12-01/"
              "GoogleMapsCompatible_Level9/{z}/{y}/{x}.jpg",
              max_zoom=9, attribution="&copy; NASA GIBS"),
    TileLayer("nasaNightLights", "NASA Night Lights",
              "https://gibs.earthdata.nasa.gov/wmts/epsg3857/best/VIIRS_CityLights_2012/default/2012-01-01/"
              "GoogleMapsCompatible_Level8/{z}/{y}/{x}.jpg",
              max_zoom=8, attribution="&copy; NASA GIBS"),
    TileLayer("nautical", "Nautical (OSM + Seamarks)", OSM_URL),
]}

# "ports" is drawn by the client from /api/ports, it has no tile url
OVERLAYS: Dict[str, TileLayer] = {o.key: o for o in [
    TileLayer("ports", "Ports (all)", "/api/ports", kind="markers", default_on=True),
    TileLayer("seamarks", "OpenSeaMap Seamarks", "https://tiles.openseamap.org/seamark/{z}/{x}/{y}.png",
              opacity=0.9, default_on=True),
    TileLayer("eez", "EEZ Maritime Boundaries", "https://geo.vliz.be/geoserver/MarineRegions/wms",
              kind="wms", wms_layers="MarineRegions:eez", opacity=0.6, default_on=True),
    TileLayer("bathymetry", "Bathymetry (EMODnet)", "https://ows.emodnet-bathymetry.eu/wms",
              kind="wms", wms_layers="emodnet:mean_multicolour", opacity=0.6, default_on=True),
    TileLayer("railways", "Railways (OpenRailwayMap)",
              "https://{s}.tiles.openrailwaymap.org/standard/{z}/{x}/{y}.png", opacity=0.85),
]}

# base maps that always draw an overlay on top
FORCED_OVERLAYS = {"nautical": {"seamarks"}}

DEFAULT_BASE_MAP = "osm"


def default_overlays() -> List[str]:
    return [k for k, o in OVERLAYS.items() if o.default_on]


def resolve_layers(base_map: str, overlays: Iterable[str]) -> List[TileLayer]:
    """
    Ordered layers to draw: the base map first, then the enabled overlays
    in menu order. Unknown overlay keys are ignored.
    Raises KeyError for an unknown base map.
    """
    base = BASE_MAPS[base_map]
    enabled = set(overlays) | FORCED_OVERLAYS.get(base_map, set())
    return [base] + [o for k, o in OVERLAYS.items() if k in enabled]
