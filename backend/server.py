import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from config import CORS_ORIGINS, LOG_LEVEL
from coords import format_dms
from layers import BASE_MAPS, DEFAULT_BASE_MAP, OVERLAYS, default_overlays, resolve_layers
from ports_db import PortCatalog, load_ports, query_ports
from search_state import (
    SearchUpdate,
    SelectionState,
    change_country,
    change_port,
    port_candidates,
    reset_search,
    search_phase,
)
from search_utils import country_index, port_index, resolve_exact


app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event():
    logging.basicConfig(level=LOG_LEVEL)
    logging.info(f"Port catalog ready: {len(load_ports())} ports")


def get_catalog() -> PortCatalog:
    return load_ports()


# ----------------------------
# Request bodies
# ----------------------------
class SearchStateIn(BaseModel):
    country_text: str = ""
    port_text: str = ""

    def to_state(self) -> SelectionState:
        return SelectionState(country_text=self.country_text, port_text=self.port_text)


class SearchInput(BaseModel):
    state: SearchStateIn = Field(default_factory=SearchStateIn)
    text: str = ""
    current_zoom: float = Field(2, ge=0, le=30)


def search_response(catalog: PortCatalog, update: SearchUpdate):
    out = update.to_dict()
    out["phase"] = search_phase(catalog, update.state).value
    out["countries"] = country_index(catalog)
    out["ports"] = port_candidates(catalog, update.state)
    return out


# ----------------------------
# Routes
# ----------------------------
@app.get("/")
def root():
    return {"ok": True, "service": "port-map-backend"}


@app.get("/api/ports")
def api_ports(
    min_lat: float = Query(..., ge=-90, le=90),
    min_lon: float = Query(..., ge=-180, le=180),
    max_lat: float = Query(..., ge=-90, le=90),
    max_lon: float = Query(..., ge=-180, le=180),
    limit: int = Query(1200, ge=1, le=5000),
    catalog: PortCatalog = Depends(get_catalog),
):
    ports = query_ports(catalog, min_lat, min_lon, max_lat, max_lon, limit)
    return {"ports": ports}


@app.get("/api/search/countries")
def api_countries(catalog: PortCatalog = Depends(get_catalog)):
    return {"countries": country_index(catalog)}


@app.get("/api/search/ports")
def api_search_ports(
    country: Optional[str] = None,
    catalog: PortCatalog = Depends(get_catalog),
):
    # partially typed country -> unfiltered list
    selected = resolve_exact(country_index(catalog), country)
    return {"country": selected, "ports": port_index(catalog, selected)}


@app.post("/api/search/country")
def api_search_country(body: SearchInput, catalog: PortCatalog = Depends(get_catalog)):
    update = change_country(catalog, body.state.to_state(), body.text)
    return search_response(catalog, update)


@app.post("/api/search/port")
def api_search_port(body: SearchInput, catalog: PortCatalog = Depends(get_catalog)):
    update = change_port(catalog, body.state.to_state(), body.text, body.current_zoom)
    return search_response(catalog, update)


@app.post("/api/search/reset")
def api_search_reset(catalog: PortCatalog = Depends(get_catalog)):
    return search_response(catalog, reset_search())


@app.get("/api/coords")
def api_coords(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-540, le=540),
):
    # lng may be outside ±180 when the map wraps
    return format_dms(lat, lng).to_dict()


@app.get("/api/layers")
def api_layers(
    base_map: str = DEFAULT_BASE_MAP,
    overlays: Optional[List[str]] = Query(None),
):
    if base_map not in BASE_MAPS:
        raise HTTPException(status_code=404, detail=f"Unknown base map '{base_map}'")

    enabled = overlays if overlays is not None else default_overlays()
    return {
        "base_maps": [{"key": b.key, "label": b.label} for b in BASE_MAPS.values()],
        "overlays": [{"key": o.key, "label": o.label} for o in OVERLAYS.values()],
        "layers": [layer.to_dict() for layer in resolve_layers(base_map, enabled)],
    }
