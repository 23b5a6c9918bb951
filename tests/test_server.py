import pytest
from fastapi.testclient import TestClient

from server import app, get_catalog


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    assert client.get("/").json() == {"ok": True, "service": "port-map-backend"}


def test_ports_bbox(client):
    r = client.get("/api/ports", params={"min_lat": 50, "min_lon": 0, "max_lat": 53, "max_lon": 6})
    assert r.status_code == 200
    assert [p["name"] for p in r.json()["ports"]] == ["Rotterdam", "Amsterdam", ""]


def test_ports_requires_bbox(client):
    assert client.get("/api/ports", params={"min_lat": 0}).status_code == 422


def test_countries(client):
    r = client.get("/api/search/countries")
    assert r.json()["countries"][0] == "Atlantis"


def test_search_ports_for_country(client):
    r = client.get("/api/search/ports", params={"country": "  japan"})
    assert r.json() == {"country": "Japan", "ports": ["Tokyo", "Yokohama"]}


def test_search_ports_partial_country_is_unfiltered(client):
    body = client.get("/api/search/ports", params={"country": "Jap"}).json()
    assert body["country"] is None
    assert "Rotterdam" in body["ports"]


def test_country_then_port_flow(client):
    r = client.post("/api/search/country", json={
        "state": {"country_text": "", "port_text": "Tokyo"},
        "text": "netherlands",
    })
    body = r.json()

    assert r.status_code == 200
    assert body["state"] == {"country_text": "netherlands", "port_text": ""}
    assert body["phase"] == "country_selected"
    assert body["ports"] == ["Amsterdam", "Rotterdam"]
    assert body["viewport"] == {
        "kind": "bounds",
        "south_west": [51.95, 4.14],
        "north_east": [53.0, 5.0],
        "padding": [40, 40],
    }

    r = client.post("/api/search/port", json={
        "state": body["state"],
        "text": "Tokyo",
        "current_zoom": 6,
    })
    body = r.json()
    assert body["state"]["port_text"] == "Tokyo"
    assert body["viewport"] is None

    r = client.post("/api/search/port", json={
        "state": body["state"],
        "text": "ROTTERDAM",
        "current_zoom": 10,
    })
    body = r.json()
    assert body["phase"] == "country_and_port_selected"
    assert body["viewport"] == {
        "kind": "point",
        "lat": 51.95,
        "lng": 4.14,
        "min_zoom": 10,
        "keep_closer_zoom": True,
    }


def test_search_rejects_bad_zoom(client):
    r = client.post("/api/search/port", json={"text": "Tokyo", "current_zoom": -1})
    assert r.status_code == 422


def test_reset(client):
    body = client.post("/api/search/reset").json()

    assert body["state"] == {"country_text": "", "port_text": ""}
    assert body["phase"] == "unconstrained"
    assert body["viewport"]["kind"] == "point"
    assert body["viewport"]["keep_closer_zoom"] is False
    assert len(body["countries"]) == 6


def test_coords(client):
    r = client.get("/api/coords", params={"lat": -33.865, "lng": 151.209})
    assert r.json() == {"lat": "33° 51.90 S", "lng": "151° 12.54 E", "raw": "(-33.865000, 151.209000)"}


def test_coords_validates_lat(client):
    assert client.get("/api/coords", params={"lat": 95, "lng": 0}).status_code == 422


def test_coords_accepts_wrapped_lng(client):
    r = client.get("/api/coords", params={"lat": 10, "lng": 200})
    assert r.status_code == 200
    assert r.json()["lng"] == "200° 0.00 E"


@pytest.mark.parametrize("lng", ["nan", "inf", "-inf", "1e25", "541"])
def test_coords_rejects_unusable_lng(client, lng):
    assert client.get("/api/coords", params={"lat": 10, "lng": lng}).status_code == 422


def test_layers_default(client):
    body = client.get("/api/layers").json()
    assert [l["key"] for l in body["layers"]] == ["osm", "ports", "seamarks", "eez", "bathymetry"]
    assert len(body["base_maps"]) == 12


def test_layers_selected(client):
    r = client.get("/api/layers", params=[("base_map", "nautical"), ("overlays", "railways")])
    assert [l["key"] for l in r.json()["layers"]] == ["nautical", "seamarks", "railways"]


def test_layers_unknown_base_map(client):
    assert client.get("/api/layers", params={"base_map": "mars"}).status_code == 404
