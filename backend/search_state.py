"""
Country -> port search state.

The two text inputs are kept as a SelectionState. Every user event goes
through one of the transition functions below, which return the new state
plus the camera instruction to apply (or None for no camera change).

Rules:
  - a country that resolves to a known country restricts the port list,
    and a port text that is not valid within it is cleared (enforce_cascade)
  - country text that does not resolve yet (still typing) never touches
    the port field
  - a port change never changes the country, and never clears itself:
    an unmatched port is left as typed until the next country change
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
import logging
from typing import Any, Dict, Optional

from config import DEFAULT_CENTER, DEFAULT_ZOOM
from ports_db import PortCatalog
from search_utils import country_index, port_index, resolve_exact
from viewport import Point, ViewportInstruction, plan_for_country, plan_for_port

logger = logging.getLogger(__name__)


class SearchPhase(str, Enum):
    UNCONSTRAINED = "unconstrained"
    COUNTRY_SELECTED = "country_selected"
    COUNTRY_AND_PORT_SELECTED = "country_and_port_selected"


@dataclass(frozen=True)
class SelectionState:
    country_text: str = ""
    port_text: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"country_text": self.country_text, "port_text": self.port_text}


@dataclass(frozen=True)
class SearchUpdate:
    state: SelectionState
    viewport: Optional[ViewportInstruction] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.to_dict(),
            "viewport": self.viewport.to_dict() if self.viewport else None,
        }


# ---------------------------
# Derived selection
# ---------------------------

def selected_country(catalog: PortCatalog, state: SelectionState) -> Optional[str]:
    return resolve_exact(country_index(catalog), state.country_text)


def port_candidates(catalog: PortCatalog, state: SelectionState):
    # whole catalog until the country resolves
    return port_index(catalog, selected_country(catalog, state))


def selected_port(catalog: PortCatalog, state: SelectionState) -> Optional[str]:
    return resolve_exact(port_candidates(catalog, state), state.port_text)


def search_phase(catalog: PortCatalog, state: SelectionState) -> SearchPhase:
    if not selected_country(catalog, state):
        return SearchPhase.UNCONSTRAINED
    if selected_port(catalog, state):
        return SearchPhase.COUNTRY_AND_PORT_SELECTED
    return SearchPhase.COUNTRY_SELECTED


# ---------------------------
# Transitions
# ---------------------------

def enforce_cascade(catalog: PortCatalog, state: SelectionState) -> SelectionState:
    """Clears the port text when it is not a port of the resolved country."""
    country = selected_country(catalog, state)
    if not country:
        return state
    if not state.port_text:
        return state
    if resolve_exact(port_index(catalog, country), state.port_text):
        return state

    logger.debug(f"Port '{state.port_text}' is not in {country}, clearing it")
    return replace(state, port_text="")


def change_country(
    catalog: PortCatalog,
    state: SelectionState,
    text: str,
) -> SearchUpdate:
    new_state = enforce_cascade(catalog, replace(state, country_text=text))

    country = selected_country(catalog, new_state)
    viewport = None
    if country:
        logger.debug(f"Country resolved: {country}")
        viewport = plan_for_country(catalog, country)

    return SearchUpdate(state=new_state, viewport=viewport)


def change_port(
    catalog: PortCatalog,
    state: SelectionState,
    text: str,
    current_zoom: float,
) -> SearchUpdate:
    new_state = replace(state, port_text=text)

    country = selected_country(catalog, new_state)
    port = resolve_exact(port_index(catalog, country), text)
    if not port:
        return SearchUpdate(state=new_state)

    logger.debug(f"Port resolved: {port} (country={country})")
    return SearchUpdate(
        state=new_state,
        viewport=plan_for_port(port, catalog, current_zoom, country=country),
    )


def reset_search() -> SearchUpdate:
    lat, lng = DEFAULT_CENTER
    return SearchUpdate(
        state=SelectionState(),
        viewport=Point(lat=lat, lng=lng, min_zoom=DEFAULT_ZOOM, keep_closer_zoom=False),
    )
