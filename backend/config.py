import os
from pathlib import Path

from dotenv import load_dotenv

# ----------------------------
# Config / env
# ----------------------------
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

PORTS_FILE = Path(os.getenv("PORTS_FILE", str(BASE_DIR / "data" / "ports.json")))

PORT_MIN_ZOOM = int(os.getenv("PORT_MIN_ZOOM", "8"))
COUNTRY_PADDING_PX = int(os.getenv("COUNTRY_PADDING_PX", "40"))

# reset view (world)
DEFAULT_CENTER = (
    float(os.getenv("DEFAULT_CENTER_LAT", "20")),
    float(os.getenv("DEFAULT_CENTER_LNG", "0")),
)
DEFAULT_ZOOM = int(os.getenv("DEFAULT_ZOOM", "2"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
