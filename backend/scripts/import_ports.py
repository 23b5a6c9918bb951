import json
from pathlib import Path

import kagglehub
from kagglehub import KaggleDatasetAdapter

OUT = Path(__file__).resolve().parents[1] / "data" / "ports.json"


def to_catalog_rows(df):
    """World Port Index frame -> [{id, name, country, lat, lng}]"""
    df = df[["PORT_NAME", "COUNTRY", "LATITUDE", "LONGITUDE"]].dropna()
    rows = []
    for i, r in enumerate(df.itertuples(index=False), start=1):
        rows.append({
            "id": f"wpi-{i}",
            "name": str(r.PORT_NAME).strip(),
            "country": str(r.COUNTRY).strip(),
            "lat": float(r.LATITUDE),
            "lng": float(r.LONGITUDE),
        })
    return rows


def main():
    df = kagglehub.load_dataset(
        KaggleDatasetAdapter.PANDAS,
        "rajkumarpandey02/world-wide-port-index-data",
        "World_Port_Index.csv",
    )

    rows = to_catalog_rows(df)
    OUT.parent.mkdir(parents=True, exist_ok=True)
    OUT.write_text(json.dumps(rows, ensure_ascii=False, indent=1), encoding="utf-8")
    print(f"Saved {len(rows)} ports to {OUT}")


if __name__ == "__main__":
    main()
