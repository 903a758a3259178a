# search_main.py
"""
Run the image search pipeline on a local photo.

Usage:
  python -m src.cli.search_main <image_path> [--cars]

Prints the outcome JSON; with --cars also lists matching available cars.
Exit code 1 on a hard failure (bad upload, missing key, API error).
"""

from __future__ import annotations

import asyncio
import json
import os
import sys

from src.car_search import ExtractionPipeline, ImageSearchFailed, UploadArtifact
from src.car_search.utils import md_attributes_table, md_cars_table

def run_cli(argv: list[str]) -> int:
    args = [a for a in argv if not a.startswith("--")]
    with_cars = "--cars" in argv
    if not args:
        print(__doc__)
        return 2

    path = args[0]
    try:
        artifact = UploadArtifact.from_path(path) if os.path.exists(path) else None
        outcome = asyncio.run(ExtractionPipeline().run(artifact))
    except ImageSearchFailed as e:
        print(f"❌ {e}")
        return 1

    print(json.dumps(outcome.to_dict(), ensure_ascii=False, indent=2))
    if not outcome.success:
        return 0
    print()
    print(md_attributes_table(outcome.data))

    if with_cars:
        from src.services.dealership_sqlite import DealershipServiceSQL
        svc = DealershipServiceSQL(os.getenv("DEALERSHIP_DB", "src/data/mock.db"))
        attrs = outcome.data
        cars = svc.search_cars(make=attrs.make, body_type=attrs.body_type, color=attrs.color)
        print()
        print(md_cars_table(cars) if cars else "No matching cars in stock.")
    return 0

if __name__ == "__main__":
    sys.exit(run_cli(sys.argv[1:]))
