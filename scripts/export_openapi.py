"""Dump the risk engine's OpenAPI contract to JSON.

Usage: python scripts/export_openapi.py [--out-dir DIR]
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from risk_engine.main import app
API_DOCS_DIR = REPO_ROOT / "docs" / "api"


def export_openapi(out_dir: Path = API_DOCS_DIR) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)

    spec_path = out_dir / "openapi.json"
    spec_path.write_text(
        json.dumps(app.openapi(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    return spec_path


def main(argv: list[str] | None = None) -> Path:
    parser = argparse.ArgumentParser(description="Export the risk engine OpenAPI contract")
    parser.add_argument("--out-dir", type=Path, default=API_DOCS_DIR)
    args = parser.parse_args(argv)

    spec_path = export_openapi(args.out_dir)
    print(f"[DOCS][openapi_export] path={spec_path} paths={len(app.openapi()['paths'])}", flush=True)
    return spec_path


if __name__ == "__main__":
    main()
