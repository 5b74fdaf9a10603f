from __future__ import annotations

import uvicorn

from risk_engine.config.settings import get_settings
from risk_engine.main import app


def main() -> None:
    # invalid RISK_ADDR raises here; a failed bind makes uvicorn exit non-zero
    settings = get_settings()
    print(f"[SERVER][bind] host={settings.bind_host} port={settings.bind_port}", flush=True)
    uvicorn.run(app, host=settings.bind_host, port=settings.bind_port, log_level="info")


if __name__ == "__main__":
    main()
