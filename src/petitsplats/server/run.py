"""Console entry point serving the Petits Plats API with uvicorn."""

from __future__ import annotations

import os

import uvicorn

from petitsplats.config import get_settings


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise SystemExit(f"Invalid PETITSPLATS_SERVER_PORT '{value}': {exc}") from exc
    if not 0 < port < 65536:
        raise SystemExit("PETITSPLATS_SERVER_PORT must be between 1 and 65535.")
    return port


def main() -> None:
    """Entry point used by the `petitsplats-server` script."""

    host = os.environ.get("PETITSPLATS_SERVER_HOST", "127.0.0.1")
    port = _parse_port(os.environ.get("PETITSPLATS_SERVER_PORT", "8000"))
    reload_enabled = os.environ.get("RELOAD") == "1"

    uvicorn.run(
        "petitsplats.server.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
        log_level=get_settings().log_level.lower(),
    )


if __name__ == "__main__":
    main()
