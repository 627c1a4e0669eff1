"""Launch the configuration API as a local-only server."""

from __future__ import annotations

import os

import uvicorn

from utils.env_utils import load_env_files
from utils.log_utils import is_deep_logging


def main() -> None:
    load_env_files()
    host = os.getenv("CONFIG_API_HOST", "127.0.0.1")
    port = int(os.getenv("CONFIG_API_PORT", "8000"))
    log_level = "debug" if is_deep_logging() else "info"
    # The app and the process-wide store are built after .env values are loaded.
    uvicorn.run(
        "api.server:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=log_level,
        access_log=is_deep_logging(),
    )


if __name__ == "__main__":
    main()
