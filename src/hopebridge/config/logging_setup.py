from __future__ import annotations

import logging
from typing import Optional

from .models import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure root logging for the CLI and the HTTP server."""
    config = config or LoggingConfig()
    logging.basicConfig(
        level=config.level,
        format=config.format,
    )
    # Provider SDKs log every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
