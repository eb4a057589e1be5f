"""Entry point for running the contact intake server."""
from __future__ import annotations

import uvicorn

from contact_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "contact_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug and settings.environment == "development",
    )


if __name__ == "__main__":
    main()
