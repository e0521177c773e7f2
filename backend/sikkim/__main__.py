"""Entry point for `python -m sikkim` and the `sikkim-server` console script."""

import uvicorn

from sikkim.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "sikkim.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
