"""Run the API with uvicorn: ``python -m villa_api``."""

import uvicorn

from villa_api.config import settings


def main() -> None:
    uvicorn.run(
        "villa_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
