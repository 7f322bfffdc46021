"""Run the service with uvicorn: ``python -m transaction_service``."""

import uvicorn

from transaction_service.core.config import settings


def main() -> None:
    uvicorn.run(
        "transaction_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
