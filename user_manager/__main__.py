"""Run the User Manager API with uvicorn: ``python -m user_manager``."""

import uvicorn

from user_manager.core.config import settings


def main() -> None:
    uvicorn.run(
        "user_manager.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
