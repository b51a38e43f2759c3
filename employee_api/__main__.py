"""Run the API with uvicorn: ``python -m employee_api``."""

import uvicorn

from employee_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "employee_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # logging is configured in the app lifespan
    )


if __name__ == "__main__":
    main()
