"""Run the API with uvicorn on the configured HOST/PORT."""

import uvicorn

from boatyard.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("boatyard.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
