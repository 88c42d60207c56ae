"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from proshot.config import Settings


def main() -> None:
    """Run the ProShot API server."""
    settings = Settings()
    print(f"ProShot listening on http://{settings.host}:{settings.port}")
    uvicorn.run("proshot.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
