"""Process entry point: serve the product API with uvicorn."""

import uvicorn

from src.productos.runtime.context import get_config


def main() -> None:
    config = get_config()
    uvicorn.run(
        "src.productos.api.http.app:app",
        host=config.app.host,
        port=config.app.port,
        log_config=None,  # loguru intercepts uvicorn's loggers
    )


if __name__ == "__main__":
    main()
