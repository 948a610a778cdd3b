"""Serve the course API with uvicorn.

Usage:
    python -m coursehub
"""
import logging

import uvicorn

from coursehub.core.config import load_config
from coursehub.main import create_app


def main() -> None:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    config = load_config()
    app = create_app(config)
    uvicorn.run(app, host='0.0.0.0', port=config.server_port)


if __name__ == "__main__":
    main()
