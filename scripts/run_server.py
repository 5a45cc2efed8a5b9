import argparse
import logging

import uvicorn

from inventory_api.config import get_settings
from inventory_api.core.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the inventory API server.")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind.")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    logger.info("Server running on http://%s:%s", args.host, args.port)
    uvicorn.run(
        "inventory_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
