"""
Command line interface for running the drone-riot-conv server.
"""

import argparse
import logging
from typing import List, Optional

import uvicorn

from ..config.server_config import get_server_config
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, defaulting to the environment settings."""
    config = get_server_config()
    parser = argparse.ArgumentParser(description="Run the drone-riot-conv conversion server")
    
    parser.add_argument(
        "--host", 
        type=str, 
        default=config["host"], 
        help=f"Host to bind the server to (default: {config['host']})"
    )
    
    parser.add_argument(
        "--port", 
        type=int, 
        default=config["port"], 
        help=f"Port to bind the server to (default: {config['port']})"
    )
    
    parser.add_argument(
        "--reload", 
        action="store_true", 
        help="Enable auto-reload for development"
    )
    
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=config["log_level"] if config["log_level"] in LOG_LEVELS else "info",
        help="Set the logging level (default: info)"
    )
    
    parser.add_argument(
        "--log-file",
        type=str,
        default=config["log_file"],
        help="Also write logs to this file, rotated at 10MB"
    )
    
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the drone-riot-conv server."""
    args = parse_args(argv)
    
    setup_logging(args.log_level, log_file=args.log_file)
    logger.info(f"drone-riot-conv started, listening on {args.host}:{args.port}")
    
    uvicorn.run(
        "drone_riot_conv.api.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        log_config=None,
    )


if __name__ == "__main__":
    main()
