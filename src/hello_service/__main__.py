import argparse
import asyncio
import sys

from hello_service.entities import EXIT_OK
from hello_service.logging_config import configure_logging
from hello_service.server import init


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minimal greeting HTTP server")
    parser.add_argument(
        "--connect",
        action="store_true",
        help="Connect to Redis and PostgreSQL before listening",
    )
    return parser


def run(connect: bool) -> int:
    logger = configure_logging()
    try:
        result = asyncio.run(init(connect=connect))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_OK
    return result.exit_code


def main(argv: list[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)
    sys.exit(run(connect=args.connect))


def main_connected() -> None:
    sys.exit(run(connect=True))


if __name__ == "__main__":
    main()
