"""Small CLI for converting exported builder markup by hand."""

import argparse
import sys
from pathlib import Path

from divi_blocks.common.utils.logger import logger
from divi_blocks.common.utils.config import get_config


def _write(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Output written to {path}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(description="Divi markup to page builder blocks")
    subparsers = parser.add_subparsers(dest="action", help="Action to perform")

    extract_parser = subparsers.add_parser("extract", help="Convert a markup file into blocks")
    extract_parser.add_argument("--input", required=True, type=Path, help="File holding the page markup")
    extract_parser.add_argument("--title", type=str, default=None, help="Page title used in log messages")
    extract_parser.add_argument(
        "--format",
        type=str,
        choices=["raw", "json", "ndjson", "markdown"],
        default="json",
        help="Output format: 'raw' logs each node, the others write a file",
    )
    extract_parser.add_argument("--output", type=Path, default=None, help="Output file (default: output.<ext>)")
    extract_parser.add_argument(
        "--deterministic-keys",
        action="store_true",
        help="Use sequential keys (k1, k2, ...) instead of random ones",
    )

    subparsers.add_parser("config", help="Print configuration")

    args = parser.parse_args(argv)

    if args.action == "extract":
        from divi_blocks.processor import convert_page
        from divi_blocks.common.utils.keys import SequentialKeyGenerator

        try:
            markup = args.input.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read {args.input}: {e}")
            return 1

        logger.info("Starting block extraction...")
        keys = SequentialKeyGenerator() if args.deterministic_keys else None
        page = convert_page(markup, args.title or args.input.stem, key_generator=keys)

        match str(args.format).lower():
            case "raw":
                logger.info("Generating raw output...")
                for block in page:
                    logger.info(block)

            case "json":
                _write(args.output or Path("output.json"), page.json)

            case "ndjson":
                _write(args.output or Path("output.ndjson"), page.ndjson_items)

            case "markdown":
                _write(args.output or Path("output.md"), page.markdown)

            case _:
                logger.error(f"Unknown format: {args.format}")
                return 1

    elif args.action == "config":
        logger.info("Configuration:\n")
        for key, value in sorted(get_config().model_dump().items()):
            print(f"{key}={value}")

    else:
        parser.print_help()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
