"""Entry point: batch-translate a JSON string-table file."""

import argparse
import asyncio
import logging
import signal
import sys


def build_parser() -> argparse.ArgumentParser:
    from locale_translator import config

    parser = argparse.ArgumentParser(
        prog="locale-translator",
        description="Translate the source locale of a string-table file into its other locales.",
    )
    parser.add_argument("tables", help="JSON file shaped {table: {locale: {key: value}}}")
    parser.add_argument(
        "--source",
        default=config.SOURCE_LOCALE,
        help="source locale (default: %(default)s)",
    )
    parser.add_argument(
        "--target",
        action="append",
        dest="targets",
        metavar="LOCALE",
        help="target locale, repeatable (default: every other locale in the file)",
    )
    parser.add_argument(
        "--provider",
        default=config.TRANSLATION_PROVIDER,
        help="translation provider: tencent, ollama or echo (default: %(default)s)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=config.TRANSLATION_DELAY,
        help="seconds between calls (default: %(default)s)",
    )
    parser.add_argument(
        "--no-overwrite",
        dest="overwrite",
        action="store_false",
        default=config.OVERWRITE_EXISTING,
        help="keep entries that already have a translation",
    )
    parser.add_argument(
        "--scan",
        action="store_true",
        help="only report what would be translated",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the batch translator."""
    from locale_translator import config
    from locale_translator.batch import BatchProgress, BatchTranslator
    from locale_translator.providers import load_provider
    from locale_translator.store import JsonStringTableStore

    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    logger = logging.getLogger(__name__)

    try:
        store = JsonStringTableStore(args.tables)
    except (OSError, ValueError) as exc:
        logger.error("Cannot load string tables from %s: %s", args.tables, exc)
        return 1

    # Scanning never calls the provider
    name = "echo" if args.scan else args.provider.strip().lower()
    # Only the LLM prompt names the source language; Tencent detects it
    kwargs = {"source_lang": args.source} if name == "ollama" else {}
    try:
        provider = load_provider(name, **kwargs)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    def report(progress: BatchProgress) -> None:
        logger.info("%s [%.0f%%]", progress.status, progress.fraction * 100)

    translator = BatchTranslator(
        provider=provider,
        store=store,
        source_locale=args.source,
        delay=args.delay,
        overwrite_existing=args.overwrite,
        progress=report,
    )

    if args.scan:
        summary = translator.scan()
        logger.info(
            "Found %d tables, %d strings, %d target locales",
            summary.tables,
            summary.strings,
            summary.target_locales,
        )
        return 0

    logger.info(
        "Translator starting: provider=%s source=%s file=%s",
        args.provider,
        args.source,
        args.tables,
    )

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    async def run_with_shutdown():
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, translator.stop)
        try:
            return await translator.run(args.targets)
        finally:
            await provider.close()

    try:
        stats = loop.run_until_complete(run_with_shutdown())
    finally:
        loop.close()
        logger.info("Translator stopped")

    return 130 if stats.cancelled else 0


if __name__ == "__main__":
    sys.exit(main())
