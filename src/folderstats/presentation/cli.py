"""CLI interface for the folder stats batch runner."""
import sys
import asyncio
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from folderstats import __version__
from folderstats.application.factories import DispatcherFactory
from folderstats.domain.exceptions import DomainException
from folderstats.domain.models import StatsCommandType
from folderstats.infrastructure.config import ConfigLoader
from folderstats.infrastructure.config.loader import SINKS, TEXT_SOURCES
from folderstats.shared.logging import setup_logger, LoggerAdapter, get_logger
from folderstats.shared.metrics import MetricsCollector


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="folderstats", description="Run text stats commands over folders")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest='action', required=True)

    command_names = [c.value for c in StatsCommandType]

    run = subparsers.add_parser('run', help='Run stats commands over folders')
    run.add_argument('--config', type=Path, help='Config YAML file')
    run.add_argument('--folders', '-f', nargs='+', help='Folders to process, in order')
    run.add_argument('--commands', '-c', nargs='+', metavar='COMMAND',
                     help=f"Commands to run per folder ({', '.join(command_names)})")
    run.add_argument('--text-source', choices=TEXT_SOURCES, help='Where folder text comes from')
    run.add_argument('--root-dir', type=Path, help='Base directory for the filesystem text source')
    run.add_argument('--sink', choices=SINKS, help='Where results are stored')
    run.add_argument('--results-path', type=Path, help='JSON Lines results file')
    run.add_argument('--top-n', type=int, help='Words reported by scan_most_popular_word')
    run.add_argument('--verbose', '-v', action='store_true', help='Verbose')
    run.add_argument('--log-file', type=Path, help='Also write logs to this file')

    history = subparsers.add_parser('history', help='Show stored results for a folder')
    history.add_argument('folder', help='Folder name')
    history.add_argument('--config', type=Path, help='Config YAML file')
    history.add_argument('--sink', choices=SINKS, help='Where results are stored')
    history.add_argument('--results-path', type=Path, help='JSON Lines results file')
    history.add_argument('--month', action='store_true', help='Only records from the current month')
    history.add_argument('--verbose', '-v', action='store_true', help='Verbose')
    history.add_argument('--log-file', type=Path, help='Also write logs to this file')

    return parser


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        'folders': getattr(args, 'folders', None),
        'commands': getattr(args, 'commands', None),
        'text_source': getattr(args, 'text_source', None),
        'root_dir': getattr(args, 'root_dir', None),
        'sink': getattr(args, 'sink', None),
        'results_path': getattr(args, 'results_path', None),
        'top_n': getattr(args, 'top_n', None),
    }


def run_batch(factory: DispatcherFactory) -> int:
    """Run the configured batch and log a metrics summary."""
    config = factory.config
    logger = get_logger(__name__)

    if not config.folders:
        logger.warning("No folders configured, nothing to do")
        return 0

    logger.info("=" * 60)
    logger.info(f"folderstats v{__version__}")
    logger.info(f"Folders: {', '.join(config.folders)}")
    logger.info(f"Commands: {', '.join(c.value for c in config.commands)}")
    logger.info(f"Text source: {config.text_source}, sink: {config.sink}")
    logger.info("=" * 60)

    metrics = MetricsCollector()
    dispatcher = factory.create_dispatcher(
        logger=LoggerAdapter(get_logger('folderstats.dispatcher')),
        metrics=metrics
    )
    asyncio.run(dispatcher.process_all_folders(config.folders, config.commands))

    for line in metrics.format_summary():
        logger.info(line)
    return 0


def show_history(factory: DispatcherFactory, folder: str, month_only: bool = False) -> int:
    """Print stored records for a folder to stdout."""
    processor = factory.create_processor()
    records = processor.processed_for_month(folder) if month_only else processor.history(folder)

    if not records:
        print(f"No results stored for '{folder}'")
        return 0

    for record in records:
        print(f"{record.processed_date:%Y-%m-%d %H:%M}  {record.command}")
        for line in record.results:
            print(f"    {line}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logger('folderstats', level=log_level, log_file=args.log_file)
    logger = get_logger(__name__)

    try:
        config = ConfigLoader(config_path=args.config).load(overrides=_overrides(args))
        factory = DispatcherFactory(config)

        if args.action == 'history':
            return show_history(factory, args.folder, month_only=args.month)
        return run_batch(factory)

    except DomainException as e:
        logger.error(f"folderstats error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
