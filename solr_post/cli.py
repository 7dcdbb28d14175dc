"""
Command line interface: post files from a directory to a Solr collection.

    solr-post -c portal -d ./public -f html,htm --concurrency 16
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from . import solr_post
from .config import Settings
from .core.exceptions import PostConfigError, SolrPostError
from .logging_config import setup_logging
from .models import PostConfig, describe_validation_error
from .services.consumer.job_models import RunSummary
from .utils.progress_utils import format_elapsed, format_progress_line


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solr-post",
        description="Post files to a Solr collection",
    )
    parser.add_argument("-c", "--collection", help="the Solr collection to post to")
    parser.add_argument(
        "-H", "--host", help=f"the host of the Solr server (default: {settings.host})"
    )
    parser.add_argument(
        "-p", "--port", type=int, help=f"the port of the Solr server (default: {settings.port})"
    )
    parser.add_argument(
        "--url",
        help="base Solr update URL, e.g. http://localhost:8983/solr/my_collection/update. "
        "When set, collection, host and port are ignored",
    )
    parser.add_argument("-u", "--user", help='basic auth credentials, e.g. "username:password"')
    parser.add_argument(
        "-d", "--directory", required=True, help="the directory to search for files to post"
    )
    parser.add_argument(
        "-f",
        "--file-extensions",
        help=f'comma separated file extensions to post (default: "{settings.file_extensions}")',
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        help=f"number of concurrent requests to the Solr server (default: {settings.concurrency})",
    )
    parser.add_argument(
        "-e",
        "--exclude-regex",
        help="skip files whose content matches this pattern (case insensitive). "
        "Takes precedence over --include-regex",
    )
    parser.add_argument(
        "-i",
        "--include-regex",
        help="only post files whose content matches this pattern (case insensitive)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help=f"HTTP request timeout in seconds (default: {settings.request_timeout_seconds})",
    )
    parser.add_argument(
        "--no-commit", action="store_true", help="do not send a commit after uploading"
    )
    parser.add_argument("--log-level", help=f"log level (default: {settings.log_level})")
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def config_from_args(
    args: argparse.Namespace, settings: Settings, parser: argparse.ArgumentParser
) -> PostConfig:
    """Validate the arguments before any filesystem or network work begins."""
    has_target = (
        args.url is not None
        or args.collection is not None
        or settings.update_url is not None
        or "collection" in settings.model_fields_set
    )
    if not has_target:
        parser.error("one of --collection or --url is required")

    try:
        return PostConfig.from_settings(
            settings,
            collection=args.collection,
            host=args.host,
            port=args.port,
            update_url=args.url,
            basic_auth_creds=args.user,
            directory_path=args.directory,
            file_extensions=args.file_extensions,
            concurrency=args.concurrency,
            exclude_regex=args.exclude_regex,
            include_regex=args.include_regex,
            timeout_seconds=args.timeout,
            commit=False if args.no_commit else None,
        )
    except PostConfigError as e:
        parser.error(str(e))


def print_summary(console: Console, summary: RunSummary) -> None:
    console.print(
        f"Finished indexing in {format_elapsed(summary.elapsed_seconds)}: "
        f"[green]{summary.succeeded} succeeded[/], "
        f"[red]{summary.failed} failed[/], "
        f"[yellow]{summary.skipped} skipped[/]"
    )
    for failure in summary.failures:
        console.print(f"  [red]failed[/] {failure.file_path}: {failure.hint or failure.error_message}")
    if summary.succeeded and not summary.committed:
        console.print("[yellow]Documents were posted but not committed[/]")


def load_settings() -> Settings:
    """Read SOLR_POST_* settings; a bad value is a usage error like a bad flag."""
    try:
        return Settings()
    except ValidationError as e:
        build_parser(Settings.model_construct()).error(
            f"invalid SOLR_POST_* setting: {describe_validation_error(e)}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if args.log_file:
        overrides["log_file_path"] = args.log_file
    if overrides:
        settings = settings.model_copy(update=overrides)

    config = config_from_args(args, settings, parser)
    setup_logging(settings)
    logging.debug(f"Configuration loaded from: {settings.config_file_info['active_config_file']}")
    logging.debug(f"Posting {config.directory_path} to {config.resolved_update_url}")

    console = Console()
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Scanning files...", total=None)
        totals = {"files": 0}

        def on_start(total: int) -> None:
            totals["files"] = total
            progress.update(task, total=total, description=format_progress_line(0, total))
            progress.console.print(
                f"Start indexing {total} files with concurrency {config.concurrency}"
            )

        def on_next(indexed_count: int) -> None:
            progress.update(
                task,
                completed=indexed_count,
                description=format_progress_line(indexed_count, totals["files"]),
            )

        def on_finish() -> None:
            progress.stop_task(task)

        try:
            summary = asyncio.run(
                solr_post(config, on_start=on_start, on_next=on_next, on_finish=on_finish)
            )
        except SolrPostError as e:
            logging.error(str(e))
            return 1

    print_summary(console, summary)
    return 1 if summary.failed else 0
