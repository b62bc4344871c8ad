"""Render command module: symbol records in, reference pages out."""

from __future__ import annotations

import argparse
import time

from loguru import logger

from apiref.api.cli.utils.rich_output import RichOutputFormatter
from apiref.core.config.site_config import SiteConfig
from apiref.core.exceptions import DocumentLoadError, RecordError
from apiref.reference import load_symbol_records, render_package, write_reference_site

EXIT_OK = 0
EXIT_RECORD_ERRORS = 1
EXIT_USAGE_ERROR = 2


def render_command(
    args: argparse.Namespace, formatter: RichOutputFormatter | None = None
) -> int:
    """Execute the render command and return the process exit code."""
    formatter = formatter or RichOutputFormatter(verbose=getattr(args, "verbose", False))

    try:
        config = SiteConfig.from_sources(args)
        context = config.to_context()
    except ValueError as exc:
        formatter.error(f"Invalid configuration: {exc}")
        return EXIT_USAGE_ERROR

    formatter.verbose_info(f"Using {config!r}")

    try:
        records = load_symbol_records(args.records)
    except DocumentLoadError as exc:
        formatter.error(str(exc))
        return EXIT_USAGE_ERROR

    start = time.perf_counter()
    try:
        result = render_package(
            records,
            context,
            max_workers=config.max_workers,
            fail_fast=getattr(args, "fail_fast", False),
        )
    except RecordError as exc:
        formatter.error(f"Invalid symbol record: {exc}")
        return EXIT_RECORD_ERRORS

    try:
        write_reference_site(
            output_dir=config.output_dir,
            context=context,
            pages=result.pages,
            module_docs=result.module_docs,
        )
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to write reference site: {exc}")
        formatter.error(f"Failed to write reference site: {exc}")
        return EXIT_USAGE_ERROR

    for failure in result.failures:
        formatter.warning(f"Skipped record #{failure.position}: {failure.error}")
    for url, titles in result.collisions.items():
        formatter.warning(f"URL collision at {url}: {', '.join(titles)}")

    formatter.completion_summary(
        {
            "symbols": len(records),
            "pages": len(result.pages),
            "failed": len(result.failures),
            "collisions": len(result.collisions),
        },
        time.perf_counter() - start,
    )
    formatter.success(f"Reference site written to {config.output_dir}")
    return EXIT_OK if result.ok else EXIT_RECORD_ERRORS
