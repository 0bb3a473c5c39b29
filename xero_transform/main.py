from __future__ import annotations
from dotenv import load_dotenv
load_dotenv()

import argparse
import logging
import sys
from contextlib import ExitStack
from datetime import datetime, timezone
from typing import Optional, Sequence

from pydantic import ValidationError

from xero_transform.core.config import TransformSettings, env_defaults
from xero_transform.core.errors import TransformError
from xero_transform.core.logging_config import setup_logging
from xero_transform.core.models import TransformStats
from xero_transform.data.export import XeroCsvWriter, open_csv_output
from xero_transform.data.io_csv import open_csv_input, read_csv_rows
from xero_transform.data.io_excel import ensure_supported_workbook, is_excel_path, read_excel_rows
from xero_transform.engine.transform import transform

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    defaults = env_defaults()
    p = argparse.ArgumentParser(
        prog="xero-bank-transform",
        description="Transform a bank statement CSV export into a Xero bank statement import CSV.",
    )
    p.add_argument("--file", required=True, help="CSV (or .xlsx/.xlsm workbook) file to read from")
    p.add_argument("--outfile", required=True, help="CSV file to output to")
    p.add_argument("--logpath", default=defaults["log_path"], help="Path to console log files")
    p.add_argument(
        "--outputconsole",
        action=argparse.BooleanOptionalAction,
        default=defaults["output_console"],
        help="Enable console log",
    )
    p.add_argument("--log-level", default=defaults["log_level"], help="Logging level")
    p.add_argument("--sheet", default=None, help="Workbook sheet: name, or 0-based index (default: first sheet)")
    return p

def parse_settings(argv: Optional[Sequence[str]] = None) -> TransformSettings:
    args = build_parser().parse_args(argv)
    return TransformSettings(
        input_path=args.file,
        output_path=args.outfile,
        log_path=args.logpath,
        output_console=args.outputconsole,
        log_level=args.log_level,
        sheet=args.sheet,
    )

def run(settings: TransformSettings) -> TransformStats:
    ensure_supported_workbook(settings.input_path)
    with ExitStack() as stack:
        if is_excel_path(settings.input_path):
            rows = read_excel_rows(settings.input_path, sheet_name=settings.sheet)
        else:
            rows = read_csv_rows(stack.enter_context(open_csv_input(settings.input_path)))

        out = stack.enter_context(open_csv_output(settings.output_path))
        return transform(rows, XeroCsvWriter(out))

def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = parse_settings(argv)
    except ValidationError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 2

    log_file = setup_logging(settings.log_path, settings.output_console, settings.log_level)

    logger.info("Bank Statements Transform tool")
    logger.info("Started at %s", datetime.now(timezone.utc))
    logger.warning("CSV import file - %s", settings.input_path)
    logger.warning("CSV output file - %s", settings.output_path)
    logger.warning("Path to log files - %s", settings.log_path)
    logger.warning("Enable console log - %s", settings.output_console)
    if log_file:
        logger.debug("Logging to %s", log_file)

    try:
        stats = run(settings)
    except (TransformError, OSError) as e:
        logger.critical("%s", e)
        return 1

    logger.warning("Transform completed")
    logger.debug("Stats: %s", stats.to_dict())
    if stats.skipped or stats.malformed:
        logger.warning("%d rows skipped, %d malformed rows dropped", stats.skipped, stats.malformed)
    logger.warning("%d total transactions found in CSV", stats.transactions)
    logger.info("Completed at %s", datetime.now(timezone.utc))
    return 0

if __name__ == "__main__":
    sys.exit(main())
