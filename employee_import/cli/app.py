from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import psycopg2
from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..csvfile.reader import StructuralError
from ..csvfile.template import write_template
from ..db.employee_store import DryRunEmployeeStore, EmployeeStore, PostgresEmployeeStore, db_cursor
from ..logging.init import log_summary, setup_logging
from ..models.config_models import ImportConfig
from ..models.import_session import ImportSession
from ..models.processing_result import ImportReport
from ..services.committer import CommitError, ensure_committable
from ..services.importer import prepare_import, run_import
from ..services.review import build_review_table, render_counts, render_review_table, write_review_table
from ..services.summary import render_completion, render_summary_line

"""CLI entrypoint.

Flow:
- Load .env and the YAML config
- Parse + validate the CSV file and print the review table
- Ask for confirmation (skipped with --yes); declining resets the session
- Commit valid rows one by one and print the completion summary
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2
EXIT_CANCELLED = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env so its connection settings win over the process environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Bulk import employees from a CSV file")
    p.add_argument("csv_file", nargs="?", help="Employee CSV file to import")
    p.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to the YAML config")
    p.add_argument("--yes", "-y", action="store_true", help="Import without asking for confirmation")
    p.add_argument("--dry-run", action="store_true", help="Validate and count without writing to the database")
    p.add_argument("--review-out", metavar="PATH", help="Also write the review table to this CSV file")
    p.add_argument(
        "--template",
        nargs="?",
        const=".",
        metavar="DIR",
        help="Write employee-import-template.csv into DIR (default: current directory) and exit",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _confirm(valid_count: int) -> bool:
    noun = "Employee" if valid_count == 1 else "Employees"
    try:
        answer = input(f"Import {valid_count} {noun}? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def _commit(session: ImportSession, cfg: ImportConfig, dry_run: bool) -> tuple[ImportReport, str]:
    store: EmployeeStore
    if dry_run:
        store = DryRunEmployeeStore()
        return run_import(session, store, cfg), "dry-run"
    with db_cursor(cfg.database) as cur:
        store = PostgresEmployeeStore(cur, table=cfg.table)
        return run_import(session, store, cfg), "live"


def main(argv: list[str] | None = None) -> int:
    # Only read sys.argv when argv is None; an explicit [] means "no arguments".
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    if args.template is not None:
        path = write_template(Path(args.template))
        logger.info(f"template written: {path}")
        return EXIT_SUCCESS_ALL

    if not args.csv_file:
        logger.error("no CSV file given (see --help)")
        return EXIT_FATAL

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = load_config(Path(args.config))
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    csv_path = Path(args.csv_file)
    if not csv_path.is_file():
        logger.error(f"file not found: {csv_path}")
        return EXIT_FATAL

    session = ImportSession()
    try:
        prepare_import(csv_path, session)
    except StructuralError as e:
        logger.error(f"file: {e}")
        return EXIT_FATAL

    parsed = session.loaded()
    table = build_review_table(parsed.rows)
    print(render_review_table(table))
    logger.info(render_counts(parsed.rows))
    if args.review_out:
        out = write_review_table(table, Path(args.review_out))
        logger.info(f"review table written: {out}")

    try:
        valid_rows = ensure_committable(parsed.rows, cfg.tenant)
    except CommitError as e:
        logger.error(f"import: {e}")
        return EXIT_FATAL

    if not args.yes and not _confirm(len(valid_rows)):
        session.reset()
        logger.info("import cancelled, nothing was written")
        return EXIT_CANCELLED

    dry_run = args.dry_run or os.getenv("DISABLE_DB_CONNECT") == "1"
    try:
        report, mode = _commit(session, cfg, dry_run)
    except psycopg2.Error as e:
        logger.error(f"database: {e}".strip())
        return EXIT_FATAL

    logger.info(f"mode={mode} file={report.file_name}")
    logger.info(render_completion(report.outcome))
    if report.insert_stats is not None and report.insert_stats.total_inserts:
        logger.debug(
            f"insert latency avg={report.insert_stats.avg_insert_seconds:.4f}s "
            f"p95={report.insert_stats.p95_insert_seconds:.4f}s"
        )
    # log_summary adds the "SUMMARY " label itself
    log_summary(render_summary_line(report)[len("SUMMARY "):])

    if report.outcome.failed_count > 0 or report.invalid_rows > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
