"""
Apply Schema Migrations Script
Runs pending versioned migrations against the Supabase database.
Run manually or from a deploy step, never from a request handler:

    python -m studio.scripts.apply_migrations [--dry-run]
"""

import argparse
import sys
import logging

from studio.config.settings import settings
from studio.database.migrations import MigrationRunner
from studio.database.supabase_client import SupabaseClients

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main function to apply migrations; returns the process exit code"""
    parser = argparse.ArgumentParser(description="Apply pending schema migrations")
    parser.add_argument("--dry-run", action="store_true", help="list pending migrations without applying them")
    args = parser.parse_args(argv)

    try:
        supabase = SupabaseClients(settings).service_client
        report = MigrationRunner(supabase).run(dry_run=args.dry_run)
    except Exception as e:
        logger.error(f"Error during migration: {e}")
        return 1

    if args.dry_run:
        logger.info(f"Pending migrations: {', '.join(report.pending) or 'none'}")
        return 0

    for statement in report.results:
        status = "ok" if statement.ok else f"FAILED: {statement.error}"
        logger.info(f"{statement.version}[{statement.index}] {status}")

    if not report.ok:
        logger.error(f"Migration {report.failed.version} failed; later migrations were not attempted")
        return 1

    logger.info(f"Applied: {', '.join(report.applied) or 'none'}; already applied: {len(report.skipped)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
