"""
Migration runner tests
"""

import pytest

from fakes import FakeSupabase
from studio.database.migrations import MIGRATIONS, MIGRATIONS_TABLE, Migration, MigrationRunner
from studio.scripts import apply_migrations

SAMPLE = [
    Migration("002", "add column", ["ALTER TABLE things ADD COLUMN IF NOT EXISTS size INT;"]),
    Migration("001", "create table", [
        "CREATE TABLE IF NOT EXISTS things (id UUID PRIMARY KEY);",
        "CREATE INDEX IF NOT EXISTS idx_things_id ON things(id);",
    ]),
]


@pytest.fixture
def db():
    return FakeSupabase()


def executed_sql(db):
    return [sql for _, sql in db.rpc_calls]


def test_versions_are_unique_and_ordered():
    versions = [m.version for m in MIGRATIONS]
    assert versions == sorted(versions)
    assert len(set(versions)) == len(versions)


def test_applies_in_version_order_and_records_each(db):
    report = MigrationRunner(db, SAMPLE).run()

    assert report.ok
    assert report.applied == ["001", "002"]
    statements = executed_sql(db)[1:]
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS things")
    assert statements[-1].startswith("ALTER TABLE things")
    assert [row["version"] for row in db.tables[MIGRATIONS_TABLE]] == ["001", "002"]


def test_second_run_skips_applied_versions(db):
    MigrationRunner(db, SAMPLE).run()
    db.rpc_calls.clear()

    report = MigrationRunner(db, SAMPLE).run()

    assert report.applied == []
    assert report.skipped == ["001", "002"]
    assert len(db.rpc_calls) == 1  # only the schema_migrations bootstrap


def test_failing_statement_stops_run_and_is_reported(db):
    db.failing_sql.add("CREATE INDEX")

    report = MigrationRunner(db, SAMPLE).run()

    assert not report.ok
    assert report.failed.version == "001"
    assert report.failed.index == 1
    assert "CREATE INDEX" in report.failed.error
    assert report.applied == []
    assert db.tables[MIGRATIONS_TABLE] == []
    assert not any("ALTER TABLE things" in sql for sql in executed_sql(db))


def test_dry_run_executes_nothing(db):
    report = MigrationRunner(db, SAMPLE).run(dry_run=True)

    assert report.pending == ["001", "002"]
    assert db.rpc_calls == []
    assert db.tables[MIGRATIONS_TABLE] == []


def test_dry_run_before_first_migration(db):
    db.missing_tables.add(MIGRATIONS_TABLE)

    report = MigrationRunner(db, SAMPLE).run(dry_run=True)

    assert report.ok
    assert report.pending == ["001", "002"]
    assert db.rpc_calls == []


def test_dry_run_lists_only_unapplied(db):
    db.add(MIGRATIONS_TABLE, version="001", description="create table")

    report = MigrationRunner(db, SAMPLE).run(dry_run=True)

    assert report.skipped == ["001"]
    assert report.pending == ["002"]
    assert db.rpc_calls == []


def test_script_exit_code_reflects_failure(db, monkeypatch):
    db.failing_sql.add("USING GIN")
    monkeypatch.setattr(apply_migrations.SupabaseClients, "service_client", db)

    assert apply_migrations.main([]) == 1
    recorded = [row["version"] for row in db.tables[MIGRATIONS_TABLE]]
    assert recorded == ["001", "002", "003", "004", "005"]


def test_script_dry_run(db, monkeypatch):
    monkeypatch.setattr(apply_migrations.SupabaseClients, "service_client", db)

    assert apply_migrations.main(["--dry-run"]) == 0
    assert db.tables[MIGRATIONS_TABLE] == []
