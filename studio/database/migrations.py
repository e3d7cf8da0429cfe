"""
Versioned schema migrations.

Each migration is an ordered list of SQL statements executed one at a time
through the ``exec_sql`` RPC (a SECURITY DEFINER function taking a single
``sql`` text argument, created once from the Supabase SQL editor). Applied
versions are recorded in ``schema_migrations``; a version is recorded only
after every one of its statements succeeded.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set
import logging

from supabase import Client

logger = logging.getLogger(__name__)

MIGRATIONS_TABLE = "schema_migrations"

CREATE_MIGRATIONS_TABLE = f"""
CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE} (
    version TEXT PRIMARY KEY,
    description TEXT NOT NULL,
    applied_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
);
"""

# Undefined table, as reported by Postgres and by the PostgREST schema cache
MISSING_TABLE_CODES = {"42P01", "PGRST205"}


@dataclass(frozen=True)
class Migration:
    version: str
    description: str
    statements: List[str]


@dataclass
class StatementResult:
    version: str
    index: int
    sql: str
    ok: bool
    error: Optional[str] = None


@dataclass
class MigrationReport:
    applied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    pending: List[str] = field(default_factory=list)
    results: List[StatementResult] = field(default_factory=list)
    failed: Optional[StatementResult] = None

    @property
    def ok(self) -> bool:
        return self.failed is None


MIGRATIONS: List[Migration] = [
    Migration("001", "users table", [
        """
        CREATE TABLE IF NOT EXISTS users (
            id UUID PRIMARY KEY,
            email TEXT UNIQUE NOT NULL,
            full_name TEXT,
            avatar_url TEXT,
            credits INTEGER DEFAULT 5,
            email_verified BOOLEAN DEFAULT false,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        );
        """,
        "CREATE INDEX IF NOT EXISTS idx_users_email ON users(email);",
        "CREATE INDEX IF NOT EXISTS idx_users_created_at ON users(created_at DESC);",
    ]),
    Migration("002", "products table", [
        """
        CREATE TABLE IF NOT EXISTS products (
            id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
            user_id UUID NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            name TEXT NOT NULL,
            category TEXT,
            image_url TEXT NOT NULL,
            dimensions JSONB,
            ai_description TEXT,
            metadata JSONB,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        );
        """,
        "CREATE INDEX IF NOT EXISTS idx_products_user_id ON products(user_id);",
    ]),
    Migration("003", "product tag and physical dimensions", [
        """
        ALTER TABLE products
        ADD COLUMN IF NOT EXISTS tag TEXT,
        ADD COLUMN IF NOT EXISTS physical_dimensions JSONB;
        """,
        "CREATE INDEX IF NOT EXISTS idx_products_tag ON products(tag);",
        """
        UPDATE products
        SET tag = lower(regexp_replace(regexp_replace(name, '[^a-zA-Z0-9\\s-]', '', 'g'), '\\s+', '-', 'g'))
        WHERE tag IS NULL;
        """,
    ]),
    Migration("004", "models table", [
        """
        CREATE TABLE IF NOT EXISTS models (
            id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
            user_id UUID NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            name TEXT NOT NULL,
            tag TEXT NOT NULL,
            image_url TEXT,
            dimensions JSONB,
            metadata JSONB,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        );
        """,
        "CREATE INDEX IF NOT EXISTS idx_models_user_id ON models(user_id);",
        "CREATE INDEX IF NOT EXISTS idx_models_tag ON models(tag);",
        "CREATE INDEX IF NOT EXISTS idx_models_created_at ON models(created_at);",
        """
        CREATE OR REPLACE FUNCTION update_models_updated_at()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
        """,
        "DROP TRIGGER IF EXISTS trigger_update_models_updated_at ON models;",
        """
        CREATE TRIGGER trigger_update_models_updated_at
            BEFORE UPDATE ON models
            FOR EACH ROW
            EXECUTE FUNCTION update_models_updated_at();
        """,
    ]),
    Migration("005", "photoshoots table", [
        """
        CREATE TABLE IF NOT EXISTS photoshoots (
            id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
            user_id UUID NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            product_id UUID NOT NULL REFERENCES products(id) ON DELETE CASCADE,
            model_id UUID REFERENCES models(id) ON DELETE SET NULL,
            style_type TEXT NOT NULL CHECK (style_type IN ('professional', 'ugc')),
            scene_description TEXT NOT NULL,
            ai_suggested BOOLEAN DEFAULT false,
            generation_settings JSONB DEFAULT '{}'::jsonb,
            status TEXT DEFAULT 'pending'
                CHECK (status IN ('pending', 'processing', 'completed', 'failed')),
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        );
        """,
        "CREATE INDEX IF NOT EXISTS idx_photoshoots_user_id ON photoshoots(user_id);",
    ]),
    Migration("006", "photoshoot generated images", [
        "ALTER TABLE photoshoots ADD COLUMN IF NOT EXISTS generated_image_url TEXT;",
        "ALTER TABLE photoshoots ADD COLUMN IF NOT EXISTS generated_images JSONB DEFAULT '[]'::jsonb;",
        "CREATE INDEX IF NOT EXISTS idx_photoshoots_generated_images ON photoshoots USING GIN (generated_images);",
        """
        UPDATE photoshoots
        SET generated_images = jsonb_build_array(
            jsonb_build_object(
                'url', generated_image_url,
                'created_at', updated_at,
                'is_primary', true
            )
        )
        WHERE generated_image_url IS NOT NULL AND generated_images = '[]'::jsonb;
        """,
    ]),
]


class MigrationRunner:
    def __init__(
        self,
        supabase: Client,
        migrations: Optional[List[Migration]] = None,
    ):
        self.supabase = supabase
        self.migrations = sorted(migrations if migrations is not None else MIGRATIONS, key=lambda m: m.version)

    def exec_sql(self, sql: str):
        return self.supabase.rpc("exec_sql", {"sql": sql}).execute()

    def applied_versions(self) -> Set[str]:
        result = self.supabase.table(MIGRATIONS_TABLE).select("version").execute()
        return {row["version"] for row in result.data or []}

    def _tracked_versions(self) -> Set[str]:
        """Applied versions, or none when the tracking table was never created"""
        try:
            return self.applied_versions()
        except Exception as e:
            if getattr(e, "code", None) in MISSING_TABLE_CODES:
                return set()
            raise

    def pending(self) -> List[Migration]:
        applied = self._tracked_versions()
        return [m for m in self.migrations if m.version not in applied]

    def run(self, dry_run: bool = False) -> MigrationReport:
        """Apply pending migrations in version order, stopping at the first failing statement"""
        report = MigrationReport()
        if dry_run:
            applied = self._tracked_versions()
        else:
            self.exec_sql(CREATE_MIGRATIONS_TABLE)
            applied = self.applied_versions()

        for migration in self.migrations:
            if migration.version in applied:
                report.skipped.append(migration.version)
                continue
            if dry_run:
                report.pending.append(migration.version)
                continue

            logger.info(f"Applying migration {migration.version}: {migration.description}")
            for index, sql in enumerate(migration.statements):
                statement = StatementResult(version=migration.version, index=index, sql=sql.strip(), ok=True)
                try:
                    self.exec_sql(sql)
                except Exception as e:
                    statement.ok = False
                    statement.error = getattr(e, "message", None) or str(e)
                    report.results.append(statement)
                    report.failed = statement
                    logger.error(
                        f"Migration {migration.version} statement {index} failed: {statement.error}"
                    )
                    return report
                report.results.append(statement)

            self.supabase.table(MIGRATIONS_TABLE).insert({
                "version": migration.version,
                "description": migration.description
            }).execute()
            report.applied.append(migration.version)
            logger.info(f"Migration {migration.version} applied ({len(migration.statements)} statements)")

        return report
