"""
Database management utilities for migrations and health checks.
Schema changes live in Alembic revisions under `migrations/versions`.
"""

import logging
import asyncio
from pathlib import Path
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy import text
from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)

DEFAULT_ALEMBIC_INI = str(Path(__file__).resolve().parents[2] / "alembic.ini")


class DatabaseManager:
    """
    Database management utility for migrations and operations.
    Handles schema versioning, migration execution, and database health checks.
    """

    def __init__(self, engine: Optional[AsyncEngine] = None, alembic_ini: str = DEFAULT_ALEMBIC_INI):
        self.engine = engine or default_engine
        self.alembic_cfg = Config(alembic_ini)
        self.alembic_cfg.set_main_option("sqlalchemy.url", self.engine.url.render_as_string(hide_password=False))
        self.alembic_cfg.attributes["skip_logging_config"] = True

    async def get_current_revision(self) -> Optional[str]:
        """Get the current database revision, or None when never migrated."""
        async with self.engine.connect() as connection:
            return await connection.run_sync(
                lambda sync_conn: MigrationContext.configure(sync_conn).get_current_revision()
            )

    def get_available_revisions(self) -> List[str]:
        """Get list of available migration revisions, oldest first."""
        script_dir = ScriptDirectory.from_config(self.alembic_cfg)
        revisions = [revision.revision for revision in script_dir.walk_revisions()]
        return list(reversed(revisions))

    async def check_migration_status(self) -> Dict[str, Any]:
        """Check the current migration status."""
        current_revision = await self.get_current_revision()
        available_revisions = self.get_available_revisions()
        latest = available_revisions[-1] if available_revisions else None

        if not current_revision:
            status = "not_initialized"
            pending_migrations = available_revisions
        elif current_revision == latest:
            status = "up_to_date"
            pending_migrations = []
        else:
            status = "pending_migrations"
            try:
                current_index = available_revisions.index(current_revision)
                pending_migrations = available_revisions[current_index + 1:]
            except ValueError:
                pending_migrations = available_revisions

        return {
            "status": status,
            "current_revision": current_revision,
            "latest_revision": latest,
            "pending_migrations": pending_migrations,
            "total_revisions": len(available_revisions)
        }

    async def run_migrations_async(self, target_revision: Optional[str] = None) -> None:
        """Run Alembic migrations from an async context without event-loop conflicts."""
        rev = target_revision or "head"
        await asyncio.to_thread(command.upgrade, self.alembic_cfg, rev)
        logger.info("Successfully ran migrations to %s (async)", rev)

    async def check_database_health(self) -> Dict[str, Any]:
        """Check connectivity and migration state.

        Never raises; failures are reported as `unhealthy` with the error text.
        """
        health_status: Dict[str, Any] = {
            "status": "healthy",
            "checks": {},
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

        try:
            async with self.engine.connect() as connection:
                start_time = datetime.now(timezone.utc)
                await connection.execute(text("SELECT 1"))
                end_time = datetime.now(timezone.utc)

            health_status["checks"]["connectivity"] = {
                "status": "pass",
                "response_time_ms": int((end_time - start_time).total_seconds() * 1000)
            }

            migration_status = await self.check_migration_status()
            health_status["checks"]["migrations"] = {
                "status": "pass" if migration_status["status"] == "up_to_date" else "warn",
                "current_revision": migration_status["current_revision"],
                "pending_migrations": len(migration_status["pending_migrations"])
            }

            if any(check["status"] == "warn" for check in health_status["checks"].values()):
                health_status["status"] = "degraded"

        except Exception as e:
            logger.error("Database health check failed: %s", e)
            health_status["status"] = "unhealthy"
            health_status["error"] = str(e)

        return health_status


# Global database manager instance
db_manager = DatabaseManager()


async def initialize_database() -> None:
    """Apply pending migrations at startup."""
    logger.info("Running database migrations...")
    try:
        await db_manager.run_migrations_async()
    except Exception as exc:
        logger.exception("Database migrations failed")
        raise RuntimeError("Failed to run database migrations") from exc
    logger.info("Database migrations completed successfully")
