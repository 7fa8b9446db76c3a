from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.core.database import DatabaseManager, db_manager

router = APIRouter(prefix="/health", tags=["infra"])


def get_db_manager() -> DatabaseManager:
    return db_manager


@router.get("/db")
async def database_health(manager: DatabaseManager = Depends(get_db_manager)) -> Dict[str, Any]:
    """Report connectivity and migration status. Always 200; the verdict is in `status`."""
    return await manager.check_database_health()
