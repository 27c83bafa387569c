from fastapi import FastAPI, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from lightbnb.config import settings
from lightbnb.core.logging import setup_logging
from lightbnb.database import init_engine, close_engine, get_session

logger = get_logger()

app = FastAPI(title="LightBnB")


@app.on_event("startup")
async def startup_event():
    setup_logging()
    init_engine()


@app.on_event("shutdown")
async def shutdown_event():
    await close_engine()


@app.get("/health", tags=["health"])
async def health(db: AsyncSession = Depends(get_session)):
    details = {"status": "ok"}
    # Check DB connectivity
    try:
        await db.execute(text("SELECT 1"))
        details["database"] = "up"
    except Exception as e:
        logger.warning("Health check could not reach the database", error=str(e))
        details["status"] = "degraded"
        details["database"] = f"down: {str(e)}"
    # Config presence checks (no secrets exposed)
    details["config"] = {
        "db_url_set": bool(settings.DATABASE_URL),
        "db_ssl_required": settings.DB_REQUIRE_SSL,
        "default_result_limit": settings.DEFAULT_RESULT_LIMIT,
    }
    if details["database"] == "up":
        try:
            result = await db.execute(text("SELECT COUNT(1) FROM properties WHERE active = TRUE"))
            details["active_properties_count"] = int(result.scalar() or 0)
        except Exception as e:
            details["active_properties_count"] = f"error: {str(e)}"
    return details
