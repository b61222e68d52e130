# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.routes import employee_router, department_router, project_router, client_config_router
from app.database import connect_to_mongo, close_mongo_connection, init_db
from app.config import get_settings
from app.logging_config import setup_logging

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    await init_db()
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(title="Employee Management", lifespan=lifespan)

@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    logger.debug("%s %s", request.method, request.url)
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(e)},
        )

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])
app.include_router(department_router, prefix=settings.API_PREFIX, tags=["departments"])
app.include_router(project_router, prefix=settings.API_PREFIX, tags=["projects"])
app.include_router(client_config_router, prefix=settings.API_PREFIX, tags=["config"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Management API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
