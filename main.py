# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from config import CORS_ORIGINS, LOG_LEVEL, PORT
from database import check_connection
from routers import auth, dashboard, payments, reminders, reports, settings, tenants, units
from services.exceptions import NotFound, RecordStoreError, ValidationFailed

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not check_connection():
        logger.warning("Starting without a database connection")
    yield


# App instance
app = FastAPI(title="PropertyHub API", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Domain errors
@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(RecordStoreError)
async def record_store_error_handler(request: Request, exc: RecordStoreError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/health")
def health():
    return {"status": "ok", "database": check_connection()}


for module in (auth, units, tenants, payments, reports, reminders, settings, dashboard):
    app.include_router(module.router)


# Unhandled error middleware
@app.middleware("http")
async def error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
