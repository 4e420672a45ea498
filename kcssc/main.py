from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
import os
import logging

from kcssc.api.routes import events, programs, photos, upload, health
from kcssc.core.config import get_cached_settings
from kcssc.core.database import init_db
from kcssc.core.exceptions import KcsscError
from kcssc.services import storage_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_cached_settings()

app = FastAPI(
    title="KCSSC Community Centre",
    description="Events, programs and photo gallery API for the community centre website",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [{"loc": list(e.get("loc", [])), "msg": e.get("msg", "")} for e in exc.errors()]
    missing = any(e.get("type") == "missing" for e in exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": "Missing required fields" if missing else "Invalid request", "errors": errors}
    )


@app.exception_handler(KcsscError)
async def kcssc_exception_handler(request: Request, exc: KcsscError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(health.router, tags=["Health Check"])
app.include_router(events.router, prefix="/api", tags=["Events"])
app.include_router(programs.router, prefix="/api", tags=["Programs"])
app.include_router(photos.router, prefix="/api", tags=["Photos"])
app.include_router(upload.router, prefix="/api", tags=["Upload"])


@app.on_event("startup")
def _startup() -> None:
    # the server keeps running without a database; endpoints report the failure
    try:
        init_db()
    except SQLAlchemyError as e:
        logger.warning(f"Database initialization failed, but server will continue: {e}")


os.makedirs(storage_service.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=storage_service.UPLOAD_DIR), name="uploads")

if os.path.isdir(settings.public_dir):
    app.mount("/", StaticFiles(directory=settings.public_dir), name="public")


def run() -> None:
    import uvicorn

    uvicorn.run("kcssc.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
