# main.py
import sys
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import IntegrityError

from eventfence.db import init_db
from eventfence.errors import ErrorResponse
from eventfence.responses import failure
from eventfence.routes.events import router as events_router
from eventfence.settings import settings


def configure_logging(level: Optional[str] = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Crear las tablas al arrancar"""
    configure_logging()
    logger.info("Starting Events API...")
    init_db()

    yield

    logger.info("Shutting down Events API...")


# Crear aplicación FastAPI
app = FastAPI(
    title="Events API",
    description="API REST para gestión de eventos y sus geofences",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events_router)


# ==================== Manejo de errores ====================

@app.exception_handler(ErrorResponse)
async def error_response_handler(request: Request, exc: ErrorResponse):
    return JSONResponse(status_code=exc.status_code, content=failure(exc.message))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return JSONResponse(status_code=400, content=failure(", ".join(messages)))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=400, content=failure("Valor duplicado o referencia inválida"))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=failure("Server Error"))


@app.get("/", tags=["Root"])
def root():
    """Endpoint raíz con información de la API"""
    return {
        "message": "Events API - Gestión de eventos y geofences",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "events": "/api/v1/events"
        }
    }


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "events-api"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "eventfence.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True  # Solo en desarrollo
    )
