from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

from worklog.config.settings import settings
from worklog.exceptions import WorkLogError
from worklog.routers import analytics, work_log

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Work Log API")

# CORS configuration, only the allow-listed frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

# Route registration
app.include_router(work_log.router, tags=["Logs"])
app.include_router(analytics.router, tags=["Analytics"])

# Error responses always carry a "message" field
@app.exception_handler(WorkLogError)
async def work_log_error_handler(request: Request, exc: WorkLogError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    for error in exc.errors():
        fields = [part for part in error.get("loc", ()) if isinstance(part, str) and part not in ("body", "query", "path")]
        if fields:
            return JSONResponse(status_code=422, content={"message": f"Invalid {fields[-1]} value"})
    return JSONResponse(status_code=422, content={"message": "Invalid request body"})

@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Store failure on {request.method} {request.url.path}")
    message = str(getattr(exc, "orig", None) or exc)
    return JSONResponse(status_code=500, content={"message": message})

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting Work Log API, CORS origins: {settings.cors_origins()}")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Work Log API...")

# Root route
@app.get("/")
def read_root():
    return {"message": "Work Log API"}

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/ping", response_class=PlainTextResponse)
def ping():
    return "pong"
