import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from raeesa_tours.core.config import settings
from raeesa_tours.core.logging_config import configure_logging
from raeesa_tours.api.api import api_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

# CORS: use CORS_ORIGINS from env in production; default to localhost for dev
_default_origins = [
    "http://127.0.0.1:5173", "http://localhost:5173",
    "http://127.0.0.1:3000", "http://localhost:3000",
]
_origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()] if settings.CORS_ORIGINS else _default_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error body is {"success": false, "message": ...}
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    if request.method == "POST" and request.url.path == "/api/registrations":
        message = "Error creating registration"
    else:
        message = "Invalid request data"
    errors = exc.errors()
    detail = errors[0].get("msg", "") if errors else ""
    return JSONResponse(status_code=400, content={"success": False, "message": message, "error": detail})


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    error = str(exc) if settings.ENV in ("local", "development") else None
    return JSONResponse(status_code=500, content={"success": False, "message": "Internal Server Error", "error": error})


app.include_router(api_router)


@app.get("/")
def root():
    return {"message": "Welcome to Raeesa Tours API"}


@app.get("/health")
def health():
    return {"status": "ok"}
