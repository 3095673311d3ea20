from dotenv import load_dotenv
load_dotenv()

import time
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from api.v1.admin import router as v1_admin_router
from api.v1.public import router as public_router
from core.exceptions import PageforgeError
from services.page_renderer import ERROR_HTML

# Setup logging
from core.logging_config import setup_logging, get_logger, LogContext
setup_logging()
logger = get_logger(__name__)

# Setup Sentry error tracking
from core.settings import settings
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

PUBLIC_PAGE_PREFIX = "/p"

if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            StarletteIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
        traces_sample_rate=0.1,
        attach_stacktrace=True,
        send_default_pii=False,
        before_send=lambda event, hint: filter_sentry_event(event, hint),
        auto_enabling_integrations=False,
    )
    logger.info_ctx("Sentry error tracking enabled", environment=settings.SENTRY_ENVIRONMENT)


def filter_sentry_event(event, hint):
    """Drop health checks, tag events with the request id"""
    if "transaction" in event and "/health" in event["transaction"]:
        return None

    if "request" in event:
        request = event["request"]
        if "headers" in request:
            request_id = request["headers"].get("x-request-id")
            if request_id:
                event.setdefault("tags", {})["request_id"] = request_id

    return event


def is_public_page_request(request: Request) -> bool:
    return request.url.path.startswith(f"{PUBLIC_PAGE_PREFIX}/")


def internal_error_response(request: Request, request_id: str):
    # Visitors of public pages always get an HTML document
    if is_public_page_request(request):
        return HTMLResponse(ERROR_HTML, status_code=500)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "request_id": request_id
        }
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info_ctx(
        "Pageforge API starting up",
        render_cache_backend=settings.RENDER_CACHE_BACKEND,
        render_cache_ttl=settings.RENDER_CACHE_TTL_SECONDS,
    )
    yield
    logger.info("Pageforge API shutting down")


app = FastAPI(title="Pageforge API", version="1.0.0", lifespan=lifespan)


# Logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    request_id = getattr(request.state, "request_id", "unknown")

    if request.url.path == "/health":
        return await call_next(request)

    with LogContext(request_id=request_id, path=request.url.path, method=request.method):
        logger.info(f"Request started: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            duration = round(time.time() - start_time, 3)

            with LogContext(
                request_id=request_id,
                path=request.url.path,
                method=request.method,
                status_code=response.status_code,
                duration=duration
            ):
                if response.status_code >= 500:
                    logger.error(f"Request failed: {request.method} {request.url.path} - {response.status_code} in {duration}s")
                elif response.status_code >= 400:
                    logger.warning(f"Request client error: {request.method} {request.url.path} - {response.status_code} in {duration}s")
                else:
                    logger.info(f"Request completed: {request.method} {request.url.path} - {response.status_code} in {duration}s")

            return response

        except Exception as e:
            duration = round(time.time() - start_time, 3)
            with LogContext(
                request_id=request_id,
                path=request.url.path,
                method=request.method,
                duration=duration,
                error_type=type(e).__name__,
                error_message=str(e)
            ):
                logger.exception(f"Request exception: {request.method} {request.url.path}")

            return internal_error_response(request, request_id)


# Request ID middleware, registered after the logging middleware so it runs first
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PageforgeError)
async def pageforge_error_handler(request: Request, exc: PageforgeError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "code": exc.kind.value,
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    request_id = getattr(request.state, "request_id", "unknown")

    with LogContext(
        request_id=request_id,
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        error_message=str(exc)
    ):
        logger.exception("Unhandled exception")

    return internal_error_response(request, request_id)


app.include_router(v1_admin_router, prefix="/api/v1")
app.include_router(public_router, prefix=PUBLIC_PAGE_PREFIX)


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "pageforge-api"}
