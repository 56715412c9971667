from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .db import init_db
from .errors import CreativaHubError
from .logging_config import setup_logging
from .models import utcnow
from .seed import ensure_default_admin, ensure_demo_data
from .routers import auth, users, courses, enrollments
from .routers import learning_materials, assignments, portfolio, dashboard


logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.is_production:
        ensure_default_admin()
    elif settings.seed_demo_data:
        ensure_demo_data()
    logger.info("%s started (env=%s)", settings.app_name, settings.environment)
    yield


app = FastAPI(title="CreativaHub API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CreativaHubError)
async def creativahub_error_handler(request: Request, exc: CreativaHubError):
    logger.warning("%s %s rejected: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.code},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(auth.router)
app.include_router(users.router)
app.include_router(courses.router)
app.include_router(enrollments.router)
app.include_router(learning_materials.router)
app.include_router(assignments.router)
app.include_router(portfolio.router)
app.include_router(dashboard.router)


@app.get("/")
def root():
    return {"status": "ok", "service": "CreativaHub API"}


@app.get("/health")
def healthcheck():
    return {"status": "ok", "timestamp": utcnow().isoformat()}
