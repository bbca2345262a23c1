import logging
from contextlib import asynccontextmanager
from typing import (
    Any,
    Dict,
)
from fastapi import (
    FastAPI,
    Request,
)
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from app.config.mongodb import connect_to_mongo, close_mongo_connection
from app.config.profiling import DEFAULT_PROFILING_QUESTION
from app.config.settings import (
    LOG_LEVEL,
    REQUIRE_MEMBERSHIP_TO_POST,
    get_cors_origins,
    get_session_secret,
)
from app.api.v1.posts import router as posts_router
from app.api.v1.profiles import router as profiles_router
from app.api.v1.sessions import router as sessions_router
from app.api.v1.threads import router as threads_router
from app.api.v1.users import router as users_router
from app.services.concepts import build_concepts
from app.utils.errors import ConceptError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    database = await connect_to_mongo()
    app.state.concepts = build_concepts(
        database,
        profiling_question=DEFAULT_PROFILING_QUESTION,
        require_membership_to_post=REQUIRE_MEMBERSHIP_TO_POST,
    )
    yield
    await close_mongo_connection()

app = FastAPI(
    description="Fam.ly social backend",
    lifespan=lifespan,
)

app.add_middleware(SessionMiddleware, secret_key=get_session_secret())
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConceptError)
async def concept_error_handler(request: Request, exc: ConceptError) -> JSONResponse:
    """Return concept failures as ``{"msg": ...}`` with the error's status code."""
    logger.info(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"msg": str(exc)})


# Include API routers
app.include_router(sessions_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(profiles_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(threads_router, prefix="/api")


@app.get("/")
async def root(request: Request):
    """Root endpoint returning basic API information."""
    return {"name": "Fam.ly", "version": "0.1.0", "status": "healthy"}


@app.get("/health")
async def health_check(request: Request) -> Dict[str, Any]:
    """Health check endpoint returning basic API information."""
    return {"status": "healthy"}
