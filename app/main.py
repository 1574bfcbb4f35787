"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from app.routers import highlight, search
from app.models.schemas import HealthResponse
from app.services.analytics import get_analytics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address, default_limits=["1000/hour"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting Search Highlight API...")
    logger.info("API documentation available at /docs")
    yield
    # Shutdown
    logger.info("Shutting down Search Highlight API...")


app = FastAPI(
    title="Search Highlight API",
    description="""
Highlight search results using the words a query is looking for.

### Features
- **Term extraction**: Recovers words and phrases from search syntax
  (`AND`, `"phrases"`, `~N`, `in (...)`, `+[...]`, `-word`, `-"phrase"`)
- **Term highlighting**: Whole-word, case-insensitive marking inside result markup
- **Tag highlighting**: Marks elements tagged with Strong's numbers or other codes
- **Result window**: "Showing X to Y of Z" labels for paged results

### Quick Start
1. **Extract terms**: `POST /terms`
2. **Highlight markup**: `POST /highlight`
3. **Render a page**: `POST /search/display`
    """,
    version="1.0.0",
    license_info={
        "name": "MIT",
    },
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Highlighting",
            "description": "Extract terms, highlight markup and compute result windows",
        },
        {
            "name": "Search",
            "description": "Render decorated pages of search results",
        },
        {
            "name": "Analytics",
            "description": "View usage statistics",
        },
        {
            "name": "Health",
            "description": "Health check and system status",
        },
    ]
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(
    highlight.router,
    tags=["Highlighting"]
)

app.include_router(
    search.router,
    prefix="/search",
    tags=["Search"]
)


@app.get(
    "/healthz",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"]
)
def health_check():
    """
    Health check endpoint.
    """
    return HealthResponse(status="healthy")


@app.get("/", tags=["Root"])
def api_info():
    """
    API information endpoint.
    """
    return {
        "name": "Search Highlight API",
        "version": "1.0.0",
        "description": "Search term extraction and result highlighting",
        "docs": "/docs",
        "health": "/healthz",
        "analytics": "/analytics"
    }


@app.get("/analytics", tags=["Analytics"])
def analytics():
    """
    Get analytics and usage metrics.

    Provides insights into:
    - Request volume and highlight counts
    - Response times
    - Popular queries
    - Highlight mode distribution
    """
    return get_analytics()
