"""Search results display endpoint."""
from fastapi import APIRouter, Depends, HTTPException, status, Request
import logging
import time
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.schemas import SearchDisplayRequest, SearchDisplayResponse
from app.utils.security import require_access_key
from app.services.search_display import display_search_results
from app.services.analytics import log_highlight
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.post(
    "/display",
    response_model=SearchDisplayResponse,
    summary="Render a page of search results"
)
@limiter.limit(settings.RATE_LIMIT)
def display(
    request: Request,
    body: SearchDisplayRequest,
    _: str = Depends(require_access_key)
):
    """
    Decorate one page of search results.

    The system will:
    1. Compute the "showing X to Y of Z" label for the page
    2. Report an empty or oversized result set with a message
    3. Highlight by `strong_highlights` if present, else by the query terms
    4. Flag passages that need a unicode or Hebrew font
    """
    try:
        start_time = time.time()
        response = display_search_results(
            results=body.results,
            page_number=body.page_number,
            paged=body.paged
        )

        elapsed_ms = (time.time() - start_time) * 1000
        log_highlight(
            query=body.results.query,
            mode=response.mode,
            num_terms=len(response.terms),
            num_matches=response.matches,
            response_time_ms=elapsed_ms,
            endpoint="display"
        )
        logger.info(f"Displayed page {body.page_number}: {response.label} ({response.mode})")

        return response

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error displaying search results: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to display search results: {str(e)}"
        )
