"""Term extraction, highlighting and pagination endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Query, status, Request
from typing import Optional
import logging
import time
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.schemas import (
    TermsRequest,
    TermsResponse,
    HighlightRequest,
    HighlightResponse,
    WindowResponse
)
from app.utils.security import require_access_key
from app.utils.result_tree import ResultTree
from app.services.term_extraction import extract_terms
from app.services.highlighting import highlight_terms, highlight_by_tag
from app.services.pagination import compute_window, format_window_label
from app.services.analytics import log_highlight
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.post(
    "/terms",
    response_model=TermsResponse,
    summary="Extract display terms"
)
@limiter.limit(settings.RATE_LIMIT)
def terms(
    request: Request,
    body: TermsRequest,
    _: str = Depends(require_access_key)
):
    """
    Extract the words and phrases a query is looking for.

    Syntax markers (`AND`, `~N`, `in (...)`, `+[...]`, `-word`, `-"phrase"`)
    are stripped. Quoted phrases come first, then single words.
    """
    start_time = time.time()
    extracted = extract_terms(body.query)

    log_highlight(
        query=body.query,
        mode="extract",
        num_terms=len(extracted),
        num_matches=0,
        response_time_ms=(time.time() - start_time) * 1000,
        endpoint="terms"
    )
    logger.info(f"Extracted {len(extracted)} terms from '{body.query[:50]}'")
    return TermsResponse(query=body.query, terms=extracted)


@router.post(
    "/highlight",
    response_model=HighlightResponse,
    summary="Highlight result markup"
)
@limiter.limit(settings.RATE_LIMIT)
def highlight(
    request: Request,
    body: HighlightRequest,
    _: str = Depends(require_access_key)
):
    """
    Highlight an HTML fragment.

    **Modes:**
    - `tag_ids` given: mark every element whose `strong` attribute lists one of them
    - otherwise: wrap every whole-word occurrence of `terms` (or the terms
      extracted from `query`) in a highlight span
    """
    try:
        start_time = time.time()
        tree = ResultTree.from_html(body.html)

        if body.terms is not None:
            display_terms = [t.strip() for t in body.terms if t and t.strip()]
        else:
            display_terms = extract_terms(body.query)

        if body.tag_ids:
            matches = highlight_by_tag(tree, body.tag_ids)
            mode = "tags"
        elif display_terms:
            matches = highlight_terms(tree, display_terms)
            mode = "terms"
        else:
            matches = 0
            mode = "none"

        elapsed_ms = (time.time() - start_time) * 1000
        log_highlight(
            query=body.query or "",
            mode=mode,
            num_terms=len(display_terms),
            num_matches=matches,
            response_time_ms=elapsed_ms
        )

        return HighlightResponse(
            html=tree.to_html(),
            terms=display_terms,
            mode=mode,
            matches=matches
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error highlighting results: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to highlight results: {str(e)}"
        )


@router.get(
    "/window",
    response_model=WindowResponse,
    summary="Compute the result window"
)
def window(
    total: int = Query(..., ge=0),
    page_number: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1)
):
    """
    Inclusive start/end ordinals for a "showing X to Y of Z" label.
    """
    if page_size is None:
        page_size = settings.PAGE_SIZE
    start, end = compute_window(total, page_number, page_size)
    return WindowResponse(
        start=start,
        end=end,
        total=total,
        label=format_window_label(total, page_number, page_size)
    )
