"""Pydantic models for request/response schemas."""
from app.models.schemas import (
    TermsRequest,
    TermsResponse,
    HighlightRequest,
    HighlightResponse,
    WindowResponse,
    SearchResult,
    SearchQueryResults,
    SearchDisplayRequest,
    SearchDisplayResponse,
    HealthResponse
)

__all__ = [
    "TermsRequest",
    "TermsResponse",
    "HighlightRequest",
    "HighlightResponse",
    "WindowResponse",
    "SearchResult",
    "SearchQueryResults",
    "SearchDisplayRequest",
    "SearchDisplayResponse",
    "HealthResponse"
]
