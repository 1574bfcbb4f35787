"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import List, Optional


class TermsRequest(BaseModel):
    """Request to extract display terms from a query."""
    query: str = Field(
        "",
        max_length=2000,
        description="Query in search syntax, optionally prefixed with a search mode",
        examples=['t=faith AND "the ark" -hate', "t=love~3 in (Gen, Exo)"]
    )


class TermsResponse(BaseModel):
    """Extracted phrases (first) and words."""
    query: str
    terms: List[str]


class HighlightRequest(BaseModel):
    """Request to highlight an HTML fragment."""
    html: str = Field(..., description="Rendered result markup to decorate")
    query: Optional[str] = Field(
        None,
        max_length=2000,
        description="Search syntax query whose terms should be highlighted"
    )
    terms: Optional[List[str]] = Field(
        None,
        description="Explicit terms, used instead of extracting them from the query"
    )
    tag_ids: Optional[List[str]] = Field(
        None,
        description="Tag identifiers (e.g. Strong's numbers). Takes precedence over terms",
        examples=[["G0026", "G5368"]]
    )


class HighlightResponse(BaseModel):
    """Highlighted markup."""
    html: str
    terms: List[str]
    mode: str = Field(description="Highlight mode used (terms/tags/none)")
    matches: int = Field(description="Number of highlighted text ranges or elements")


class WindowResponse(BaseModel):
    """Inclusive range of result ordinals shown on a page."""
    start: int
    end: int
    total: int
    label: str


class SearchResult(BaseModel):
    """One rendered search result."""
    key: str = Field(..., description="Result reference, e.g. a verse key")
    preview: str = Field("", description="Rendered HTML for the result")


class SearchQueryResults(BaseModel):
    """Results payload produced by the search backend."""
    query: str = ""
    total: int = Field(0, ge=0)
    results: List[SearchResult] = Field(default_factory=list)
    strong_highlights: Optional[List[str]] = Field(
        None,
        description="Tag identifiers to highlight instead of query terms"
    )
    max_reached: bool = Field(False, description="Whether the backend gave up on too many results")


class SearchDisplayRequest(BaseModel):
    """Request to render one page of search results."""
    results: SearchQueryResults
    page_number: int = Field(1, ge=1)
    paged: bool = True


class SearchDisplayResponse(BaseModel):
    """Decorated page of results with its window label."""
    html: str
    label: str
    start: int
    end: int
    total: int
    terms: List[str]
    mode: str
    matches: int = 0


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
