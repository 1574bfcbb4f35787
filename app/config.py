"""Application configuration."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Access control (an empty key fails at startup)
    ACCESS_KEY: str = Field("dev-key", min_length=1)
    ACCESS_KEY_HEADER: str = "X-Access-Key"
    RATE_LIMIT: str = "300/minute"

    # Pagination
    PAGE_SIZE: int = 50
    UNPAGED_PAGE_SIZE: int = 1000000  # "paged=false" shows everything on one page

    # Highlighting
    HIGHLIGHT_CLASS: str = "secondaryBackground"
    TAG_ATTRIBUTE: str = "strong"  # Whitespace-separated list of tag ids, e.g. strong="G0026 G3588"
    HTML_PARSER: str = "html.parser"

    # Display messages
    NO_RESULTS_MESSAGE: str = "No search results were found."
    TOO_MANY_RESULTS_MESSAGE: str = (
        "Your search returned too many results. Please refine your search."
    )
    WINDOW_LABEL: str = "Showing {start} to {end} of {total} results"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True
    )


settings = Settings()
