"""Result window for "showing X to Y of Z" labels."""
from typing import Optional, Tuple

from app.config import settings


def compute_window(total: int, page_number: int, page_size: int) -> Tuple[int, int]:
    """
    Inclusive ordinals of the results shown on a page.

    Page 1 of 50 starts at 1, page 2 at 51. The end is clamped to ``total``,
    so a page past the last one yields ``start > end`` rather than an error.
    """
    start = 0 if total == 0 else 1 + (page_number - 1) * page_size
    end = min(page_number * page_size, total)
    return start, end


def format_window_label(total: int, page_number: int, page_size: Optional[int] = None) -> str:
    if page_size is None:
        page_size = settings.PAGE_SIZE
    start, end = compute_window(total, page_number, page_size)
    return settings.WINDOW_LABEL.format(start=start, end=end, total=total)
