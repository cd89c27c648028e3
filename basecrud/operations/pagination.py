"""Cursor pagination over list responses.

The service decides how many pages exist: the loop continues only while the
last page reports ``has_more`` *and* hands out a ``page_token``. A page that
claims more results without a cursor ends the loop.
"""

from typing import Any, Callable, Iterable, Iterator, Optional

Page = dict[str, Any]
FetchPage = Callable[[Optional[str]], Page]


def _page_data(page: Page) -> dict[str, Any]:
    data = page.get("data") if isinstance(page, dict) else None
    return data if isinstance(data, dict) else {}


def next_page_token(page: Page) -> Optional[str]:
    """Return the cursor for the page after ``page``, or None when done."""
    data = _page_data(page)
    token = data.get("page_token")
    if not data.get("has_more") or not token:
        return None
    return token


def iter_pages(fetch_page: FetchPage) -> Iterator[Page]:
    """Yield the first page and every continuation page, in arrival order.

    Args:
        fetch_page: Called with None for the first page and with the
            latest cursor for each following page.
    """
    page = fetch_page(None)
    yield page

    token = next_page_token(page)
    while token:
        page = fetch_page(token)
        yield page
        token = next_page_token(page)


def collect_items(pages: Iterable[Page]) -> list[Any]:
    """Concatenate ``data.items`` of all pages, preserving order."""
    items: list[Any] = []
    for page in pages:
        page_items = _page_data(page).get("items")
        if isinstance(page_items, list):
            items.extend(page_items)
    return items


def fetch_all(fetch_page: FetchPage) -> list[Any]:
    """Fetch every page and return all records in order."""
    return collect_items(iter_pages(fetch_page))
