"""
Cache prevention headers.

Applied to validation failure responses right before they are sent:
- Cache-Control
- Pragma
- Expires
- ETag (removed)

No business logic. Pure cross-cutting concern.
"""

from starlette.datastructures import MutableHeaders

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache,no-store",
    "Pragma": "no-cache",
    "Expires": "-1",
}


def clear_cache_headers(headers: MutableHeaders) -> None:
    """Overwrite caching headers so the response is never cached.

    Args:
        headers: Mutable view over the outgoing response headers.
    """
    for header_name, header_value in NO_CACHE_HEADERS.items():
        headers[header_name] = header_value
    del headers["ETag"]
