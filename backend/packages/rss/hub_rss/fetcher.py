"""
Feed fetching.

Downloads feed documents over HTTP.
"""

import httpx

from .errors import FeedHTTPStatusError, FeedTransportError

DEFAULT_USER_AGENT = "Student-Hub/1.0"


async def fetch_feed(
    url: str,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = 10.0,
    cache_max_age: int = 300,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    """
    Fetch a feed document.

    The request carries an identifying User-Agent and a Cache-Control hint
    allowing intermediaries to serve a copy up to ``cache_max_age`` seconds
    old. There are no retries.

    Args:
        url: Feed URL.
        user_agent: User-Agent header value.
        timeout: Request timeout in seconds.
        cache_max_age: Acceptable age of a cached upstream response, in seconds.
        transport: Optional transport override (used by tests).

    Returns:
        Raw response body.

    Raises:
        FeedHTTPStatusError: If the final response status is not 2xx.
        FeedTransportError: If the URL cannot be requested or the request fails
            before a response arrives.
    """
    headers = {
        "User-Agent": user_agent,
        "Cache-Control": f"max-age={cache_max_age}",
    }

    async with httpx.AsyncClient(
        timeout=timeout, follow_redirects=True, headers=headers, transport=transport
    ) as client:
        try:
            response = await client.get(url)
        except httpx.TimeoutException as e:
            raise FeedTransportError(url, f"timed out after {timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FeedTransportError(url, str(e) or type(e).__name__) from e

    if not response.is_success:
        raise FeedHTTPStatusError(url, response.status_code)

    return response.content
