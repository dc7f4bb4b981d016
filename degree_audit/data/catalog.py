"""
Catalog service client.

Issues single class-search queries against the university content API and
returns the candidate course records. Choosing between candidates, and
falling back across terms, is the resolver's job.
"""

import asyncio
import logging
from typing import List

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    CATALOG_BACKOFF_FACTOR,
    CATALOG_CAMPUS,
    CATALOG_CLIENT_ID,
    CATALOG_MAX_RETRIES,
    CATALOG_RETRY_STATUSES,
    CATALOG_SEARCH_URL,
    CATALOG_TIMEOUT,
    CATALOG_USER_AGENT,
)
from ..exceptions import (
    CatalogContentTypeError,
    CatalogHTTPError,
    CatalogResponseError,
    CatalogTransportError,
)

logger = logging.getLogger(__name__)


def create_retry_session(max_retries: int = CATALOG_MAX_RETRIES,
                         backoff_factor: float = CATALOG_BACKOFF_FACTOR) -> requests.Session:
    """
    Build a requests session that backs off on 429 and 5xx answers.

    raise_on_status is off so that, once retries run out, the last response
    comes back and is reported as an HTTP error rather than a RetryError.
    """
    session = requests.Session()
    retries = Retry(
        total=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=CATALOG_RETRY_STATUSES,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({
        "User-Agent": CATALOG_USER_AGENT,
        "Accept": "application/json",
    })
    return session


def extract_courses(payload) -> List[dict]:
    """
    Pull candidate course records out of a search response body.

    The API nests results under data.courses or data.classes depending on the
    endpoint version, and class results wrap the course in a "course" key.
    Records that are not objects, or that carry no identifier, are dropped.
    Dropping happens before ranking, so the unfiltered pass in the resolver
    can settle on a later "first candidate" than the raw response order.
    """
    if not isinstance(payload, dict):
        raise CatalogResponseError(f"Expected a JSON object, got {type(payload).__name__}")

    data = payload.get("data")
    if not isinstance(data, dict):
        return []

    raw = []
    for key in ("courses", "classes"):
        if isinstance(data.get(key), list):
            raw = data[key]
            break

    courses = []
    for item in raw:
        if isinstance(item, dict) and item.get("course") is not None:
            item = item["course"]
        if not isinstance(item, dict):
            continue
        if item.get("courseId") is None and item.get("id") is None:
            continue
        courses.append(item)
    return courses


class CatalogClient:
    """
    Thin client for the class-search endpoint.

    One call = one HTTP request. Every failure is raised as a CatalogError
    subclass so the caller can tell them apart:

    - CatalogHTTPError: non-2xx status (after the adapter's own retries)
    - CatalogContentTypeError: the body is not JSON (login pages, outages)
    - CatalogTransportError: DNS, connection reset, timeout
    - CatalogResponseError: JSON that cannot be read as a search result

    The blocking request runs on a worker thread so that `search` can be
    awaited from the resolver.

    Usage:
        client = CatalogClient()
        courses = await client.search("CSE", "2231", 1258, campus_filter=True)
    """

    def __init__(self, session: requests.Session = None, base_url: str = CATALOG_SEARCH_URL,
                 timeout: float = CATALOG_TIMEOUT, campus: str = CATALOG_CAMPUS):
        self.session = session or create_retry_session()
        self.base_url = base_url
        self.timeout = timeout
        self.campus = campus

    def build_params(self, subject: str, number: str, term: int, campus_filter: bool) -> dict:
        params = {
            "q": f"{subject} {number}",
            "client": CATALOG_CLIENT_ID,
            "term": term,
        }
        if campus_filter:
            params["campus"] = self.campus
        return params

    async def search(self, subject: str, number: str, term: int, campus_filter: bool = True) -> List[dict]:
        """Run one search and return the candidate course records."""
        return await asyncio.to_thread(self.search_sync, subject, number, term, campus_filter)

    def search_sync(self, subject: str, number: str, term: int, campus_filter: bool = True) -> List[dict]:
        params = self.build_params(subject, number, term, campus_filter)

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise CatalogTransportError(f"Catalog request failed: {e}", term) from e

        if not response.ok:
            raise CatalogHTTPError(response.status_code, response.reason or "", response.text, term)

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise CatalogContentTypeError(content_type, response.text, term)

        try:
            payload = response.json()
        except (ValueError, RecursionError) as e:
            # RecursionError: pathologically nested arrays or objects
            raise CatalogResponseError(f"Malformed JSON from catalog: {e}", term) from e

        courses = extract_courses(payload)
        logger.debug("term=%s q=%s campus=%s results=%d", term, params["q"], campus_filter, len(courses))
        return courses

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
