"""
Font Provider - Remote font resolution service

PURPOSE: Define the contract between the request workflow and a font provider, and
         implement it against the Google Fonts CSS2 API.
CONTEXT: The workflow treats the provider as a black box: it hands over a query string
         and waits for exactly one of two callbacks (resolved font or integer reason).

    query ──► parse_query ──► CSS2 stylesheet ──► src: url(...) ──► font bytes
                   │                 │                                  │
            MALFORMED_QUERY   FONT_NOT_FOUND /                   FONT_LOAD_ERROR
                              FONT_UNAVAILABLE
"""
from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional, Protocol

import requests

from config import (
    FONT_PROVIDER_CSS_URL,
    FONT_PROVIDER_TIMEOUT_SECONDS,
    FONT_PROVIDER_USER_AGENT,
)
from core.query_builder import ParsedQuery, parse_query
from utils.error_handler import MalformedQueryError
from utils.logger import get_logger

logger = get_logger()


class FailureReason(IntEnum):
    """Reason codes reported through the failure callback"""
    PROVIDER_NOT_FOUND = -1
    WRONG_CERTIFICATES = -2
    FONT_LOAD_ERROR = -3
    SECURITY_VIOLATION = -4
    FONT_NOT_FOUND = 1
    FONT_UNAVAILABLE = 2
    MALFORMED_QUERY = 3


@dataclass(frozen=True)
class ResolvedFont:
    """
    Handle for a resolved font.

    The request workflow never looks inside; the UI loads `data` into the
    application font database.
    """

    family_name: str
    query: str
    data: bytes = field(repr=False)
    source_url: Optional[str] = None

    @property
    def size_bytes(self) -> int:
        return len(self.data)


RetrievedCallback = Callable[[ResolvedFont], None]
FailedCallback = Callable[[int], None]


class FontProvider(Protocol):
    """
    Anything that can resolve a query into a font.

    request_font() runs on the caller's thread and must call exactly one of
    on_retrieved / on_failed before returning.
    """

    def request_font(self, query: str, on_retrieved: RetrievedCallback, on_failed: FailedCallback) -> None:
        ...


_CSS_URL_PATTERN = re.compile(r"src:\s*url\((?P<url>[^)]+)\)")


class GoogleFontsProvider:
    """
    Font provider backed by the Google Fonts CSS2 API.

    The stylesheet for the requested axis values is fetched first; the first
    `src: url(...)` in it is the font file to download.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        css_api_url: str = FONT_PROVIDER_CSS_URL,
        timeout: float = FONT_PROVIDER_TIMEOUT_SECONDS,
    ):
        self.session = session or self._create_session()
        self.css_api_url = css_api_url
        self.timeout = timeout

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({"User-Agent": FONT_PROVIDER_USER_AGENT})
        return session

    def request_font(self, query: str, on_retrieved: RetrievedCallback, on_failed: FailedCallback) -> None:
        try:
            parsed = parse_query(query)
        except MalformedQueryError as e:
            logger.warning(f"Rejecting malformed query: {e}")
            on_failed(FailureReason.MALFORMED_QUERY)
            return

        try:
            css, url = self._fetch_stylesheet(parsed)
        except _ProviderFailure as failure:
            on_failed(failure.reason)
            return

        font_url = self._extract_font_url(css)
        if font_url is None:
            logger.warning(f"No font source in stylesheet from {url}")
            on_failed(FailureReason.FONT_LOAD_ERROR)
            return

        try:
            data = self._download(font_url)
        except requests.RequestException as e:
            logger.warning(f"Font download failed for {font_url}: {e}")
            on_failed(FailureReason.FONT_LOAD_ERROR)
            return

        if not data:
            logger.warning(f"Empty font file from {font_url}")
            on_failed(FailureReason.FONT_LOAD_ERROR)
            return

        on_retrieved(ResolvedFont(
            family_name=parsed.family_name,
            query=query,
            data=data,
            source_url=font_url,
        ))

    def _fetch_stylesheet(self, parsed: ParsedQuery):
        """
        Fetch the CSS for the exact axis values, falling back to the nearest
        static instance when best effort is allowed.

        Returns:
            (css_text, url)
        """
        try:
            return self._get_css(exact_family_spec(parsed))
        except _ProviderFailure as failure:
            if not (parsed.best_effort and failure.reason == FailureReason.FONT_NOT_FOUND):
                raise

        fallback_spec = nearest_family_spec(parsed)
        logger.info(f"Exact instance unavailable, trying best effort: {fallback_spec}")
        return self._get_css(fallback_spec)

    def _get_css(self, family_spec: str):
        try:
            response = self.session.get(
                self.css_api_url,
                params={"family": family_spec},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Font provider unreachable: {e}")
            raise _ProviderFailure(FailureReason.FONT_UNAVAILABLE) from e

        if response.status_code in (400, 404):
            logger.info(f"Font provider has no match for '{family_spec}' (HTTP {response.status_code})")
            raise _ProviderFailure(FailureReason.FONT_NOT_FOUND)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(f"Font provider error for '{family_spec}': {e}")
            raise _ProviderFailure(FailureReason.FONT_UNAVAILABLE) from e

        return response.text, response.url

    def _extract_font_url(self, css: str) -> Optional[str]:
        match = _CSS_URL_PATTERN.search(css or "")
        if match is None:
            return None
        return match.group("url").strip().strip("'\"")

    def _download(self, font_url: str) -> bytes:
        start_time = time.time()
        response = self.session.get(font_url, timeout=self.timeout)
        response.raise_for_status()
        logger.log_performance(f"font download {font_url}", time.time() - start_time)
        return response.content


class _ProviderFailure(Exception):
    """Internal: carries a reason code out of the HTTP helpers"""

    def __init__(self, reason: FailureReason):
        super().__init__(f"Provider failure {reason.name}")
        self.reason = reason


def _ital_axis(italic: Optional[float]) -> int:
    return 1 if italic is not None and italic >= 0.5 else 0


def exact_family_spec(parsed: ParsedQuery) -> str:
    """
    CSS2 family parameter for the exact axis values of a query.

    Example: "Roboto:ital,wdth,wght@0,100,400"
    """
    axes = ["ital"]
    values = [str(_ital_axis(parsed.italic))]
    if parsed.width is not None:
        axes.append("wdth")
        values.append(f"{parsed.width:g}")
    if parsed.weight is not None:
        axes.append("wght")
        values.append(str(parsed.weight))
    return f"{parsed.family_name}:{','.join(axes)}@{','.join(values)}"


def nearest_family_spec(parsed: ParsedQuery) -> str:
    """
    CSS2 family parameter for the closest static instance: weight rounded to the
    nearest hundred (100-900), width dropped.
    """
    weight = parsed.weight if parsed.weight is not None else 400
    weight = min(900, max(100, int(round(weight / 100.0)) * 100))
    return f"{parsed.family_name}:ital,wght@{_ital_axis(parsed.italic)},{weight}"
