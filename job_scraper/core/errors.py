"""
Error taxonomy for job extraction.

Every strategy raises a subclass of ScraperError so the orchestrator can
fall back (auto mode) or surface a single classified error to the caller.
"""

from typing import Optional


class ScraperError(Exception):
    """
    Base class for all extraction failures.

    Carries the strategy that failed ("ai" or a portal domain) and the URL
    that was being extracted, so the caller can tell which attempt failed last.
    """

    def __init__(
        self,
        message: str,
        *,
        strategy: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.strategy = strategy
        self.url = url

    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "strategy": self.strategy,
        }


class NetworkError(ScraperError):
    """Transport failure reaching the renderer, Jina Reader or the LLM endpoint."""


class ScrapeTimeoutError(ScraperError):
    """Navigation, document conversion or completion exceeded its bound."""


class RenderError(ScraperError):
    """The page rendered but could not be queried (crashed page, closed target)."""


class SchemaValidationError(ScraperError):
    """LLM output does not match the job schema."""


class UnsupportedDomainError(ScraperError):
    """Portal-specific extraction requested for a domain without a registered portal."""


class UpstreamServiceError(ScraperError):
    """Jina Reader or the LLM service answered, but not with a usable result."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        strategy: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message, strategy=strategy, url=url)
        self.status_code = status_code
