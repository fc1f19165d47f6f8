"""
Jina Reader client: converts any URL into LLM-ready Markdown.

See https://jina.ai/reader
"""

import logging
from typing import Dict, Optional

import httpx

from job_scraper.config.settings import Settings, settings as default_settings
from job_scraper.core.errors import NetworkError, ScrapeTimeoutError, UpstreamServiceError
from job_scraper.core.rate_limit import with_retry

logger = logging.getLogger(__name__)

STRATEGY = "ai"


class JinaReader:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or default_settings
        self._client = client

    def build_headers(
        self,
        timeout: Optional[int] = None,
        include_images: Optional[bool] = None,
        include_links: Optional[bool] = None,
    ) -> Dict[str, str]:
        headers = {
            "Accept": "text/plain",
            "X-Return-Format": "markdown",
        }
        if self.settings.JINA_API_KEY:
            headers["Authorization"] = f"Bearer {self.settings.JINA_API_KEY}"
        if timeout:
            headers["X-Timeout"] = str(timeout)
        if include_images is not None:
            headers["X-With-Images-Summary"] = str(include_images).lower()
        if include_links is not None:
            headers["X-With-Links-Summary"] = str(include_links).lower()
        return headers

    async def url_to_markdown(
        self,
        url: str,
        *,
        timeout: Optional[int] = None,
        include_images: Optional[bool] = None,
        include_links: Optional[bool] = None,
    ) -> str:
        """
        Fetch the Markdown rendition of *url*.

        Transport failures are retried with backoff before being classified:
        timeouts raise ScrapeTimeoutError, other transport failures NetworkError,
        and a non-2xx answer UpstreamServiceError.
        """
        reader_url = f"{self.settings.JINA_BASE_URL.rstrip('/')}/{url}"
        headers = self.build_headers(timeout, include_images, include_links)
        logger.info(f"Jina Reader: converting {url}")

        fetch = with_retry(
            retry_on=(httpx.TransportError,),
            max_retries=self.settings.MAX_RETRIES,
            base_delay=self.settings.RETRY_BASE_DELAY,
            max_delay=self.settings.RETRY_MAX_DELAY,
        )(self._fetch)

        try:
            response = await fetch(reader_url, headers)
        except httpx.TimeoutException as e:
            raise ScrapeTimeoutError(
                f"Jina Reader timed out for {url}", strategy=STRATEGY, url=url
            ) from e
        except httpx.TransportError as e:
            raise NetworkError(
                f"Jina Reader unreachable for {url}: {e}", strategy=STRATEGY, url=url
            ) from e

        if not response.is_success:
            logger.error(
                f"Jina Reader failed for {url}: {response.status_code} {response.reason_phrase}"
            )
            raise UpstreamServiceError(
                f"Jina Reader failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                strategy=STRATEGY,
                url=url,
            )

        markdown = response.text
        logger.debug(f"Jina Reader: received {len(markdown)} chars for {url}")
        return markdown

    async def _fetch(self, reader_url: str, headers: Dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(
                reader_url, headers=headers, timeout=self.settings.JINA_TIMEOUT
            )
        async with httpx.AsyncClient(
            timeout=self.settings.JINA_TIMEOUT, follow_redirects=True
        ) as client:
            return await client.get(reader_url, headers=headers)

    async def aclose(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None
