"""
AiUniversalExtractor - works on any job posting URL.

Jina Reader turns the page into Markdown, the LLM turns Markdown into a record.
"""

import logging
import time
from typing import Optional

from job_scraper.adapters.base import JobExtractor
from job_scraper.ai.jina import JinaReader
from job_scraper.ai.llm import STRATEGY, LLMClient, build_prompt
from job_scraper.config.settings import Settings, settings as default_settings
from job_scraper.core.errors import ScraperError, UpstreamServiceError
from job_scraper.core.models import JobRecord
from job_scraper.core.urls import normalize_url

logger = logging.getLogger(__name__)


class AiUniversalExtractor(JobExtractor):
    name = STRATEGY

    def __init__(
        self,
        settings: Optional[Settings] = None,
        reader: Optional[JinaReader] = None,
        llm: Optional[LLMClient] = None,
    ):
        self.settings = settings or default_settings
        self.reader = reader or JinaReader(self.settings)
        self.llm = llm or LLMClient(self.settings)

    def can_handle(self, url: str) -> bool:
        return True

    @property
    def available(self) -> bool:
        """Whether a completion client can be built (an API key or an injected client)."""
        return self.llm.configured

    async def extract(self, url: str, model: Optional[str] = None) -> JobRecord:
        url = normalize_url(url)
        model = model or self.settings.AI_MODEL
        started = time.monotonic()
        logger.info(f"[AI] Extracting {url} with {model}")

        try:
            markdown = await self.reader.url_to_markdown(url)
            if len(markdown or "") < self.settings.AI_MIN_CONTENT_CHARS:
                raise UpstreamServiceError(
                    f"Jina Reader returned empty or too short content "
                    f"({len(markdown or '')} chars)",
                    strategy=STRATEGY,
                    url=url,
                )

            content = markdown[: self.settings.AI_MAX_CONTENT_CHARS]
            extracted = await self.llm.complete(build_prompt(content), model)
        except ScraperError as e:
            e.url = e.url or url
            logger.error(f"[AI] Failed to extract {url}: {e.message}")
            raise

        record = extracted.to_record(url, "other")
        logger.info(
            f"[AI] Extracted '{record.title}' at {record.company_name} "
            f"in {time.monotonic() - started:.2f}s ({model})"
        )
        return record

    async def release(self) -> None:
        pass

    async def aclose(self):
        await self.reader.aclose()
        await self.llm.aclose()
