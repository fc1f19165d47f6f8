"""
Structured extraction through OpenAI chat completions.
"""

import logging
from typing import Optional

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from job_scraper.ai.schema import ExtractedJob
from job_scraper.config.settings import Settings, settings as default_settings
from job_scraper.core.errors import (
    NetworkError,
    SchemaValidationError,
    ScrapeTimeoutError,
    UpstreamServiceError,
)

logger = logging.getLogger(__name__)

STRATEGY = "ai"

SYSTEM_PROMPT = (
    "You extract job posting information from web page content. "
    "Answer with a single JSON object matching the provided schema. "
    "Leave a field out when the content does not mention it; never invent values."
)

USER_PROMPT_TEMPLATE = """Extract job posting information from the following content.

Be thorough and accurate. Extract all available information.

Content:
{content}

Return a structured JSON object with all the job details."""


def build_prompt(content: str) -> str:
    return USER_PROMPT_TEMPLATE.format(content=content)


class LLMClient:
    """
    Thin wrapper over AsyncOpenAI returning a validated ExtractedJob.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.settings = settings or default_settings
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self.settings.OPENAI_API_KEY)

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.settings.OPENAI_API_KEY:
                raise UpstreamServiceError(
                    "OPENAI_API_KEY is not configured", strategy=STRATEGY
                )
            self._client = AsyncOpenAI(
                api_key=self.settings.OPENAI_API_KEY,
                base_url=self.settings.OPENAI_BASE_URL,
                timeout=self.settings.AI_TIMEOUT,
                max_retries=self.settings.MAX_RETRIES,
            )
        return self._client

    async def complete(self, prompt: str, model: Optional[str] = None) -> ExtractedJob:
        model = model or self.settings.AI_MODEL
        logger.debug(f"Requesting completion from {model} ({len(prompt)} chars)")

        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format=ExtractedJob.response_format(),
                temperature=self.settings.AI_TEMPERATURE,
                timeout=self.settings.AI_TIMEOUT,
            )
        except openai.APITimeoutError as e:
            raise ScrapeTimeoutError(
                f"{model} did not answer in {self.settings.AI_TIMEOUT}s", strategy=STRATEGY
            ) from e
        except openai.APIConnectionError as e:
            raise NetworkError(f"Could not reach the LLM endpoint: {e}", strategy=STRATEGY) from e
        except openai.APIStatusError as e:
            raise UpstreamServiceError(
                f"LLM request failed: {e.status_code} {e.message}",
                status_code=e.status_code,
                strategy=STRATEGY,
            ) from e
        except openai.OpenAIError as e:
            raise UpstreamServiceError(f"LLM request failed: {e}", strategy=STRATEGY) from e

        if not response.choices:
            raise UpstreamServiceError(f"{model} returned no choices", strategy=STRATEGY)

        message = response.choices[0].message
        if getattr(message, "refusal", None):
            raise SchemaValidationError(
                f"{model} refused the extraction: {message.refusal}", strategy=STRATEGY
            )
        if not message.content:
            raise SchemaValidationError(f"{model} returned an empty answer", strategy=STRATEGY)

        try:
            return ExtractedJob.model_validate_json(message.content)
        except ValidationError as e:
            logger.warning(f"LLM output does not match the job schema: {e}")
            raise SchemaValidationError(
                f"LLM output does not match the job schema ({e.error_count()} errors)",
                strategy=STRATEGY,
            ) from e

    async def aclose(self):
        if self._client is not None:
            await self._client.close()
            self._client = None
