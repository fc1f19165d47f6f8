"""
Offline stand-ins for Playwright, Jina Reader and the LLM so the suite runs
without a browser or network access.
"""

import json
from types import SimpleNamespace
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from job_scraper.config.settings import Settings
from job_scraper.core.models import JobRecord


@pytest.fixture
def test_settings():
    return Settings(
        MAX_RETRIES=0,
        RETRY_BASE_DELAY=0.0,
        RETRY_MAX_DELAY=0.0,
        OPENAI_API_KEY=None,
        OPENAI_BASE_URL=None,
        JINA_API_KEY=None,
        JINA_BASE_URL="https://r.jina.ai",
        WAIT_FOR_NETWORK_IDLE=False,
        COOKIES=[],
    )


# --- Playwright fakes ---


class FakeLocator:
    def __init__(self, visible: bool = False):
        self.visible = visible
        self.clicked = False

    @property
    def first(self):
        return self

    async def is_visible(self, timeout=None):
        return self.visible

    async def click(self, timeout=None):
        self.clicked = True


class FakePage:
    """Just enough of playwright's Page for PortalExtractor."""

    def __init__(
        self,
        html: str = "",
        goto_error: Optional[Exception] = None,
        ready_error: Optional[Exception] = None,
        consent_selector: Optional[str] = None,
    ):
        self.html = html
        self.goto_error = goto_error
        self.ready_error = ready_error
        self.consent_selector = consent_selector
        self.visited: List[dict] = []
        self.waited_for: List[str] = []
        self.locators = {}

    async def goto(self, url, wait_until=None, timeout=None):
        self.visited.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.goto_error:
            raise self.goto_error

    async def wait_for_load_state(self, state="load"):
        pass

    async def wait_for_selector(self, selector, timeout=None):
        self.waited_for.append(selector)
        if self.ready_error:
            raise self.ready_error

    def locator(self, selector):
        if selector not in self.locators:
            self.locators[selector] = FakeLocator(visible=selector == self.consent_selector)
        return self.locators[selector]

    async def wait_for_timeout(self, timeout):
        pass

    async def content(self):
        return self.html


class FakeSession:
    def __init__(self, page: FakePage):
        self.page = page
        self.close_calls = 0

    async def new_page(self):
        return self.page

    async def close(self):
        self.close_calls += 1


@pytest.fixture
def make_session_factory():
    """
    Build a session factory serving *page*; created sessions are recorded on
    the factory's `sessions` list.
    """

    def build(page: FakePage):
        sessions: List[FakeSession] = []

        def factory(settings, domain):
            session = FakeSession(page)
            sessions.append(session)
            return session

        factory.sessions = sessions
        return factory

    return build


# --- LLM fakes ---


def completion(content: Optional[str], refusal: Optional[str] = None):
    message = SimpleNamespace(content=content, refusal=refusal)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def make_openai_client():
    """MagicMock shaped like AsyncOpenAI whose completion returns *payload*."""

    def build(payload=None, content: Optional[str] = None, side_effect=None):
        if content is None and payload is not None:
            content = json.dumps(payload)
        client = MagicMock()
        client.chat.completions.create = AsyncMock(
            return_value=completion(content), side_effect=side_effect
        )
        client.close = AsyncMock()
        return client

    return build


LLM_PAYLOAD = {
    "title": "Data Engineer",
    "companyName": "Globex",
    "description": "Build pipelines.",
    "location": {"city": "Kraków", "remote": False},
    "requiredSkills": ["Python", "Spark"],
    "niceToHaveSkills": ["Airflow"],
    "workplaceType": "hybrid",
    "experienceLevel": "mid",
    "salary": [{"from": 18000, "to": 24000, "currency": "PLN", "type": "b2b"}],
}


@pytest.fixture
def llm_payload():
    return dict(LLM_PAYLOAD)


# --- Strategy fakes for orchestrator tests ---


class FakeExtractor:
    """Records calls; returns a record or raises the configured error."""

    def __init__(
        self,
        name: str,
        source_type: str = "other",
        error: Optional[Exception] = None,
        title: str = "Backend Developer",
    ):
        self.name = name
        self.source_type = source_type
        self.error = error
        self.title = title
        self.calls: List[str] = []
        self.release_calls = 0
        self.available = True

    def can_handle(self, url):
        return True

    async def extract(self, url, model=None):
        self.calls.append(url)
        if self.error:
            raise self.error
        return JobRecord(
            title=self.title,
            company_name="Acme",
            source_url=url,
            source_type=self.source_type,
        )

    async def release(self):
        self.release_calls += 1

    async def aclose(self):
        pass
