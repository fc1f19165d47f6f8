import pytest

from conftest import FakeExtractor, FakePage
from job_scraper.adapters.portal import PortalExtractor
from job_scraper.core.cache import ResultCache
from job_scraper.core.errors import (
    NetworkError,
    RenderError,
    SchemaValidationError,
    UnsupportedDomainError,
    UpstreamServiceError,
)
from job_scraper.core.models import ExtractionMode, ScrapeOptions
from job_scraper.core.registry import build_default_registry
from job_scraper.core.service import ScraperService
from pages import JUSTJOIN_DOM_ONLY, JUSTJOIN_URL, JUSTJOIN_WITH_JSON_LD

UNREGISTERED_URL = "https://careers.globex.com/jobs/data-engineer"


class PortalFactorySpy:
    """Hands out one FakeExtractor per call and remembers them."""

    def __init__(self, error=None):
        self.error = error
        self.created = []

    def __call__(self, url):
        extractor = FakeExtractor("justjoin.it", source_type="justjoin.it", error=self.error)
        self.created.append(extractor)
        return extractor


def make_service(test_settings, ai=None, portal_factory=None, cache=None):
    return ScraperService(
        settings=test_settings,
        registry=build_default_registry(),
        cache=cache if cache is not None else ResultCache(ttl_seconds=86400),
        ai_extractor=ai or FakeExtractor("ai"),
        portal_factory=portal_factory or PortalFactorySpy(),
    )


def options(mode, skip_cache=False):
    return ScrapeOptions(mode=mode, skip_cache=skip_cache)


# --- auto mode ---


@pytest.mark.asyncio
async def test_auto_uses_ai_first(test_settings):
    ai = FakeExtractor("ai")
    portals = PortalFactorySpy()
    service = make_service(test_settings, ai, portals)

    record = await service.scrape(JUSTJOIN_URL)

    assert record.source_type == "other"
    assert ai.calls == [JUSTJOIN_URL]
    assert portals.created == []


@pytest.mark.asyncio
async def test_auto_falls_back_to_portal_when_ai_fails(test_settings):
    ai = FakeExtractor("ai", error=SchemaValidationError("bad output", strategy="ai"))
    portals = PortalFactorySpy()
    service = make_service(test_settings, ai, portals)

    record = await service.scrape(JUSTJOIN_URL)

    assert record.source_type == "justjoin.it"
    assert len(portals.created) == 1
    assert portals.created[0].release_calls == 1


@pytest.mark.asyncio
async def test_auto_falls_back_on_unclassified_ai_failure(test_settings):
    ai = FakeExtractor("ai", error=RuntimeError("record mapping bug"))
    portals = PortalFactorySpy()
    service = make_service(test_settings, ai, portals)

    record = await service.scrape(JUSTJOIN_URL)

    assert ai.calls == [JUSTJOIN_URL]
    assert record.source_type == "justjoin.it"
    assert len(portals.created) == 1


@pytest.mark.asyncio
async def test_auto_surfaces_portal_error_when_both_fail(test_settings):
    ai = FakeExtractor("ai", error=UpstreamServiceError("jina down", strategy="ai"))
    portals = PortalFactorySpy(error=RenderError("crashed", strategy="justjoin.it"))
    service = make_service(test_settings, ai, portals)

    with pytest.raises(RenderError) as excinfo:
        await service.scrape(JUSTJOIN_URL)

    assert excinfo.value.strategy == "justjoin.it"
    assert portals.created[0].release_calls == 1
    assert len(service.cache) == 0


@pytest.mark.asyncio
async def test_auto_reraises_ai_error_for_unregistered_domain(test_settings):
    ai = FakeExtractor("ai", error=NetworkError("offline", strategy="ai"))
    portals = PortalFactorySpy()
    service = make_service(test_settings, ai, portals)

    with pytest.raises(NetworkError):
        await service.scrape(UNREGISTERED_URL)

    assert portals.created == []


@pytest.mark.asyncio
async def test_auto_on_unregistered_domain_tags_other(test_settings):
    service = make_service(test_settings)

    record = await service.scrape(UNREGISTERED_URL)

    assert not service.has_portal_extractor(UNREGISTERED_URL)
    assert record.source_type == "other"


# --- explicit modes ---


@pytest.mark.asyncio
async def test_ai_mode_has_no_fallback(test_settings):
    ai = FakeExtractor("ai", error=SchemaValidationError("bad", strategy="ai"))
    portals = PortalFactorySpy()
    service = make_service(test_settings, ai, portals)

    with pytest.raises(SchemaValidationError):
        await service.scrape(JUSTJOIN_URL, options(ExtractionMode.AI))

    assert portals.created == []


@pytest.mark.asyncio
async def test_portal_mode_never_falls_back_to_ai(test_settings):
    ai = FakeExtractor("ai")
    portals = PortalFactorySpy(error=RenderError("crashed", strategy="justjoin.it"))
    service = make_service(test_settings, ai, portals)

    with pytest.raises(RenderError):
        await service.scrape(JUSTJOIN_URL, options(ExtractionMode.PORTAL_SPECIFIC))

    assert ai.calls == []
    assert portals.created[0].release_calls == 1


@pytest.mark.asyncio
async def test_portal_mode_rejects_unregistered_domain(test_settings):
    ai = FakeExtractor("ai")
    service = make_service(test_settings, ai)

    with pytest.raises(UnsupportedDomainError) as excinfo:
        await service.scrape(UNREGISTERED_URL, options(ExtractionMode.PORTAL_SPECIFIC))

    assert "pracuj.pl" in excinfo.value.message
    assert ai.calls == []


# --- cache ---


@pytest.mark.asyncio
async def test_second_call_is_served_from_cache(test_settings):
    ai = FakeExtractor("ai")
    service = make_service(test_settings, ai)

    first = await service.scrape(JUSTJOIN_URL + "?utm_source=newsletter")
    second = await service.scrape(JUSTJOIN_URL + "/")

    assert ai.calls == [JUSTJOIN_URL]
    assert second == first
    assert service.cache_stats().keys == [JUSTJOIN_URL]


@pytest.mark.asyncio
async def test_skip_cache_refetches_and_overwrites(test_settings):
    ai = FakeExtractor("ai")
    service = make_service(test_settings, ai)

    await service.scrape(JUSTJOIN_URL)
    ai.title = "Senior Backend Developer"
    record = await service.scrape(JUSTJOIN_URL, options(ExtractionMode.AUTO, skip_cache=True))

    assert len(ai.calls) == 2
    assert record.title == "Senior Backend Developer"
    assert (await service.scrape(JUSTJOIN_URL)).title == "Senior Backend Developer"


@pytest.mark.asyncio
async def test_expired_entry_triggers_fresh_extraction(test_settings):
    now = [1_000_000.0]
    ai = FakeExtractor("ai")
    cache = ResultCache(ttl_seconds=86400, clock=lambda: now[0])
    service = make_service(test_settings, ai, cache=cache)

    await service.scrape(JUSTJOIN_URL)
    now[0] += 86400
    await service.scrape(JUSTJOIN_URL)
    assert len(ai.calls) == 1

    now[0] += 1
    ai.title = "Senior Backend Developer"
    record = await service.scrape(JUSTJOIN_URL)

    assert len(ai.calls) == 2
    assert record.title == "Senior Backend Developer"


@pytest.mark.asyncio
async def test_cache_hit_ignores_mode(test_settings):
    ai = FakeExtractor("ai")
    service = make_service(test_settings, ai)

    await service.scrape(UNREGISTERED_URL, options(ExtractionMode.AI))
    record = await service.scrape(UNREGISTERED_URL, options(ExtractionMode.PORTAL_SPECIFIC))

    assert record.source_type == "other"
    assert len(ai.calls) == 1


@pytest.mark.asyncio
async def test_clear_cache(test_settings):
    service = make_service(test_settings)
    await service.scrape(JUSTJOIN_URL)

    service.clear_cache()

    assert service.cache_stats().size == 0


# --- reporting ---


def test_can_scrape_report(test_settings):
    service = make_service(test_settings)

    report = service.can_scrape_report(JUSTJOIN_URL)
    assert report == {
        "canScrape": True,
        "hasPortalSpecific": True,
        "supportedDomains": ["pracuj.pl", "justjoin.it", "rocketjobs.pl"],
        "aiAvailable": True,
        "recommendedMethod": "auto",
    }
    assert service.can_scrape_report(UNREGISTERED_URL)["recommendedMethod"] == "ai"
    assert service.can_scrape("not even a url")


# --- end to end through the real portal extractor ---


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "html, title, company",
    [
        (JUSTJOIN_WITH_JSON_LD, "Backend Developer", "Acme"),
        (JUSTJOIN_DOM_ONLY, "Backend Developer", "Acme"),
    ],
)
async def test_portal_specific_on_justjoin(
    test_settings, make_session_factory, html, title, company
):
    registry = build_default_registry()
    session_factory = make_session_factory(FakePage(html))
    ai = FakeExtractor("ai")
    service = ScraperService(
        settings=test_settings,
        registry=registry,
        cache=ResultCache(),
        ai_extractor=ai,
        portal_factory=lambda url: registry.create_extractor(url, test_settings, session_factory),
    )

    record = await service.scrape(JUSTJOIN_URL, options(ExtractionMode.PORTAL_SPECIFIC))

    assert record.to_wire()["title"] == title
    assert record.to_wire()["companyName"] == company
    assert record.to_wire()["sourceType"] == "justjoin.it"
    assert not record.has_placeholders
    assert ai.calls == []
    assert session_factory.sessions[0].close_calls == 1


def test_default_portal_factory_uses_registry(test_settings):
    service = ScraperService(settings=test_settings, ai_extractor=FakeExtractor("ai"))
    extractor = service.portal_factory(JUSTJOIN_URL)
    assert isinstance(extractor, PortalExtractor)
    assert extractor.profile.domain == "justjoin.it"
    assert service.portal_factory(UNREGISTERED_URL) is None
