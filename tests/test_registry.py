import pytest

from job_scraper.adapters.base import PortalProfile, PortalSelectors
from job_scraper.adapters.portal import PortalExtractor
from job_scraper.core.registry import PortalRegistry, build_default_registry


@pytest.fixture
def registry():
    return build_default_registry()


def test_default_domains_in_registration_order(registry):
    assert registry.supported_domains() == ["pracuj.pl", "justjoin.it", "rocketjobs.pl"]
    assert len(registry) == 3
    assert "justjoin.it" in registry
    assert "nofluffjobs.com" not in registry


@pytest.mark.parametrize(
    "url, domain",
    [
        ("https://www.pracuj.pl/praca/x,oferta,1", "pracuj.pl"),
        ("https://it.pracuj.pl/praca/x", "pracuj.pl"),
        ("https://justjoin.it/job-offer/acme-backend-dev", "justjoin.it"),
        ("https://rocketjobs.pl/oferta-pracy/acme", "rocketjobs.pl"),
    ],
)
def test_resolve(registry, url, domain):
    assert registry.resolve(url).domain == domain
    assert registry.has_portal_extractor(url)


@pytest.mark.parametrize(
    "url", ["https://boards.greenhouse.io/acme/jobs/1", "https://notpracuj.pl/x", "garbage", ""]
)
def test_unregistered_urls(registry, url):
    assert registry.resolve(url) is None
    assert not registry.has_portal_extractor(url)
    assert registry.create_extractor(url) is None


def test_create_extractor_binds_profile(registry, test_settings):
    extractor = registry.create_extractor("https://rocketjobs.pl/oferta-pracy/acme", test_settings)
    assert isinstance(extractor, PortalExtractor)
    assert extractor.profile.source_type == "rocketjobs.pl"
    assert extractor.settings is test_settings


def test_duplicate_domains_are_rejected():
    profile = PortalProfile(domain="example.com", source_type="other", selectors=PortalSelectors())
    with pytest.raises(ValueError):
        PortalRegistry([profile, profile])
