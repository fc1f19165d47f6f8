"""
Rendered job pages used across the portal tests.
"""

import json

JUSTJOIN_URL = "https://justjoin.it/job-offer/acme-backend-dev"
PRACUJ_URL = "https://www.pracuj.pl/praca/python-developer-warszawa,oferta,1003"

JUSTJOIN_JSON_LD = {
    "@context": "https://schema.org",
    "@type": "JobPosting",
    "title": "Backend Developer",
    "hiringOrganization": {"@type": "Organization", "name": "Acme"},
    "jobLocation": {"@type": "Place", "address": {"addressLocality": "Wrocław"}},
}

JUSTJOIN_BODY = """
<body>
  <div id="cookies"><button class="accept-cookies">Accept</button></div>
  <h1 data-test-id="title">Backend Developer</h1>
  <a data-test-id="company-name">Acme</a>
  <div data-test-id="company-logo"><img src="https://cdn.justjoin.it/acme.png"></div>
  <span data-test-id="location">Wrocław, +2 locations</span>
  <span data-test-id="workplace-type">Fully remote</span>
  <span data-test-id="experience-level">Senior</span>
  <div data-test-id="salary-range">18 000 - 25 000 PLN</div>
  <ul>
    <li data-test-id="skill-tag">Python</li>
    <li data-test-id="skill-tag">FastAPI</li>
    <li data-test-id="skill-tag">Python</li>
  </ul>
  <div data-test-id="job-description"><p>Design and run <b>APIs</b>.</p></div>
</body>
"""


def with_json_ld(body: str, data: dict) -> str:
    return (
        "<html><head>"
        f'<script type="application/ld+json">{json.dumps(data)}</script>'
        f"</head>{body}</html>"
    )


JUSTJOIN_WITH_JSON_LD = with_json_ld(JUSTJOIN_BODY, JUSTJOIN_JSON_LD)

JUSTJOIN_DOM_ONLY = f"<html><head><title>Acme</title></head>{JUSTJOIN_BODY}</html>"

PRACUJ_JSON_LD = {
    "@context": "https://schema.org",
    "@type": "JobPosting",
    "title": "Python Developer",
    "description": "<ul><li>Python</li><li>Django</li></ul>",
    "hiringOrganization": {"@type": "Organization", "name": "Globex Sp. z o.o."},
    "jobLocation": {
        "@type": "Place",
        "address": {"addressLocality": "Warszawa", "streetAddress": "Prosta 51"},
    },
    "employmentType": "FULL_TIME",
    "skills": ["Python", "Django"],
}

PRACUJ_BODY = """
<body>
  <h1 data-test="text-jobTitle">Python Developer (DOM)</h1>
  <h2 data-test="text-companyName">Globex Sp. z o.o.</h2>
  <div data-test="text-location">Warszawa, Prosta 51</div>
  <div data-test="image-company"><img src="https://pracuj.pl/logo/globex.png"></div>
  <div data-test="sections-benefit-workplace">praca hybrydowa</div>
  <div data-test="sections-benefit-experience">specjalista (Mid / Regular)</div>
  <div data-test="text-earningAmount-salary">12 000 – 16 000 zł brutto / mies.</div>
  <ul>
    <li data-test="item-technologies-skill">Kubernetes</li>
  </ul>
  <section data-test="section-description"><p>Rozwój systemów.</p></section>
</body>
"""

PRACUJ_WITH_JSON_LD = with_json_ld(PRACUJ_BODY, PRACUJ_JSON_LD)

PRACUJ_DOM_ONLY = f"<html>{PRACUJ_BODY}</html>"

EMPTY_PAGE = "<html><body><p>Offer expired</p></body></html>"
