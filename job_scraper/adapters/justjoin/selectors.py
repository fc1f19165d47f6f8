"""
Selectors for boards built on the Just Join IT platform (justjoin.it and
rocketjobs.pl share the same markup).
"""

# Also the readiness marker: the React app has rendered the offer
TITLE_SELECTOR = 'h1[data-test-id="title"]'

TITLE_SELECTORS = (TITLE_SELECTOR,)

COMPANY_SELECTORS = ('[data-test-id="company-name"]',)

DESCRIPTION_SELECTORS = ('[data-test-id="job-description"]',)

# City only; the board lists extra offices after a comma
LOCATION_SELECTORS = ('[data-test-id="location"]',)

SKILL_SELECTORS = ('[data-test-id="skill-tag"]',)

# e.g. "15 000 - 20 000 PLN"
SALARY_SELECTORS = ('[data-test-id="salary-range"]',)

LOGO_SELECTORS = ('[data-test-id="company-logo"] img',)

WORKPLACE_SELECTORS = ('[data-test-id="workplace-type"]',)

EXPERIENCE_SELECTORS = ('[data-test-id="experience-level"]',)

WORKPLACE_KEYWORDS = (
    (("remote", "zdalna"), "remote"),
    (("hybrid", "hybryd"), "hybrid"),
    (("office", "biuro"), "office"),
)

EXPERIENCE_KEYWORDS = (
    (("junior",), "junior"),
    (("senior",), "senior"),
    (("mid", "regular"), "mid"),
)
