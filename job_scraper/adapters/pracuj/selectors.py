"""
All CSS and data-attribute selectors used for pracuj.pl job pages.
Centralized here so that selector changes only need to happen in one place.
"""

TITLE_SELECTORS = ('[data-test="text-jobTitle"]', "h1")

COMPANY_SELECTORS = ('[data-test="text-companyName"]',)

DESCRIPTION_SELECTORS = ('[data-test="section-description"]',)

# "City, Street"
LOCATION_SELECTORS = ('[data-test="text-location"]',)

SKILL_SELECTORS = ('[data-test*="skill"]',)

SALARY_SELECTORS = ('[data-test*="salary"]',)

LOGO_SELECTORS = ('[data-test="image-company"] img',)

WORKPLACE_SELECTORS = ('[data-test*="workplace"]', '[data-test*="remote"]')

EXPERIENCE_SELECTORS = ('[data-test*="experience"]', '[data-test*="seniority"]')

# --- Keyword tables (Polish and English labels) ---

WORKPLACE_KEYWORDS = (
    (("zdalna", "remote"), "remote"),
    (("hybryd", "hybrid"), "hybrid"),
    (("stacjonarna", "office"), "office"),
)

EXPERIENCE_KEYWORDS = (
    (("junior", "młodszy"), "junior"),
    (("senior", "starszy"), "senior"),
    (("mid", "regular"), "mid"),
)
