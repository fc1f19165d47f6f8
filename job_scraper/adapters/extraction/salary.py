"""
Salary extraction from JSON-LD structured data and range text.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from job_scraper.core.models import ContractType, Salary

logger = logging.getLogger(__name__)

# "15 000 - 20 000 PLN", "15,000–20,000 zł / mth"
SALARY_RANGE_PATTERN = re.compile(
    r"(\d[\d\s.,]*)\s*[-–—]\s*(\d[\d\s.,]*)\s*([A-Za-zł]+)"
)

DEFAULT_CURRENCY = "PLN"
CURRENCY_ALIASES = {"zł": "PLN", "zl": "PLN"}


def _to_number(raw: str) -> Optional[float]:
    digits = re.sub(r"\s", "", raw).strip(".,")
    # Treat a trailing ",dd" or ".dd" as decimals, any other separator as thousands
    match = re.fullmatch(r"([\d.,]*?)[.,](\d{2})", digits)
    if match:
        whole = re.sub(r"[.,]", "", match.group(1))
        digits = f"{whole}.{match.group(2)}"
    else:
        digits = re.sub(r"[.,]", "", digits)
    try:
        return float(digits)
    except ValueError:
        return None


def _normalize_currency(raw: str) -> str:
    return CURRENCY_ALIASES.get(raw.lower(), raw.upper())


def parse_salary_range(
    text: str, contract_type: ContractType, gross: bool = True
) -> Optional[List[Salary]]:
    """
    Parse a "<from> - <to> <currency>" range. Bounds are ordered so the
    resulting Salary always satisfies from <= to. Returns None when the text
    holds no range.
    """
    if not text:
        return None

    match = SALARY_RANGE_PATTERN.search(text)
    if not match:
        logger.debug(f"No salary range in '{text}'")
        return None

    low = _to_number(match.group(1))
    high = _to_number(match.group(2))
    if low is None or high is None:
        return None
    if low > high:
        low, high = high, low

    return [
        Salary(
            from_=low,
            to=high,
            currency=_normalize_currency(match.group(3)),
            type=contract_type,
            gross=gross,
        )
    ]


def salary_from_json_ld(json_ld: Dict[str, Any]) -> Optional[List[Salary]]:
    """Salary from a JobPosting's baseSalary MonetaryAmount."""
    base = json_ld.get("baseSalary")
    if not isinstance(base, dict):
        return None

    value = base.get("value")
    if not isinstance(value, dict):
        return None

    low = value.get("minValue") or None
    high = value.get("maxValue") or None
    # A single "value" is both bounds
    if low is None and high is None and value.get("value"):
        low = high = value.get("value")
    if low is None and high is None:
        return None

    try:
        if low is not None and high is not None and float(low) > float(high):
            low, high = high, low
        return [
            Salary(
                from_=low,
                to=high,
                currency=base.get("currency") or value.get("currency") or DEFAULT_CURRENCY,
                type="permanent",
                gross=True,
            )
        ]
    except (ValidationError, TypeError, ValueError) as e:
        logger.warning(f"Ignoring unusable baseSalary: {e}")
        return None
