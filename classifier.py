"""Keyword-based categorization of news headlines."""
import logging
from typing import Any, Dict, Optional

from models import Article
import config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

UNTITLED_HEADLINE = "Untitled Article"


def categorize_headline(headline: str) -> str:
    """Return the category of the first keyword group found in the headline."""
    text_lower = headline.lower()

    for category, keywords in config.CATEGORY_KEYWORDS:
        if any(keyword in text_lower for keyword in keywords):
            return category

    return config.DEFAULT_CATEGORY


def extract_company(headline: str) -> Optional[str]:
    """Return the first known company mentioned in the headline, if any."""
    text_lower = headline.lower()

    for company in config.KNOWN_COMPANIES:
        if company.lower() in text_lower:
            return company

    return None


def classify_headline(headline: str) -> Article:
    """Build an Article from a bare headline."""
    return Article(
        headline=headline,
        company=extract_company(headline),
        category=categorize_headline(headline),
    )


def _known_company(name: Any) -> Optional[str]:
    if not isinstance(name, str):
        return None
    name_lower = name.strip().lower()
    for company in config.KNOWN_COMPANIES:
        if company.lower() == name_lower:
            return company
    return None


def normalize_article(raw: Dict[str, Any]) -> Article:
    """Turn an item of the extraction payload into an Article.

    Missing or unexpected fields are defaulted instead of rejected: the
    headline becomes "Untitled Article", an unknown category becomes "Other",
    and a company outside the known list is looked up in the headline.
    """
    headline = raw.get("headline")
    if not isinstance(headline, str) or not headline.strip():
        headline = UNTITLED_HEADLINE
    headline = headline.strip()

    category = raw.get("category")
    if category not in config.CATEGORIES:
        if category:
            logger.debug(f"Unknown category {category!r} for '{headline[:50]}', using default")
        category = config.DEFAULT_CATEGORY

    company = raw.get("company")
    canonical = _known_company(company)
    if canonical is None and company:
        canonical = extract_company(headline)

    return Article(headline=headline, company=canonical, category=category)
