"""News extraction module backed by the FireCrawl API."""
import requests
from typing import Any, Dict, List, NamedTuple, Optional
import logging
import re

from models import Article
from classifier import classify_headline, normalize_article
import config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

HEADLINE_PATTERN = re.compile(r"^#{1,4}\s+\[(.+?)\]")

EXTRACT_PROMPT = """Extract the latest {limit} article headlines from {url} and for each one, return:
- headline (string)
- company mentioned (if any, string or null)
- category: choose from ["AI", "Funding", "Product", "Regulation", "Other"]

Return as a JSON array with objects containing these fields."""

EXTRACT_SCHEMA = {
    "type": "object",
    "properties": {
        "articles": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "headline": {"type": "string"},
                    "company": {"type": "string"},
                    "category": {
                        "type": "string",
                        "enum": list(config.CATEGORIES),
                    },
                },
                "required": ["headline", "category"],
            },
        }
    },
}

MISSING_KEY_MESSAGE = (
    "FireCrawl API key not configured. "
    "Please add FIRECRAWL_API_KEY to your environment variables."
)

# Served whenever the live extraction cannot produce anything
FALLBACK_ARTICLES = (
    Article(
        headline="OpenAI announces new GPT-5 model with improved reasoning capabilities",
        company="OpenAI",
        category="AI",
    ),
    Article(
        headline="Series A funding round raises $50M for fintech startup Stripe competitor",
        category="Funding",
    ),
    Article(
        headline="Apple releases iOS 18 with enhanced privacy features",
        company="Apple",
        category="Product",
    ),
    Article(
        headline="EU proposes new AI regulations for tech companies",
        category="Regulation",
    ),
    Article(
        headline="Tesla CEO discusses future of electric vehicle market",
        company="Tesla",
        category="Other",
    ),
)


class MissingAPIKeyError(RuntimeError):
    """Raised when no FireCrawl API key is configured."""

    def __init__(self, message: str = MISSING_KEY_MESSAGE):
        super().__init__(message)


class ScrapeResult(NamedTuple):
    articles: List[Article]
    source: str


def parse_headlines_from_markdown(markdown: str, limit: int = config.MAX_HEADLINES) -> List[Article]:
    """Extract linked markdown headings (levels 1-4) as classified articles."""
    articles = []
    if not markdown:
        return articles

    for line in markdown.split("\n"):
        match = HEADLINE_PATTERN.match(line)
        if not match:
            continue
        articles.append(classify_headline(match.group(1)))
        if len(articles) >= limit:
            break

    return articles


class FireCrawlExtractor:
    """Fetches the latest headlines of the target site through FireCrawl."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        target_url: str = config.TARGET_URL,
        base_url: str = config.FIRECRAWL_API_URL,
        timeout: int = config.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        api_key = api_key if api_key is not None else config.FIRECRAWL_API_KEY
        if not api_key:
            raise MissingAPIKeyError()

        self.target_url = target_url
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        })

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = self.session.post(
            f"{self.base_url}{endpoint}",
            json=payload,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def extract_structured(self, limit: int = config.MAX_HEADLINES) -> List[Article]:
        """Ask FireCrawl for structured headline records."""
        logger.info(f"Requesting structured extraction for {self.target_url}")
        body = self._post("/v1/extract", {
            "urls": [self.target_url],
            "prompt": EXTRACT_PROMPT.format(limit=limit, url=self.target_url),
            "schema": EXTRACT_SCHEMA,
        })

        data = body.get("data") if isinstance(body, dict) else None
        extracted = None
        if isinstance(data, list) and data:
            first = data[0]
            extracted = first.get("extract") if isinstance(first, dict) else None
        elif isinstance(data, dict):
            extracted = data.get("extract", data)

        items = extracted.get("articles") if isinstance(extracted, dict) else None
        if not isinstance(items, list):
            return []

        articles = [normalize_article(item) for item in items if isinstance(item, dict)]
        logger.info(f"Structured extraction returned {len(articles)} articles")
        return articles

    def scrape_markdown(self) -> Optional[str]:
        """Scrape the target page as markdown."""
        logger.info(f"Scraping {self.target_url} as markdown")
        body = self._post("/v1/scrape", {
            "url": self.target_url,
            "formats": ["markdown"],
            "onlyMainContent": True,
        })

        data = body.get("data") if isinstance(body, dict) else None
        if isinstance(data, dict) and isinstance(data.get("markdown"), str):
            return data["markdown"]
        return None

    def fetch_articles(self, limit: int = config.MAX_HEADLINES) -> ScrapeResult:
        """Fetch headlines, falling back to markdown parsing and then sample data."""
        try:
            articles = self.extract_structured(limit)
            if articles:
                return ScrapeResult(articles, "extract")

            logger.info("Structured extraction failed, trying scrape method...")
            markdown = self.scrape_markdown()
            articles = parse_headlines_from_markdown(markdown or "", limit)
            if articles:
                return ScrapeResult(articles, "markdown")

            logger.warning("No headlines found in scraped markdown, using fallback data")
        except requests.exceptions.RequestException as e:
            logger.error(f"FireCrawl API error: {str(e)}")
        except ValueError as e:
            # raised by response.json() on an undecodable body
            logger.error(f"Invalid FireCrawl response: {str(e)}")

        return ScrapeResult(list(FALLBACK_ARTICLES), "fallback")
