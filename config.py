"""Configuration settings for the news monitor."""
import os
from dotenv import load_dotenv

load_dotenv()

# API Keys
FIRECRAWL_API_KEY = os.getenv("FIRECRAWL_API_KEY", "")

# FireCrawl Settings
FIRECRAWL_API_URL = os.getenv("FIRECRAWL_API_URL", "https://api.firecrawl.dev")
TARGET_URL = os.getenv("TARGET_URL", "https://techcrunch.com/")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "60"))
MAX_HEADLINES = 5

# Store every scraped batch in the articles table so the dashboard has data
PERSIST_SCRAPED_ARTICLES = os.getenv("PERSIST_SCRAPED_ARTICLES", "false").lower() == "true"

# Categories (order matters: first matching group wins)
CATEGORIES = ("AI", "Funding", "Product", "Regulation", "Other")
DEFAULT_CATEGORY = "Other"

CATEGORY_KEYWORDS = (
    ("AI", ("ai", "artificial intelligence", "machine learning", "chatgpt", "openai")),
    ("Funding", ("funding", "investment", "raises", "series", "venture")),
    ("Product", ("product", "launch", "release", "update", "feature")),
    ("Regulation", ("regulation", "policy", "government", "legal", "lawsuit")),
)

# Known companies, checked in order
KNOWN_COMPANIES = (
    "Microsoft",
    "Google",
    "Apple",
    "Amazon",
    "Meta",
    "Tesla",
    "OpenAI",
    "Anthropic",
    "SpaceX",
    "Uber",
    "Airbnb",
    "Netflix",
    "X",
    "TikTok",
    "ByteDance",
)

# Dashboard
TOPIC_COLORS = {
    "AI": "#8B5CF6",
    "Funding": "#10B981",
    "Product": "#F59E0B",
    "Regulation": "#EF4444",
    "Other": "#6B7280",
}

DATE_BUCKETS = 7
TOP_WORDS = 5
RECENT_ARTICLES = 5
MIN_WORD_LENGTH = 3

STOPWORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "up", "about", "into", "through", "during", "before",
    "after", "above", "below", "between", "among", "is", "are", "was", "were",
    "be", "been", "being", "have", "has", "had", "do", "does", "did", "will",
    "would", "could", "should", "may", "might", "must", "can", "cant", "wont",
    "dont", "doesnt", "didnt", "isnt", "arent", "wasnt", "werent", "hasnt",
    "havent", "hadnt", "wouldnt", "couldnt", "shouldnt", "mightnt", "mustnt",
])

# Database
DATABASE_PATH = os.getenv("DATABASE_PATH", "news_data.db")

# API Settings
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
