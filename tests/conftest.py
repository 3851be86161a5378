"""Shared fixtures for the news monitor tests."""
import os
import tempfile
from datetime import datetime, timezone

import pytest

# main.py opens its database at import time
os.environ["DATABASE_PATH"] = os.path.join(tempfile.mkdtemp(), "test_news.db")
os.environ["FIRECRAWL_API_KEY"] = "test-key"

from database import NewsDatabase
from models import PersistedArticle


def make_article(id, title, topic="Other", published=None, created=None):
    published = published or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    return PersistedArticle(
        id=id,
        title=title,
        url=f"https://techcrunch.com/{id}",
        topic=topic,
        published_date=published,
        created_at=created or published,
    )


@pytest.fixture
def db(tmp_path):
    return NewsDatabase(str(tmp_path / "news.db"))
