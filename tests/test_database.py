"""Tests for the sqlite article store."""
import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from database import NewsDatabase, StorageError
from models import Article


class TestNewsDatabase:
    def test_empty_database(self, db):
        assert db.get_articles() == []

    def test_articles_are_returned_newest_first(self, db):
        published = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        db.insert_article("Older", "https://a", "AI", published,
                          created_at=datetime(2024, 5, 1, 13, 0, tzinfo=timezone.utc))
        db.insert_article("Newer", "https://b", "Funding", published,
                          created_at=datetime(2024, 5, 2, 13, 0, tzinfo=timezone.utc))

        articles = db.get_articles()

        assert [a.title for a in articles] == ["Newer", "Older"]
        assert articles[0].topic == "Funding"
        assert articles[1].published_date == published

    def test_order_follows_time_across_offsets(self, db):
        """Timestamps with different UTC offsets still sort by time."""
        published = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        # 01:00 at UTC+5 is 20:00 UTC on May 1st
        db.insert_article("Older", "https://a", "AI", published,
                          created_at=datetime(2024, 5, 2, 1, 0, tzinfo=timezone(timedelta(hours=5))))
        db.insert_article("Newer", "https://b", "AI", published,
                          created_at=datetime(2024, 5, 1, 22, 0, tzinfo=timezone.utc))

        articles = db.get_articles()

        assert [a.title for a in articles] == ["Newer", "Older"]
        assert articles[1].created_at == datetime(2024, 5, 1, 20, 0, tzinfo=timezone.utc)

    def test_naive_timestamps_are_stored_as_utc(self, db):
        db.insert_article("Naive", "u", "AI", datetime(2024, 5, 1, 23, 30),
                          created_at=datetime(2024, 5, 1, 23, 45))

        article = db.get_articles()[0]

        assert article.published_date == datetime(2024, 5, 1, 23, 30, tzinfo=timezone.utc)
        assert article.created_at == datetime(2024, 5, 1, 23, 45, tzinfo=timezone.utc)

    def test_insert_returns_id(self, db):
        first = db.insert_article("One", "u", "AI", datetime(2024, 1, 1, tzinfo=timezone.utc))
        second = db.insert_article("Two", "u", "AI", datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert second == first + 1

    def test_save_scraped_articles(self, db):
        articles = [
            Article(headline="OpenAI launches new product", company="OpenAI", category="AI"),
            Article(headline="Electric cars hit the road"),
        ]
        published = datetime(2024, 6, 1, tzinfo=timezone.utc)

        assert db.save_articles(articles, url="https://techcrunch.com/", published_date=published) == 2

        stored = db.get_articles()
        assert {(a.title, a.topic) for a in stored} == {
            ("OpenAI launches new product", "AI"),
            ("Electric cars hit the road", "Other"),
        }
        assert all(a.url == "https://techcrunch.com/" for a in stored)

    def test_skips_unparseable_rows(self, db):
        db.insert_article("Good", "u", "AI", datetime(2024, 1, 1, tzinfo=timezone.utc))
        conn = sqlite3.connect(db.db_path)
        conn.execute(
            "INSERT INTO news_articles (title, url, topic, published_date, created_at) VALUES (?, ?, ?, ?, ?)",
            ("Bad", "u", "AI", "not a date", "2024-01-01T00:00:00+00:00"),
        )
        conn.commit()
        conn.close()

        assert [a.title for a in db.get_articles()] == ["Good"]

    def test_read_failure_raises_storage_error(self, db):
        conn = sqlite3.connect(db.db_path)
        conn.execute("DROP TABLE news_articles")
        conn.commit()
        conn.close()

        with pytest.raises(StorageError):
            db.get_articles()

    def test_unopenable_path(self, tmp_path):
        with pytest.raises(StorageError):
            NewsDatabase(str(tmp_path / "missing" / "news.db"))
