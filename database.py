"""Database module for storing scraped news articles."""
import sqlite3
from typing import List, Optional
from datetime import datetime, timezone
from dateutil import parser
from models import Article, PersistedArticle
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the articles table cannot be read or written."""


def _utc_timestamp(value: datetime) -> str:
    """Fixed-width ISO string in UTC; rows are sorted on it as TEXT."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


class NewsDatabase:
    """Database handler for the news_articles table."""

    def __init__(self, db_path: str = "news_data.db"):
        self.db_path = db_path
        self._init_database()

    def _connect(self) -> sqlite3.Connection:
        try:
            return sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Could not open database {self.db_path}: {e}") from e

    def _init_database(self):
        """Initialize database tables."""
        conn = self._connect()
        try:
            conn.execute('''
                CREATE TABLE IF NOT EXISTS news_articles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    url TEXT NOT NULL,
                    topic TEXT NOT NULL,
                    published_date TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
            ''')
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Could not initialize database: {e}") from e
        finally:
            conn.close()
        logger.info("Database initialized")

    def insert_article(
        self,
        title: str,
        url: str,
        topic: str,
        published_date: datetime,
        created_at: Optional[datetime] = None,
    ) -> int:
        """Insert a single article row and return its id."""
        created_at = created_at or datetime.now(timezone.utc)
        conn = self._connect()
        try:
            cursor = conn.execute('''
                INSERT INTO news_articles (title, url, topic, published_date, created_at)
                VALUES (?, ?, ?, ?, ?)
            ''', (title, url, topic, _utc_timestamp(published_date), _utc_timestamp(created_at)))
            conn.commit()
            return cursor.lastrowid
        except sqlite3.Error as e:
            raise StorageError(f"Error saving article '{title[:50]}': {e}") from e
        finally:
            conn.close()

    def save_articles(
        self,
        articles: List[Article],
        url: str,
        published_date: Optional[datetime] = None,
    ) -> int:
        """Save classified scrape results, one row per headline."""
        now = datetime.now(timezone.utc)
        published_date = published_date or now
        conn = self._connect()
        try:
            conn.executemany('''
                INSERT INTO news_articles (title, url, topic, published_date, created_at)
                VALUES (?, ?, ?, ?, ?)
            ''', [
                (article.headline, url, article.category, _utc_timestamp(published_date), _utc_timestamp(now))
                for article in articles
            ])
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Error saving articles: {e}") from e
        finally:
            conn.close()
        logger.info(f"Saved {len(articles)} articles to database")
        return len(articles)

    def get_articles(self) -> List[PersistedArticle]:
        """Retrieve all articles, newest first."""
        conn = self._connect()
        try:
            rows = conn.execute('''
                SELECT id, title, url, topic, published_date, created_at
                FROM news_articles
                ORDER BY created_at DESC, id DESC
            ''').fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Error loading articles: {e}") from e
        finally:
            conn.close()

        articles = []
        for row in rows:
            try:
                article = PersistedArticle(
                    id=row[0],
                    title=row[1],
                    url=row[2],
                    topic=row[3],
                    published_date=parser.isoparse(row[4]),
                    created_at=parser.isoparse(row[5]),
                )
                articles.append(article)
            except (ValueError, TypeError) as e:
                logger.error(f"Error loading article {row[0]}: {str(e)}")
                continue

        return articles
