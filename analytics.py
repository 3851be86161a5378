"""Aggregate statistics over persisted articles for the dashboard."""
import logging
import math
import re
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Sequence

from models import (
    ArticlesByDate,
    DashboardData,
    PersistedArticle,
    TopicDistribution,
    WordFrequency,
)
import config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

WORD_SPLIT = re.compile(r"\W+")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _utc_date(value: datetime) -> date:
    """Calendar date of a timestamp in UTC (naive timestamps are UTC)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


def topic_distribution(articles: Sequence[PersistedArticle]) -> List[TopicDistribution]:
    """Count articles per topic, in order of first appearance."""
    total = len(articles)
    if total == 0:
        return []

    topic_counts: Dict[str, int] = {}
    for article in articles:
        topic_counts[article.topic] = topic_counts.get(article.topic, 0) + 1

    return [
        TopicDistribution(
            topic=topic,
            count=count,
            percentage=_round_half_up(count * 100 / total),
            color=config.TOPIC_COLORS.get(topic, config.TOPIC_COLORS[config.DEFAULT_CATEGORY]),
        )
        for topic, count in topic_counts.items()
    ]


def articles_by_date(
    articles: Sequence[PersistedArticle],
    buckets: int = config.DATE_BUCKETS,
) -> List[ArticlesByDate]:
    """Count articles per publication day, keeping the most recent days."""
    date_groups: Dict[date, int] = {}
    for article in articles:
        day = _utc_date(article.published_date)
        date_groups[day] = date_groups.get(day, 0) + 1

    days = sorted(date_groups)[-buckets:] if buckets > 0 else []
    return [ArticlesByDate(date=day.isoformat(), count=date_groups[day]) for day in days]


def word_frequency(
    articles: Sequence[PersistedArticle],
    top: int = config.TOP_WORDS,
) -> List[WordFrequency]:
    """Most frequent title words, ignoring stopwords and short tokens."""
    word_counts: Dict[str, int] = {}
    for article in articles:
        for word in WORD_SPLIT.split(article.title.lower()):
            if len(word) < config.MIN_WORD_LENGTH or word in config.STOPWORDS:
                continue
            word_counts[word] = word_counts.get(word, 0) + 1

    # sorted() is stable, so ties keep first-seen order
    ranked = sorted(word_counts.items(), key=lambda item: item[1], reverse=True)
    return [WordFrequency(word=word, count=count) for word, count in ranked[:top]]


def recent_articles(
    articles: Sequence[PersistedArticle],
    limit: int = config.RECENT_ARTICLES,
) -> List[PersistedArticle]:
    """First articles of a collection already ordered newest first."""
    return list(articles[:limit])


def aggregate(
    articles: Sequence[PersistedArticle],
    today: Optional[date] = None,
) -> DashboardData:
    """Compute every dashboard statistic from scratch."""
    articles = list(articles)
    if today is None:
        today = datetime.now(timezone.utc).date()

    distribution = topic_distribution(articles)
    logger.info(f"Aggregated {len(articles)} articles into {len(distribution)} topics")

    return DashboardData(
        total_articles=len(articles),
        topics_covered=len(distribution),
        todays_articles=sum(1 for a in articles if _utc_date(a.published_date) == today),
        last_updated=articles[0].created_at if articles else None,
        topic_distribution=distribution,
        articles_by_date=articles_by_date(articles),
        word_frequency=word_frequency(articles),
        recent_articles=recent_articles(articles),
    )
