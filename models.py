"""Data models for the news monitor."""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional
from datetime import datetime

Category = Literal["AI", "Funding", "Product", "Regulation", "Other"]


class Article(BaseModel):
    """A headline returned by the scraper, with its category."""
    headline: str
    company: Optional[str] = None
    category: Category = "Other"

    model_config = ConfigDict(frozen=True)


class PersistedArticle(BaseModel):
    """Represents a row of the news_articles table."""
    id: int
    title: str
    url: str
    topic: str
    published_date: datetime
    created_at: datetime


class TopicDistribution(BaseModel):
    topic: str
    count: int
    percentage: int
    color: str


class ArticlesByDate(BaseModel):
    date: str
    count: int


class WordFrequency(BaseModel):
    word: str
    count: int


class DashboardData(BaseModel):
    """Aggregate statistics shown on the dashboard."""
    total_articles: int = 0
    topics_covered: int = 0
    todays_articles: int = 0
    last_updated: Optional[datetime] = None
    topic_distribution: List[TopicDistribution] = Field(default_factory=list)
    articles_by_date: List[ArticlesByDate] = Field(default_factory=list)
    word_frequency: List[WordFrequency] = Field(default_factory=list)
    recent_articles: List[PersistedArticle] = Field(default_factory=list)


class ScrapeResponse(BaseModel):
    """Response body of the scrape endpoint."""
    success: bool
    articles: Optional[List[Article]] = None
    source: Optional[str] = None
    error: Optional[str] = None
