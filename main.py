"""Main FastAPI application for the FireCrawl news monitor."""
from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from fastapi.requests import Request
from pathlib import Path
import logging

from models import ScrapeResponse
from news_extractor import FireCrawlExtractor, MissingAPIKeyError
from analytics import aggregate
from database import NewsDatabase, StorageError
import config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="FireCrawl News Monitor")

# Initialize components
database = NewsDatabase(config.DATABASE_PATH)

# Templates
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """News monitor page; headlines are fetched on demand."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"categories": config.CATEGORIES, "target_url": config.TARGET_URL},
    )


@app.post("/api/scrape", response_model=ScrapeResponse, response_model_exclude_none=True)
def scrape_news():
    """Fetch the latest headlines from the target site."""
    try:
        extractor = FireCrawlExtractor()
    except MissingAPIKeyError as e:
        logger.error(str(e))
        return JSONResponse(
            status_code=500,
            content=ScrapeResponse(success=False, error=str(e)).model_dump(exclude_none=True),
        )

    result = extractor.fetch_articles()
    logger.info(f"Serving {len(result.articles)} articles from {result.source}")

    if config.PERSIST_SCRAPED_ARTICLES and result.source != "fallback":
        try:
            database.save_articles(result.articles, url=config.TARGET_URL)
        except StorageError as e:
            logger.error(f"Could not persist scraped articles: {str(e)}")

    return ScrapeResponse(success=True, articles=result.articles, source=result.source)


@app.get("/dashboard", response_class=HTMLResponse)
async def dashboard(request: Request):
    """Analytics dashboard over stored articles."""
    try:
        data = aggregate(database.get_articles())
        error = None
    except StorageError as e:
        logger.error(f"Error fetching dashboard data: {str(e)}")
        data, error = None, str(e)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"data": data, "error": error, "colors": config.TOPIC_COLORS},
        status_code=500 if error else 200,
    )


@app.get("/api/dashboard")
async def get_dashboard():
    """Get dashboard statistics."""
    try:
        articles = database.get_articles()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return aggregate(articles).model_dump(mode="json")


@app.get("/api/articles")
async def get_articles():
    """Get stored news articles, newest first."""
    try:
        articles = database.get_articles()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"articles": [a.model_dump(mode="json") for a in articles]}


@app.get("/api/status")
async def get_status():
    """Get system status."""
    try:
        articles = database.get_articles()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    articles_by_topic = {category: 0 for category in config.CATEGORIES}
    for article in articles:
        articles_by_topic[article.topic] = articles_by_topic.get(article.topic, 0) + 1

    return {
        "status": "operational",
        "articles_count": len(articles),
        "articles_by_topic": articles_by_topic,
        "firecrawl_configured": bool(config.FIRECRAWL_API_KEY),
        "target_url": config.TARGET_URL,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
