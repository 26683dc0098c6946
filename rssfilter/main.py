import logging
from fastapi import FastAPI
from rssfilter.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from rssfilter.routers import rss_filter

app = FastAPI(title="RSS Filter", version="0.1.0")

@app.get("/")
def root():
    return {"message": "RSS filter is running!"}

app.include_router(rss_filter.router)   # /filter


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
