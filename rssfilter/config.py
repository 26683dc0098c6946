import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Upper bound for the upstream feed download, in seconds.
    fetch_timeout: float = float(os.getenv("FEED_FETCH_TIMEOUT", "10"))
    user_agent: str = os.getenv("FEED_USER_AGENT", "rss-filter/0.1")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
