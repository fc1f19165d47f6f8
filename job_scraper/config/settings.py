from pathlib import Path
from typing import Dict, List, Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the job scraper.
    """

    # Browser settings
    HEADLESS: bool = True
    BROWSER_TYPE: str = "chromium"  # chromium, firefox, webkit
    IGNORE_HTTPS_ERRORS: bool = True
    WAIT_FOR_NETWORK_IDLE: bool = False
    # None picks a random desktop UA via fake-useragent
    USER_AGENT: Optional[str] = None
    # Extra cookies injected into every rendering session: [{"name", "value", "domain"}]
    COOKIES: List[Dict[str, str]] = []

    # Proxy (optional, plain HTTP/SOCKS server)
    PROXY_SERVER: Optional[str] = None
    PROXY_USERNAME: Optional[str] = None
    PROXY_PASSWORD: Optional[str] = None

    # Concurrency
    MAX_CONCURRENT_PAGES: int = 5

    # Retries
    MAX_RETRIES: int = 2
    RETRY_BASE_DELAY: float = 1.0  # seconds
    RETRY_MAX_DELAY: float = 4.0  # seconds

    # Timeouts
    NAVIGATION_TIMEOUT: int = 30000  # ms
    SELECTOR_TIMEOUT: int = 10000  # ms

    # Result cache
    CACHE_TTL_SECONDS: int = 60 * 60 * 24

    # Jina Reader (document conversion)
    JINA_BASE_URL: str = "https://r.jina.ai"
    JINA_API_KEY: Optional[str] = None
    JINA_TIMEOUT: float = 30.0  # seconds

    # LLM extraction
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    AI_MODEL: str = "gpt-5-nano"
    # gpt-5-nano only accepts temperature=1
    AI_TEMPERATURE: float = 1.0
    AI_TIMEOUT: float = 60.0  # seconds
    AI_MIN_CONTENT_CHARS: int = 100
    AI_MAX_CONTENT_CHARS: int = 50000

    LOG_LEVEL: str = "INFO"


settings = Settings()
