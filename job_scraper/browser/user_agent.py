import logging
from typing import Optional

from fake_useragent import UserAgent

logger = logging.getLogger(__name__)

# Default fallback user agent string
FALLBACK_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class UserAgentProvider:
    """
    Hands out desktop user-agent strings for rendering sessions.
    """

    _ua: Optional[UserAgent] = None

    @classmethod
    def initialize(cls):
        if cls._ua is None:
            try:
                cls._ua = UserAgent(
                    browsers=["chrome", "firefox", "safari"],
                    os=["windows", "macos"],
                    fallback=FALLBACK_UA,
                )
            except Exception as e:
                logger.warning(
                    f"Failed to initialize fake_useragent, using fallback: {e}"
                )

    @classmethod
    def get(cls, override: Optional[str] = None) -> str:
        """
        Return the configured user agent if set, otherwise a random one
        (or the fallback if fake_useragent is unavailable).
        """
        if override:
            return override
        cls.initialize()
        if cls._ua:
            return cls._ua.random
        return FALLBACK_UA
