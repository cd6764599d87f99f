import os
from dotenv import load_dotenv

load_dotenv()


DEFAULT_URLS: tuple[str, ...] = (
    "https://www.google.com",
    "https://www.youtube.com",
    "https://www.facebook.com",
    "https://www.twitter.com",
    "https://www.instagram.com",
    "https://www.linkedin.com",
    "https://www.reddit.com",
    "https://www.tiktok.com",
    "https://www.snapchat.com",
    "https://www.whatsapp.com",
    "https://www.pinterest.com",
    "https://www.tumblr.com",
    "https://www.twitch.tv",
    "https://www.medium.com",
    "https://www.disney.com",
    "https://www.coca-cola.com",
    "https://www.pepsi.com",
    "https://www.sprite.com",
    "https://www.drpepper.com",
    "https://www.fanta.com",
    "https://www.microsoft.com",
    "https://www.apple.com",
    "https://www.netflix.com",
    "https://www.spotify.com",
    "https://www.amazon.com",
    "https://www.ebay.com",
    "https://www.walmart.com",
    "https://www.target.com",
    "https://www.adobe.com",
    "https://www.nasa.gov",
    "https://www.tesla.com",
    "https://www.weather.com",
    "https://www.tripadvisor.com",
    "https://www.airbnb.com",
    "https://www.booking.com",
    "https://www.wikipedia.org",
    "https://themousepadcompany.com",
    "https://www.cnn.com",
    "https://www.crazygames.com",
    "https://www.nytimes.com",
    "https://www.roblox.com",
    "https://www.riotgames.com",
    "https://www.forever21.com",
    "https://www.blizzard.com",
)


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    return float(raw) if raw else None


class Settings:
    SITEWATCH_ENDPOINTS_PATH: str | None = os.getenv("SITEWATCH_ENDPOINTS_PATH")
    SITEWATCH_WORKERS: int = int(os.getenv("SITEWATCH_WORKERS", 8))
    SITEWATCH_TIMEOUT_S: float = float(os.getenv("SITEWATCH_TIMEOUT_S", "5"))
    SITEWATCH_CONNECT_TIMEOUT_S: float | None = _optional_float(
        "SITEWATCH_CONNECT_TIMEOUT_S"
    )
    SITEWATCH_RETRIES: int = int(os.getenv("SITEWATCH_RETRIES", 3))
    SITEWATCH_INTERVAL_S: float = float(os.getenv("SITEWATCH_INTERVAL_S", "60"))
    SITEWATCH_OUTPUT_FORMAT: str = os.getenv("SITEWATCH_OUTPUT_FORMAT", "json")
    SITEWATCH_LOG_LEVEL: str = os.getenv("SITEWATCH_LOG_LEVEL", "INFO")


settings = Settings()
