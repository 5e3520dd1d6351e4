import os

from dotenv import load_dotenv

load_dotenv()

class Settings:
    PROJECT_NAME: str = "tradier-client"
    VERSION: str = "0.1.0"

    # Credentials
    TRADIER_ACCESS_TOKEN: str = os.getenv("TRADIER_ACCESS_TOKEN", "").strip()
    TRADIER_ACCOUNT_ID: str = os.getenv("TRADIER_ACCOUNT_ID", "").strip()

    # Endpoint
    TRADIER_SANDBOX: bool = os.getenv("TRADIER_SANDBOX", "true").strip().lower() == "true"
    TRADIER_ENDPOINT: str = os.getenv("TRADIER_ENDPOINT", "").strip()
    TRADIER_TIMEOUT_SEC: float = float(os.getenv("TRADIER_TIMEOUT_SEC", "10"))

    # Exchange-local wall clock used by time-and-sales
    MARKET_TIMEZONE: str = os.getenv("MARKET_TIMEZONE", "America/New_York")

    # Observability
    LOG_LEVEL: str = (os.getenv("TRADIER_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "warn").strip().lower()
    SERVICE_NAME: str = os.getenv("TRADIER_SERVICE_NAME", "tradier-client")

    def base_endpoint(self) -> str:
        if self.TRADIER_ENDPOINT:
            return self.TRADIER_ENDPOINT
        return "https://sandbox.tradier.com" if self.TRADIER_SANDBOX else "https://api.tradier.com"

settings = Settings()
