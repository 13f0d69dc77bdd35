from pydantic import BaseModel, ConfigDict, field_validator
from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

# Read on every request, never cached on settings
API_KEY_ENV = "AI_GATEWAY_API_KEY"

class Settings(BaseModel):
    # Upstream chat-completion gateway
    gateway_url: str = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions")
    model: str = os.getenv("AI_MODEL", "google/gemini-2.5-flash")
    gateway_timeout: float = float(os.getenv("AI_GATEWAY_TIMEOUT", "60"))

    # Relay as seen from the form
    relay_url: str = os.getenv("RELAY_URL", "http://127.0.0.1:8000")
    relay_api_key: str | None = os.getenv("RELAY_API_KEY") or None

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    model_config = ConfigDict(validate_default=True)

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        # logging only knows the upper-case names
        return v.strip().upper()

def get_api_key() -> str | None:
    """Bearer credential for the upstream gateway, looked up at call time."""
    return os.getenv(API_KEY_ENV) or None

# Create a global settings object
settings = Settings()
