# sqlrelay/nl2sql.py

import logging

import httpx
from .config import settings, get_api_key, API_KEY_ENV
from .errors import ConfigurationError, GatewayError, QuotaExceededError, RateLimitError
from .prompt import build_messages

logger = logging.getLogger(__name__)

def build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.gateway_timeout)

async def generate_sql(question: str) -> str:
    """
    Sends the question with the fixed system prompt to the AI gateway and
    returns the model's text exactly as produced.
    """
    api_key = get_api_key()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} is not configured")

    logger.info("Converting natural language to SQL: %s", question)

    async with build_client() as client:
        resp = await client.post(
            settings.gateway_url,
            headers={"Authorization": f"Bearer {api_key}"},
            json={"model": settings.model, "messages": build_messages(question)},
        )

        if not resp.is_success:
            logger.error("AI gateway error: %s %s", resp.status_code, resp.text)
            if resp.status_code == 429:
                raise RateLimitError("Rate limit exceeded. Please try again in a moment.")
            if resp.status_code == 402:
                raise QuotaExceededError("AI credits depleted. Please add credits to continue.")
            raise GatewayError(f"AI gateway error: {resp.status_code}")

        output = resp.json()["choices"][0]["message"]["content"]
        if not isinstance(output, str):
            # refusals and tool-call turns come back with null content
            raise GatewayError("AI gateway returned no text content")

    logger.info("Generated SQL: %s", output)
    return output
