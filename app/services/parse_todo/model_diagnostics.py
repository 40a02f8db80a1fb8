"""Logs the Gemini models an API key can use, for when the configured model is not found"""
import logging

from google import genai

logger = logging.getLogger(__name__)

GENERATE_CONTENT = "generateContent"


async def log_available_models(api_key: str) -> None:
    """Diagnostics only: every failure here is logged and swallowed"""
    logger.info("Model not found. Fetching available models...")
    try:
        client = genai.Client(api_key=api_key)
        compatible = []
        async for model in await client.aio.models.list():
            actions = model.supported_actions or []
            supported = GENERATE_CONTENT in actions
            logger.info(f"  {'[ok]' if supported else '[--]'} {model.name} - {model.display_name or 'N/A'}")
            if supported:
                compatible.append((model.name or "").replace("models/", ""))

        logger.info("Compatible models for generateContent: " + ", ".join(compatible))
    except Exception as e:
        logger.error(f"Error fetching models list: {e}")
