# foodswipe/services/suggestion_service.py
"""
Free-text restaurant suggestions.

The whole catalogue (name, region, details) is handed to the configured LLM
provider as context, and the model's answer is returned as plain text.
"""

import logging
from typing import Any, Dict, List

from foodswipe.core.config import settings
from foodswipe.llm.gemini_client import complete_with_gemini
from foodswipe.llm.openai_client import complete_with_openai

logger = logging.getLogger(__name__)

PROVIDERS = {
    "openai": complete_with_openai,
    "gemini": complete_with_gemini,
}


class SuggestionError(Exception):
    """The LLM provider could not produce a suggestion."""


def build_catalogue_prompt(restaurants: List[Dict[str, Any]]) -> str:
    restaurant_list = "\n".join(
        f"{r.get('restaurant_name')} in {r.get('region')}: {r.get('details')}"
        for r in restaurants
    )
    return (
        "You are a helpful assistant that suggests restaurants based on user queries. "
        f"Here is a list of available restaurants:\n{restaurant_list}\n\n"
        "Based on the user's request, suggest the best matching restaurant from the list "
        "and explain why. If no restaurants match, say so."
    )


def suggest_restaurant(message: str, restaurants: List[Dict[str, Any]], provider: str = None) -> str:
    provider = (provider or settings.LLM_PROVIDER or "openai").lower()
    complete = PROVIDERS.get(provider)
    if complete is None:
        logger.error("Unknown LLM provider %r", provider)
        raise SuggestionError(f"Unknown LLM provider: {provider}")

    try:
        answer = complete(build_catalogue_prompt(restaurants), message)
    except Exception as e:
        logger.exception("%s completion failed", provider)
        raise SuggestionError(str(e)) from e

    if not answer:
        logger.warning("%s returned an empty answer", provider)
        raise SuggestionError(f"{provider} returned an empty answer")
    return answer
