from functools import lru_cache

from openai import OpenAI
from foodswipe.core.config import settings


@lru_cache(maxsize=1)
def get_openai_client() -> OpenAI:
    # built on first use; OpenAI() refuses to construct without an API key
    return OpenAI(api_key=settings.OPENAI_API_KEY)


def complete_with_openai(system_prompt: str, user_message: str) -> str:
    completion = get_openai_client().chat.completions.create(
        model=settings.OPENAI_MODEL,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ],
    )
    return completion.choices[0].message.content
