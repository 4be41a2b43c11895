import google.generativeai as genai
from foodswipe.core.config import settings

genai.configure(api_key=settings.GEMINI_API_KEY)


def complete_with_gemini(system_prompt: str, user_message: str) -> str:
    full_prompt = f"""
{system_prompt}

User request:
\"\"\"{user_message}\"\"\"
"""

    model = genai.GenerativeModel(settings.GEMINI_MODEL)
    response = model.generate_content(full_prompt)
    return (response.text or "").strip()
