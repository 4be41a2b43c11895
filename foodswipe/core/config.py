import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "freewill")
    RESTAURANT_COLLECTION = os.getenv("RESTAURANT_COLLECTION", "restaurants")

    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai")
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "models/gemini-2.5-flash")

    SECRET_KEY = os.getenv("SECRET_KEY", "secret")
    PORT = int(os.getenv("PORT", 3001))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
