import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

# Gemini model used by the natural-language todo parser
PARSE_TODO_MODEL = os.getenv("PARSE_TODO_MODEL", "gemini-2.5-flash")

# Comma separated; "*" allows every origin
CORS_ORIGINS: List[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]


def get_google_api_key() -> Optional[str]:
    """Gemini credential, read on every call so it can be rotated without a restart"""
    return os.getenv("GOOGLE_API_KEY") or os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")
