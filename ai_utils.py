"""
AI metadata helper for the admin "magic fill" button.
Asks Google Gemini for year, category, genres, language, description,
quality and SEO tags of a title. Best effort: any failure returns None.
"""

import json
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from config import CATEGORY_LIST, GEMINI_API_KEY, GEMINI_API_URL, GEMINI_MODEL, SITE_NAME
from models import GeneratedMovieData

logger = logging.getLogger(__name__)

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "year": {"type": "STRING"},
        "category": {"type": "STRING"},
        "genres": {"type": "ARRAY", "items": {"type": "STRING"}},
        "language": {"type": "STRING"},
        "description": {"type": "STRING"},
        "qualityTag": {"type": "STRING"},
        "seoTags": {"type": "STRING"},
    },
}


def build_prompt(title: str) -> str:
    brand = SITE_NAME.lower()
    return f"""
Generate detailed metadata for the movie titled "{title}".

Return a JSON object with:
- year: Release year (e.g., "2024")
- category: One of {json.dumps(CATEGORY_LIST)} (Pick the best fit)
- genres: An array of strings representing genres (e.g., ["Action", "Thriller", "Romance"])
- language: Main language (e.g., "Hindi")
- description: A catchy, short plot summary (max 3 sentences).
- qualityTag: "1080p" or "4K"
- seoTags: A comma-separated string of 50 highly searchable SEO tags.
  Example format: "{title} full movie, {title} download, watch {title} online, {title} 2024, {title} hdrip..."
  Include variations like "download link", "hindi dubbed", "720p", "1080p", "fast download", "{brand}", "{brand} movies".
"""


def is_available() -> bool:
    return bool(GEMINI_API_KEY)


def generate_movie_details(title: str, timeout: int = 30) -> Optional[GeneratedMovieData]:
    """
    Blocking HTTP call, run it in a threadpool from async routes.
    Returns None when no API key is configured or the call fails.
    """
    if not is_available():
        logger.warning("⚠️ GEMINI_API_KEY is missing, magic fill disabled")
        return None

    url = f"{GEMINI_API_URL}/{GEMINI_MODEL}:generateContent"
    payload = {
        "contents": [{"parts": [{"text": build_prompt(title)}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA,
        },
    }

    try:
        response = requests.post(
            url,
            json=payload,
            headers={"x-goog-api-key": GEMINI_API_KEY},
            timeout=timeout,
        )
        response.raise_for_status()
        result = response.json()
        text = result["candidates"][0]["content"]["parts"][0]["text"]
        return GeneratedMovieData(**json.loads(text))
    except requests.RequestException as e:
        logger.error("❌ Error generating movie details: %s", e)
    except (KeyError, IndexError, TypeError, ValueError, ValidationError) as e:
        logger.error("❌ Unexpected AI response for %r: %s", title, e)
    return None
