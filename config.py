import logging
import os

# Paths
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATES_DIR = os.path.join(BASE_DIR, "templates")
STATIC_DIR = os.path.join(BASE_DIR, "static")

# Site
SITE_NAME = os.getenv("SITE_NAME", "Cinezuva")
SESSION_SECRET = os.getenv("SESSION_SECRET", "change-this-secret")
PORT = int(os.getenv("PORT", "8000"))

# MongoDB settings
MONGO_URI = os.getenv("MONGO_URI", "")
MONGO_DB = os.getenv("MONGO_DB", "cinezuva")

# Google Gemini (admin "magic fill"); feature is disabled when the key is empty
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL",
    "https://generativelanguage.googleapis.com/v1beta/models",
)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# Catalog
CATEGORY_LIST = [
    "Bollywood",
    "Hollywood",
    "South",
    "Web Series",
    "Dual Audio",
    "18+",
    "Tv Show",
    "K-Drama",
    "Anime",
]

GENRE_LIST = [
    "Action", "Adventure", "Animation", "Biography", "Comedy", "Crime",
    "Documentary", "Drama", "Family", "Fantasy", "Film-Noir", "History",
    "Horror", "Music", "Musical", "Mystery", "Romance", "Sci-Fi",
    "Short", "Sport", "Thriller", "War", "Western", "18+", "Erotic",
    "Psychological", "Supernatural", "Superhero", "Zombie", "Survival",
]

LANGUAGE_LIST = [
    "Hindi", "Tamil", "English", "Telugu", "Kannada", "Malayalam", "Bengali",
    "Marathi", "Punjabi", "Gujarati", "Urdu", "Bhojpuri", "Korean", "Japanese",
    "Chinese", "Spanish", "French", "Russian", "German", "Thai", "Indonesian",
]

# Shortcut genres shown on the home page
COMMON_GENRES = ["Action", "Thriller", "Romance", "Comedy", "Drama", "Horror", "Sci-Fi"]

QUALITY_TAGS = ["1080p", "4K", "720p", "480p", "HDRip", "WEB-DL"]

MOVIES_PER_PAGE = 36
ADMIN_ITEMS_PER_PAGE = 20

RELATED_FETCH_LIMIT = 10
RELATED_LIMIT = 6

TRENDING_LIMIT = 5
TRENDING_ROTATE_SECONDS = 6

SUGGESTION_LIMIT = 6

# Admin dashboard time filters (days, None = everything)
TIME_RANGES = {
    "1W": 7,
    "1M": 30,
    "3M": 90,
    "1Y": 365,
    "ALL": None,
}

# Request timestamps are displayed in this zone
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "Asia/Kolkata")
