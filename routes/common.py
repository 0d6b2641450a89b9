# routes/common.py

from datetime import datetime

import pytz
from fastapi import Request
from fastapi.templating import Jinja2Templates

from auth_utils import is_authenticated
from catalog import movie_link
from config import CATEGORY_LIST, COMMON_GENRES, DISPLAY_TIMEZONE, SITE_NAME, TEMPLATES_DIR
from themes import THEMES, load_theme

templates = Jinja2Templates(directory=TEMPLATES_DIR)

DISPLAY_TZ = pytz.timezone(DISPLAY_TIMEZONE)


def format_ms(timestamp_ms: int, fmt: str = "%d %b %Y, %I:%M %p") -> str:
    """Epoch millis -> local display time (IST by default)."""
    if not timestamp_ms:
        return ""
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=pytz.utc)
    return dt.astimezone(DISPLAY_TZ).strftime(fmt)


templates.env.globals["movie_link"] = movie_link
templates.env.filters["format_ms"] = format_ms


def render(request: Request, name: str, context: dict, status_code: int = 200):
    """TemplateResponse with the values every page layout needs."""
    ctx = {
        "request": request,
        "site_name": SITE_NAME,
        "categories": CATEGORY_LIST,
        "common_genres": COMMON_GENRES,
        "themes": THEMES,
        "theme": load_theme(request),
        "is_admin": is_authenticated(request),
    }
    ctx.update(context)
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
