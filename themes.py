# themes.py

# Colour themes picked by visitors. The choice is stored in the session
# (loaded on every request, saved when the visitor switches).

from typing import Dict, List

from fastapi import Request

THEME_SESSION_KEY = "cinezuva_theme"

THEMES: List[Dict[str, object]] = [
    {
        "id": "netflix",
        "name": "Netflix Red",
        "colors": {"red": "#e50914", "dark": "#0f0f0f", "card": "#1a1a1a", "text": "#e5e5e5"},
    },
    {
        "id": "ocean",
        "name": "Ocean Blue",
        "colors": {"red": "#0ea5e9", "dark": "#020617", "card": "#0f172a", "text": "#e2e8f0"},
    },
    {
        "id": "emerald",
        "name": "Emerald Green",
        "colors": {"red": "#10b981", "dark": "#022c22", "card": "#064e3b", "text": "#ecfdf5"},
    },
    {
        "id": "purple",
        "name": "Royal Purple",
        "colors": {"red": "#a855f7", "dark": "#0b0518", "card": "#1e1b4b", "text": "#f3e8ff"},
    },
    {
        "id": "gold",
        "name": "Luxury Gold",
        "colors": {"red": "#eab308", "dark": "#121212", "card": "#27272a", "text": "#fafafa"},
    },
]

DEFAULT_THEME = THEMES[0]["id"]


def get_theme(theme_id: str) -> Dict[str, object]:
    """Unknown ids fall back to the first theme."""
    for theme in THEMES:
        if theme["id"] == theme_id:
            return theme
    return THEMES[0]


def load_theme(request: Request) -> Dict[str, object]:
    return get_theme(request.session.get(THEME_SESSION_KEY, DEFAULT_THEME))


def save_theme(request: Request, theme_id: str) -> Dict[str, object]:
    theme = get_theme(theme_id)
    request.session[THEME_SESSION_KEY] = theme["id"]
    return theme
