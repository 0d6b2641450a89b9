# slug_utils.py

import re

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATORS = re.compile(r"[\s_-]+", re.ASCII)


def create_slug(title: str) -> str:
    """
    Turn a movie title into the URL part used for SEO links.

    "Iron Man 3!" -> "iron-man-3". Titles made only of symbols give "",
    so link builders must fall back to the movie id.
    """
    slug = (title or "").lower().strip()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")
