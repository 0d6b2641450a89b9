# catalog.py

# Filtering, search, pagination and link helpers used by the web and admin
# pages. Everything here works on lists already loaded by storage.py, except
# resolve_movie() which performs the slug -> id lookup chain.

import json
import math
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from config import (
    MOVIES_PER_PAGE,
    SITE_NAME,
    SUGGESTION_LIMIT,
    TIME_RANGES,
    TRENDING_LIMIT,
)
from models import Movie, MovieRequest
import storage

DAY_MS = 24 * 60 * 60 * 1000


@dataclass
class Page:
    items: List[Movie]
    page: int
    per_page: int
    total: int
    total_pages: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


# ---------- RESOLUTION ----------


async def resolve_movie(segment: str) -> Optional[Movie]:
    """
    Resolve "/<segment>" to a movie: slug first, then the raw id used by
    links created before slugs existed.
    """
    if not segment:
        return None
    movie = await storage.get_movie_by_slug(segment)
    if movie is None:
        movie = await storage.get_movie_by_id(segment)
    return movie


def movie_link(movie: Movie) -> str:
    return f"/{movie.slug}" if movie.slug else f"/{movie.id}"


# ---------- FILTERS ----------


def filter_by_category(movies: List[Movie], name: str) -> List[Movie]:
    return [m for m in movies if name in m.category]


def filter_by_genre(movies: List[Movie], name: str) -> List[Movie]:
    wanted = name.lower()
    return [m for m in movies if any(g.lower() == wanted for g in m.genres)]


def filter_by_tag(movies: List[Movie], tag: str) -> List[Movie]:
    # substring match on the whole tag string: "zuva" also matches "cinezuva"
    wanted = tag.lower()
    return [m for m in movies if m.seoTags and wanted in m.seoTags.lower()]


def filter_by_title(movies: List[Movie], term: str) -> List[Movie]:
    if not term:
        return list(movies)
    wanted = term.lower()
    return [m for m in movies if wanted in m.title.lower()]


def search_movies(movies: List[Movie], query: str) -> List[Movie]:
    """Search page: title, any category, or quality tag."""
    if not query:
        return []
    q = query.lower()
    return [
        m
        for m in movies
        if q in m.title.lower()
        or any(q in c.lower() for c in m.category)
        or q in m.qualityTag.lower()
    ]


def live_suggestions(movies: List[Movie], query: str, limit: int = SUGGESTION_LIMIT) -> List[Movie]:
    """Type-ahead box: title or SEO tags, stops once `limit` hits are found."""
    if not query or not query.strip():
        return []
    q = query.lower()
    hits = []
    for m in movies:
        if len(hits) >= limit:
            break
        if q in m.title.lower() or (m.seoTags and q in m.seoTags.lower()):
            hits.append(m)
    return hits


def split_tags(seo_tags: Optional[str]) -> List[str]:
    if not seo_tags:
        return []
    return [t.strip() for t in seo_tags.split(",") if t.strip()]


# ---------- PAGINATION ----------


def total_pages(count: int, per_page: int) -> int:
    return math.ceil(count / per_page) if per_page > 0 else 0


def paginate(items: List[Movie], page: int = 1, per_page: int = MOVIES_PER_PAGE) -> Page:
    page = max(page, 1)
    start = (page - 1) * per_page
    return Page(
        items=list(items[start:page * per_page]),
        page=page,
        per_page=per_page,
        total=len(items),
        total_pages=total_pages(len(items), per_page),
    )


# ---------- TRENDING CAROUSEL ----------


def trending_movies(movies: List[Movie], limit: int = TRENDING_LIMIT) -> List[Movie]:
    return [m for m in movies if m.isTrending][:limit]


def next_slide(index: int, count: int) -> int:
    if count <= 1:
        return 0
    return (index + 1) % count


# ---------- ADMIN DASHBOARD ----------


def filter_by_time(timestamp: int, time_range: str, now: Optional[int] = None) -> bool:
    days = TIME_RANGES.get(time_range)
    if days is None:
        return True
    if now is None:
        now = int(time.time() * 1000)
    return now - timestamp <= days * DAY_MS


def dashboard_stats(
    movies: List[Movie],
    requests: List[MovieRequest],
    time_range: str = "ALL",
    now: Optional[int] = None,
) -> Dict[str, object]:
    top = sorted(movies, key=lambda m: m.downloadCount, reverse=True)[:5]
    return {
        "movies_count": sum(1 for m in movies if filter_by_time(m.addedAt, time_range, now)),
        "requests_count": sum(1 for r in requests if filter_by_time(r.timestamp, time_range, now)),
        "total_downloads": sum(m.downloadCount for m in movies),
        "trending_count": sum(1 for m in movies if m.isTrending),
        "top": top,
    }


# ---------- SEO ----------


def seo_meta(movie: Movie, url: str) -> Dict[str, str]:
    """Title, meta tags and schema.org JSON-LD for a movie detail page."""
    page_title = f"Download {movie.title} ({movie.year}) {movie.qualityTag} - {SITE_NAME}"
    description = (
        f"Download {movie.title} ({movie.year}) full movie in {movie.qualityTag} "
        f"{movie.language}. {movie.description[:120]}... "
        f"Fast Google Drive Download Links on {SITE_NAME}."
    )
    keywords = (
        f"{movie.title} download, {movie.title} movie, {movie.title} {movie.year}, "
        f"{movie.language} movie download, 4k movies, {SITE_NAME.lower()}, {movie.seoTags or ''}"
    )
    schema = {
        "@context": "https://schema.org",
        "@type": "Movie",
        "name": movie.title,
        "image": movie.poster,
        "datePublished": movie.year,
        "description": movie.description,
        "genre": movie.genres,
        "inLanguage": movie.language,
        "url": url,
        "aggregateRating": {
            "@type": "AggregateRating",
            "ratingValue": "4.8",
            "ratingCount": movie.downloadCount + 100,
        },
    }
    return {
        "title": page_title,
        "description": description,
        "keywords": keywords,
        "canonical": url,
        "image": movie.poster,
        "json_ld": json.dumps(schema).replace("</", "<\\/"),
    }
