# routes/admin.py

import asyncio
import time
from typing import List, Optional
from urllib.parse import quote_plus
from uuid import uuid4

from fastapi import APIRouter, Request, Form, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from ai_utils import generate_movie_details, is_available as ai_available
from auth_utils import is_authenticated
from catalog import dashboard_stats, filter_by_title, paginate
from config import (
    ADMIN_ITEMS_PER_PAGE,
    CATEGORY_LIST,
    GENRE_LIST,
    LANGUAGE_LIST,
    QUALITY_TAGS,
    TIME_RANGES,
)
from models import DownloadLink, Movie, SiteConfig
from slug_utils import create_slug
from storage import (
    add_movie,
    delete_movie,
    delete_request,
    get_movie_by_id,
    get_movies,
    get_requests,
    get_site_config,
    save_site_config,
    update_movie,
)
from video_utils import get_youtube_embed_url
from .common import render

router = APIRouter()

TABS = ("dashboard", "movies", "requests", "settings")


def _redirect(tab: str, message: str = "") -> RedirectResponse:
    url = f"/admin?tab={tab}"
    if message:
        url += f"&message={quote_plus(message)}"
    return RedirectResponse(url, status_code=303)


def _empty_form() -> dict:
    return {
        "id": "",
        "title": "",
        "slug": "",
        "poster": "",
        "year": time.strftime("%Y"),
        "description": "",
        "trailerUrl": "",
        "qualityTag": "1080p",
        "isTrending": False,
        "trendingPoster": "",
        "seoTags": "",
        "genres": [],
        "languages": ["Hindi"],
        "category": ["Bollywood"],
        "screenshots": [""],
        "downloadLinks": [DownloadLink()],
    }


def _form_from_movie(movie: Movie) -> dict:
    return {
        "id": movie.id,
        "title": movie.title,
        "slug": movie.slug or create_slug(movie.title),
        "poster": movie.poster,
        "year": movie.year,
        "description": movie.description,
        "trailerUrl": movie.trailerUrl,
        "qualityTag": movie.qualityTag,
        "isTrending": movie.isTrending,
        "trendingPoster": movie.trendingPoster or "",
        "seoTags": movie.seoTags or "",
        "genres": movie.genres,
        "languages": movie.languages or ["Hindi"],
        "category": movie.category or ["Bollywood"],
        "screenshots": movie.screenshots or [""],
        "downloadLinks": movie.downloadLinks or [DownloadLink()],
    }


# ---------- DASHBOARD ----------


@router.get("/admin", response_class=HTMLResponse)
async def admin_dashboard(
    request: Request,
    tab: str = "dashboard",
    time_range: str = Query("ALL", alias="range"),
    q: str = "",
    page: int = 1,
    edit: str = "",
    message: str = "",
):
    if not is_authenticated(request):
        return RedirectResponse("/login", status_code=303)

    if tab not in TABS:
        tab = "dashboard"
    if time_range not in TIME_RANGES:
        time_range = "ALL"

    movies, requests, config = await asyncio.gather(
        get_movies(), get_requests(), get_site_config()
    )

    form = _empty_form()
    if edit:
        editing = next((m for m in movies if m.id == edit), None)
        if editing is not None:
            form = _form_from_movie(editing)
            tab = "movies"

    listing = paginate(filter_by_title(movies, q.strip()), page, ADMIN_ITEMS_PER_PAGE)

    return render(
        request,
        "admin.html",
        {
            "tab": tab,
            "time_range": time_range,
            "time_ranges": list(TIME_RANGES),
            "stats": dashboard_stats(movies, requests, time_range),
            "q": q,
            "listing": listing,
            "requests": requests,
            "config": config,
            "form": form,
            "preview_url": get_youtube_embed_url(form["trailerUrl"]),
            "message": message,
            "ai_enabled": ai_available(),
            "all_categories": CATEGORY_LIST,
            "all_genres": GENRE_LIST,
            "all_languages": LANGUAGE_LIST,
            "quality_tags": QUALITY_TAGS,
        },
    )


# ---------- MOVIES: CREATE / UPDATE / DELETE ----------


@router.post("/admin/movies")
async def admin_save_movie(
    request: Request,
    editing_id: str = Form(""),
    title: str = Form(""),
    slug: str = Form(""),
    poster: str = Form(""),
    year: str = Form(""),
    description: str = Form(""),
    trailer_url: str = Form(""),
    quality_tag: str = Form("1080p"),
    is_trending: bool = Form(False),
    trending_poster: str = Form(""),
    seo_tags: str = Form(""),
    genres: List[str] = Form(default=[]),
    languages: List[str] = Form(default=[]),
    categories: List[str] = Form(default=[]),
    screenshots: List[str] = Form(default=[]),
    link_quality: List[str] = Form(default=[]),
    link_size: List[str] = Form(default=[]),
    link_url: List[str] = Form(default=[]),
):
    """
    Create a movie, or update it when editing_id is set.
    addedAt and downloadCount are carried over from the stored record.
    """
    if not is_authenticated(request):
        return RedirectResponse("/login", status_code=303)

    if not title.strip():
        return _redirect("movies", "Please enter title!")

    existing: Optional[Movie] = None
    if editing_id:
        existing = await get_movie_by_id(editing_id)

    links = [
        DownloadLink(
            quality=quality or "Download Link",
            size=link_size[i] if i < len(link_size) else "",
            url=link_url[i] if i < len(link_url) else "",
        )
        for i, quality in enumerate(link_quality)
    ]

    now_ms = int(time.time() * 1000)
    movie = Movie(
        id=editing_id or str(uuid4()),
        title=title.strip(),
        slug=slug.strip() or create_slug(title),
        poster=poster.strip(),
        year=year.strip(),
        description=description,
        trailerUrl=trailer_url.strip(),
        qualityTag=quality_tag,
        isTrending=is_trending,
        trendingPoster=trending_poster.strip() or None,
        seoTags=seo_tags,
        genres=genres,
        language=", ".join(languages),
        category=categories,
        screenshots=screenshots,
        downloadLinks=links,
        addedAt=existing.addedAt if existing else now_ms,
        downloadCount=existing.downloadCount if existing else 0,
    ).cleaned()

    if editing_id:
        ok = await update_movie(movie)
    else:
        ok = await add_movie(movie)

    if not ok:
        return _redirect("movies", "Failed to save movie to database.")
    return _redirect("movies", "Movie saved successfully ✅")


@router.post("/admin/movies/{movie_id}/delete")
async def admin_delete_movie(request: Request, movie_id: str):
    if not is_authenticated(request):
        return RedirectResponse("/login", status_code=303)

    if await delete_movie(movie_id):
        return _redirect("movies", "Movie deleted successfully")
    return _redirect("movies", "Failed to delete movie")


# ---------- AI MAGIC FILL ----------


@router.post("/admin/magic-fill")
async def admin_magic_fill(request: Request, title: str = Form("")):
    if not is_authenticated(request):
        return JSONResponse({"success": False, "error": "Unauthorized"}, status_code=401)

    if not title.strip():
        return JSONResponse({"success": False, "error": "Please enter title!"}, status_code=400)

    data = await run_in_threadpool(generate_movie_details, title.strip())
    if data is None:
        return JSONResponse({"success": False, "error": "AI Generation Failed."})

    return JSONResponse(
        {
            "success": True,
            "data": data.model_dump(),
            "slug": create_slug(title),
        }
    )


# ---------- REQUESTS ----------


@router.post("/admin/requests/{request_id}/delete")
async def admin_delete_request(request: Request, request_id: str):
    if not is_authenticated(request):
        return RedirectResponse("/login", status_code=303)

    if await delete_request(request_id):
        return _redirect("requests")
    return _redirect("requests", "Failed to delete request")


# ---------- SETTINGS ----------


@router.post("/admin/settings")
async def admin_save_settings(
    request: Request,
    how_to_download_url: str = Form(""),
    telegram_url: str = Form(""),
):
    if not is_authenticated(request):
        return RedirectResponse("/login", status_code=303)

    config = SiteConfig(
        howToDownloadUrl=how_to_download_url.strip(),
        telegramUrl=telegram_url.strip(),
    )
    if await save_site_config(config):
        return _redirect("settings", "Settings Saved to Cloud!")
    return _redirect("settings", "Failed to save settings! Please try again.")
