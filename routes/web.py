# routes/web.py

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, RedirectResponse

from catalog import (
    filter_by_category,
    filter_by_genre,
    filter_by_tag,
    live_suggestions,
    movie_link,
    paginate,
    search_movies,
    trending_movies,
)
from config import MOVIES_PER_PAGE, TRENDING_ROTATE_SECONDS
from storage import get_movies, get_site_config
from themes import save_theme
from .common import render

router = APIRouter()


# ---------- HOME ----------


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, page: int = 1):
    movies = await get_movies()
    current = paginate(movies, page, MOVIES_PER_PAGE)

    return render(
        request,
        "index.html",
        {
            "trending": trending_movies(movies),
            "rotate_seconds": TRENDING_ROTATE_SECONDS,
            "page": current,
        },
    )


# ---------- SEARCH + BROWSE ----------


def _browse(request: Request, kind: str, label: str, movies, empty_text: str):
    return render(
        request,
        "browse.html",
        {
            "kind": kind,
            "label": label,
            "movies": movies,
            "empty_text": empty_text,
            "query": label if kind == "Search" else "",
        },
    )


@router.get("/search", response_class=HTMLResponse)
async def search_page(request: Request, q: str = ""):
    results = search_movies(await get_movies(), q) if q else []
    return _browse(request, "Search", q, results, "No matches found")


@router.get("/category/{name:path}", response_class=HTMLResponse)
async def category_page(request: Request, name: str):
    movies = filter_by_category(await get_movies(), name)
    return _browse(request, "Category", name, movies, "No movies found in this category.")


@router.get("/genre/{name:path}", response_class=HTMLResponse)
async def genre_page(request: Request, name: str):
    movies = filter_by_genre(await get_movies(), name)
    return _browse(request, "Genre", name, movies, "No movies found in this genre.")


@router.get("/tag/{name:path}", response_class=HTMLResponse)
async def tag_page(request: Request, name: str):
    movies = filter_by_tag(await get_movies(), name)
    return _browse(request, "Tag", name, movies, "No movies found with this tag.")


# ---------- JSON HELPERS ----------


@router.get("/api/suggest")
async def suggest(q: str = ""):
    """Type-ahead results for the header search box."""
    if not q.strip():
        return JSONResponse({"results": []})

    hits = live_suggestions(await get_movies(), q)
    return JSONResponse(
        {
            "results": [
                {
                    "id": m.id,
                    "title": m.title,
                    "year": m.year,
                    "poster": m.poster,
                    "qualityTag": m.qualityTag,
                    "link": movie_link(m),
                }
                for m in hits
            ]
        }
    )


@router.get("/api/config")
async def site_config():
    config = await get_site_config()
    return JSONResponse(config.model_dump())


@router.get("/theme/{theme_id}")
async def switch_theme(request: Request, theme_id: str):
    save_theme(request, theme_id)
    back = request.headers.get("referer", "")
    if not back.startswith(str(request.base_url)):
        back = "/"
    return RedirectResponse(back, status_code=303)


# ---------- HEALTH ----------


@router.get("/status")
async def status():
    return {"status": "ok"}


@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"
