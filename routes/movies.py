# routes/movies.py
# Must be included last: "/{slug}" catches every single-segment path.

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from catalog import resolve_movie, seo_meta, split_tags
from storage import (
    get_movie_by_id,
    get_related_movies,
    get_site_config,
    increment_download_count,
)
from video_utils import get_youtube_embed_url
from .common import render

router = APIRouter()


# ---------- DOWNLOAD GATE ----------


@router.get("/go/{movie_id}/{link_index}")
async def movie_download(movie_id: str, link_index: str):
    """
    Count the click, then send the visitor to the chosen download link.
    """
    movie = await get_movie_by_id(movie_id)
    index = int(link_index) if link_index.isdecimal() else -1
    if not movie or not 0 <= index < len(movie.downloadLinks):
        return RedirectResponse(url="/", status_code=303)

    await increment_download_count(movie.id)
    return RedirectResponse(url=movie.downloadLinks[index].url, status_code=302)


# ---------- MOVIE DETAIL (SEO URL) ----------


@router.get("/{slug}", response_class=HTMLResponse)
async def movie_detail(request: Request, slug: str):
    """
    /<slug> for SEO links, /<id> for links created before slugs existed.
    """
    movie = await resolve_movie(slug)
    config = await get_site_config()

    if movie is None:
        return render(
            request,
            "movie_detail.html",
            {"movie": None, "config": config},
            status_code=404,
        )

    related = await get_related_movies(movie.category, movie.id)
    return render(
        request,
        "movie_detail.html",
        {
            "movie": movie,
            "config": config,
            "related": related,
            "tags": split_tags(movie.seoTags),
            "embed_url": get_youtube_embed_url(movie.trailerUrl),
            "meta": seo_meta(movie, str(request.url)),
        },
    )


# ---------- UNKNOWN PATHS ----------


@router.get("/{full_path:path}")
async def fallback(full_path: str):
    return RedirectResponse(url="/", status_code=303)
