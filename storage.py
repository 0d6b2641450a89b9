# storage.py

# MongoDB access for the catalog.
# - Collections: movies, requests, site_config, admins.
# - Every function turns backend failures into sentinels ([], None, False)
#   and logs them; nothing raises to the routes.
# - The public movie identifier is the string field "id", Mongo's _id is
#   never returned.

import logging
import time
from typing import Awaitable, Callable, List, Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from config import RELATED_FETCH_LIMIT, RELATED_LIMIT
from db import get_db
from models import Movie, MovieRequest, SiteConfig
from slug_utils import create_slug

logger = logging.getLogger(__name__)

NO_ID = {"_id": 0}


def _now_ms() -> int:
    return int(time.time() * 1000)


def _to_movie(doc: Optional[dict]) -> Optional[Movie]:
    if not doc:
        return None
    try:
        return Movie(**doc)
    except ValidationError as e:
        logger.error("❌ Skipping malformed movie %s: %s", doc.get("id"), e)
        return None


# ---------- MOVIES ----------


async def get_movies() -> List[Movie]:
    """All movies, newest first (addedAt descending)."""
    db = get_db()
    if db is None:
        logger.error("❌ Error fetching movies: MongoDB not connected")
        return []

    try:
        cursor = db["movies"].find({}, NO_ID).sort("addedAt", -1)
        docs = [doc async for doc in cursor]
    except PyMongoError as e:
        logger.error("❌ Error fetching movies: %s", e)
        return []

    return [m for m in (_to_movie(d) for d in docs) if m is not None]


def is_slug_schema_error(exc: Exception) -> bool:
    """
    True when the backend refused a write because the target schema has no
    "slug" field (older collections with a strict $jsonSchema validator).
    """
    text = str(exc)
    details = getattr(exc, "details", None)
    if details:
        text = f"{text} {details}"
    text = text.lower()
    return "slug" in text and any(
        word in text for word in ("column", "schema", "validation")
    )


async def _write_movie(
    write: Callable[[dict], Awaitable[object]],
    movie: Movie,
    action: str,
) -> bool:
    payload = movie.to_document()
    if not payload.get("slug"):
        payload["slug"] = create_slug(movie.title)

    # Attempt 1: full payload
    try:
        await write(dict(payload))
        return True
    except PyMongoError as e:
        if not is_slug_schema_error(e):
            logger.error("❌ Error %s movie: %s", action, e)
            return False

    # Attempt 2: schema has no slug field yet
    logger.warning("⚠️ Slug field missing in DB schema, retrying %s without slug...", action)
    payload.pop("slug", None)
    try:
        await write(dict(payload))
        return True
    except PyMongoError as e:
        logger.error("❌ Error %s movie (retry): %s", action, e)
        return False


async def add_movie(movie: Movie) -> bool:
    db = get_db()
    if db is None:
        logger.error("❌ Error adding movie: MongoDB not connected")
        return False

    async def insert(payload: dict):
        return await db["movies"].insert_one(payload)

    return await _write_movie(insert, movie, "adding")


async def update_movie(movie: Movie) -> bool:
    db = get_db()
    if db is None:
        logger.error("❌ Error updating movie: MongoDB not connected")
        return False

    async def update(payload: dict):
        payload.pop("id", None)
        return await db["movies"].update_one({"id": movie.id}, {"$set": payload})

    return await _write_movie(update, movie, "updating")


async def delete_movie(movie_id: str) -> bool:
    """Delete by id. A missing id is not an error."""
    db = get_db()
    if db is None:
        logger.error("❌ Error deleting movie: MongoDB not connected")
        return False

    try:
        await db["movies"].delete_one({"id": movie_id})
        return True
    except PyMongoError as e:
        logger.error("❌ Error deleting movie: %s", e)
        return False


async def _find_movie(query: dict) -> Optional[Movie]:
    db = get_db()
    if db is None:
        return None

    try:
        doc = await db["movies"].find_one(query, NO_ID)
    except PyMongoError as e:
        logger.error("❌ Error fetching movie %s: %s", query, e)
        return None
    return _to_movie(doc)


async def get_movie_by_id(movie_id: str) -> Optional[Movie]:
    return await _find_movie({"id": movie_id})


async def get_movie_by_slug(slug: str) -> Optional[Movie]:
    return await _find_movie({"slug": slug})


async def get_related_movies(categories: List[str], current_id: str) -> List[Movie]:
    """
    Fetch a small window of other movies and keep the ones sharing a category.

    Only RELATED_FETCH_LIMIT candidates are read, so the result can hold fewer
    than RELATED_LIMIT movies even when more matches exist in the collection.
    """
    if not categories:
        return []

    db = get_db()
    if db is None:
        return []

    try:
        cursor = db["movies"].find({"id": {"$ne": current_id}}, NO_ID).limit(RELATED_FETCH_LIMIT)
        docs = [doc async for doc in cursor]
    except PyMongoError as e:
        logger.error("❌ Error fetching related movies: %s", e)
        return []

    wanted = set(categories)
    related = []
    for movie in (_to_movie(d) for d in docs):
        if movie is not None and wanted.intersection(movie.category):
            related.append(movie)
    return related[:RELATED_LIMIT]


async def increment_download_count(movie_id: str) -> bool:
    """
    Read the counter, then write counter + 1.

    Two separate round trips, no atomic $inc: concurrent clicks can lose
    an update.
    """
    db = get_db()
    if db is None:
        return False

    try:
        doc = await db["movies"].find_one({"id": movie_id}, {"_id": 0, "downloadCount": 1})
        if doc is None:
            return False
        current = doc.get("downloadCount") or 0
        await db["movies"].update_one(
            {"id": movie_id},
            {"$set": {"downloadCount": current + 1}},
        )
        return True
    except PyMongoError as e:
        logger.error("❌ Error incrementing download count: %s", e)
        return False


# ---------- SITE CONFIG ----------


async def get_site_config() -> SiteConfig:
    db = get_db()
    if db is None:
        return SiteConfig()

    try:
        doc = await db["site_config"].find_one({}, NO_ID)
    except PyMongoError as e:
        logger.error("❌ Error fetching site config: %s", e)
        return SiteConfig()

    return SiteConfig(**doc) if doc else SiteConfig()


async def save_site_config(config: SiteConfig) -> bool:
    """Update the singleton row, or create it when the collection is empty."""
    db = get_db()
    if db is None:
        logger.error("❌ Error saving config: MongoDB not connected")
        return False

    payload = {
        "howToDownloadUrl": config.howToDownloadUrl,
        "telegramUrl": config.telegramUrl,
    }
    try:
        existing = await db["site_config"].find_one({}, {"_id": 1})
        if existing:
            await db["site_config"].update_one({"_id": existing["_id"]}, {"$set": payload})
        else:
            await db["site_config"].insert_one(payload)
        return True
    except PyMongoError as e:
        logger.error("❌ Error saving config: %s", e)
        return False


# ---------- MOVIE REQUESTS ----------


async def get_requests() -> List[MovieRequest]:
    db = get_db()
    if db is None:
        return []

    try:
        cursor = db["requests"].find({}, NO_ID).sort("timestamp", -1)
        docs = [doc async for doc in cursor]
    except PyMongoError as e:
        logger.error("❌ Error fetching requests: %s", e)
        return []

    requests = []
    for doc in docs:
        try:
            requests.append(MovieRequest(**doc))
        except ValidationError as e:
            logger.error("❌ Skipping malformed request %s: %s", doc.get("id"), e)
    return requests


async def add_request(movie_name: str) -> bool:
    db = get_db()
    if db is None:
        logger.error("❌ Error adding request: MongoDB not connected")
        return False

    now = _now_ms()
    request_doc = MovieRequest(id=str(now), movieName=movie_name, timestamp=now)
    try:
        await db["requests"].insert_one(request_doc.model_dump())
        return True
    except PyMongoError as e:
        logger.error("❌ Error adding request: %s", e)
        return False


async def delete_request(request_id: str) -> bool:
    db = get_db()
    if db is None:
        return False

    try:
        await db["requests"].delete_one({"id": request_id})
        return True
    except PyMongoError as e:
        logger.error("❌ Error deleting request: %s", e)
        return False


# ---------- ADMINS ----------


async def find_admin(email: str, password: str) -> bool:
    """
    Plain equality on email and password, as stored in the admins collection.
    Passwords are not hashed.
    """
    db = get_db()
    if db is None:
        return False

    try:
        doc = await db["admins"].find_one({"email": email, "password": password}, {"_id": 1})
    except PyMongoError as e:
        logger.error("❌ Login lookup failed: %s", e)
        return False
    return doc is not None
