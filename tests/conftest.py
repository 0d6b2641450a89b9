"""
Pytest fixtures for the catalog tests.

FakeDatabase mimics the small part of motor's async API that storage.py
uses (find/sort/limit, find_one, insert_one, update_one, delete_one) and is
installed as db.mongo_db so get_db() returns it.
"""
import copy
import itertools
from types import SimpleNamespace

import pytest

import db


def _matches(doc, query):
    for key, expected in (query or {}).items():
        if isinstance(expected, dict) and "$ne" in expected:
            if doc.get(key) == expected["$ne"]:
                return False
        elif doc.get(key) != expected:
            return False
    return True


def _project(doc, projection):
    if not projection:
        return copy.deepcopy(doc)
    include = [k for k, v in projection.items() if v and k != "_id"]
    if include:
        out = {k: copy.deepcopy(doc[k]) for k in include if k in doc}
    else:
        out = {k: copy.deepcopy(v) for k, v in doc.items() if k != "_id"}
    if projection.get("_id", 1) and "_id" in doc:
        out["_id"] = doc["_id"]
    return out


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d.get(key, 0), reverse=direction < 0)
        return self

    def limit(self, n):
        self._docs = self._docs[:n]
        return self

    def __aiter__(self):
        self._iter = iter(self._docs)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration

    async def to_list(self, length=None):
        return list(self._docs if length is None else self._docs[:length])


class FakeCollection:
    _ids = itertools.count(1)

    def __init__(self):
        self.docs = []
        self.errors = {}
        self.calls = []

    def fail(self, method, *errors):
        """Queue exceptions raised by the next calls of `method`."""
        self.errors.setdefault(method, []).extend(errors)

    def _maybe_fail(self, method):
        self.calls.append(method)
        pending = self.errors.get(method)
        if pending:
            raise pending.pop(0)

    def find(self, query=None, projection=None):
        self._maybe_fail("find")
        return FakeCursor([_project(d, projection) for d in self.docs if _matches(d, query)])

    async def find_one(self, query=None, projection=None):
        self._maybe_fail("find_one")
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None

    async def insert_one(self, doc):
        self._maybe_fail("insert_one")
        stored = copy.deepcopy(doc)
        stored.setdefault("_id", next(self._ids))
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def update_one(self, query, update):
        self._maybe_fail("update_one")
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(copy.deepcopy(update.get("$set", {})))
                for key, amount in update.get("$inc", {}).items():
                    doc[key] = doc.get(key, 0) + amount
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query):
        self._maybe_fail("delete_one")
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_db(monkeypatch):
    database = FakeDatabase()
    monkeypatch.setattr(db, "mongo_db", database)
    return database


@pytest.fixture
def no_db(monkeypatch):
    monkeypatch.setattr(db, "mongo_db", None)


def make_movie_doc(i, **overrides):
    doc = {
        "id": f"id-{i}",
        "slug": f"movie-{i}",
        "title": f"Movie {i}",
        "poster": f"https://img.example.com/{i}.jpg",
        "screenshots": [],
        "category": ["Bollywood"],
        "genres": ["Action"],
        "year": "2024",
        "language": "Hindi",
        "description": f"Plot of movie {i}",
        "trailerUrl": "",
        "qualityTag": "1080p",
        "downloadLinks": [{"quality": "720p", "size": "1.2 GB", "url": f"https://dl.example.com/{i}"}],
        "addedAt": 1_700_000_000_000 + i,
        "isTrending": False,
        "seoTags": f"movie {i}, cinezuva",
        "downloadCount": 0,
    }
    doc.update(overrides)
    if doc["slug"] is None:
        del doc["slug"]
    return doc


@pytest.fixture
def sample_movies():
    """Three movies covering categories, genres, tags and the legacy no-slug case."""
    return [
        make_movie_doc(
            1,
            id="abc123",
            slug="dune-2",
            title="Dune 2",
            category=["Hollywood", "Dual Audio"],
            genres=["Sci-Fi", "Adventure"],
            qualityTag="4K",
            seoTags="dune 2 download, cinezuva, cinezuva movies",
            isTrending=True,
            trendingPoster="https://img.example.com/dune-wide.jpg",
            addedAt=1_700_000_000_300,
        ),
        make_movie_doc(
            2,
            id="def456",
            slug="pathaan",
            title="Pathaan",
            category=["Bollywood", "Hindi Dubbed"],
            genres=["Action", "Thriller"],
            seoTags="pathaan full movie, srk",
            addedAt=1_700_000_000_200,
            downloadCount=7,
        ),
        make_movie_doc(
            3,
            id="legacy789",
            slug=None,
            title="Old Horror Night",
            category=["Hollywood"],
            genres=["Horror"],
            qualityTag="720p",
            seoTags=None,
            addedAt=1_700_000_000_100,
        ),
    ]


@pytest.fixture
def movie_factory():
    return make_movie_doc


@pytest.fixture
def seeded_db(fake_db, sample_movies):
    fake_db["movies"].docs.extend(copy.deepcopy(sample_movies))
    return fake_db
