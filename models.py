from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class DownloadLink(BaseModel):
    quality: str = "Download Link"  # button text, e.g. "720p"
    size: str = ""
    url: str = ""


class Movie(BaseModel):
    id: str
    title: str
    slug: Optional[str] = None  # missing on records created before SEO urls
    poster: str = ""
    screenshots: List[str] = Field(default_factory=list)
    category: List[str] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    year: str = ""
    language: str = ""  # comma-joined, e.g. "Hindi, English"
    description: str = ""
    trailerUrl: str = ""
    qualityTag: str = ""
    downloadLinks: List[DownloadLink] = Field(default_factory=list)
    addedAt: int = 0  # epoch millis
    isTrending: bool = False
    trendingPoster: Optional[str] = None
    seoTags: Optional[str] = None
    downloadCount: int = 0

    @field_validator("screenshots", "category", "genres", "downloadLinks", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("year", "poster", "language", "description", "trailerUrl", "qualityTag", mode="before")
    @classmethod
    def _as_text(cls, value):
        return "" if value is None else str(value)

    @field_validator("downloadCount", "addedAt", mode="before")
    @classmethod
    def _null_number(cls, value):
        return 0 if value is None else value

    @field_validator("isTrending", mode="before")
    @classmethod
    def _null_flag(cls, value):
        return bool(value)

    @property
    def languages(self) -> List[str]:
        return [lang.strip() for lang in self.language.split(",") if lang.strip()]

    def cleaned(self) -> "Movie":
        """Copy without blank screenshots and download links that have no url."""
        return self.model_copy(
            update={
                "screenshots": [s for s in self.screenshots if s.strip()],
                "downloadLinks": [link for link in self.downloadLinks if link.url.strip()],
                "trendingPoster": self.trendingPoster if self.isTrending else None,
            }
        )

    def to_document(self) -> dict:
        return self.model_dump(exclude_none=True)


class MovieRequest(BaseModel):
    id: str
    movieName: str
    timestamp: int


class SiteConfig(BaseModel):
    howToDownloadUrl: str = ""
    telegramUrl: str = ""

    @field_validator("howToDownloadUrl", "telegramUrl", mode="before")
    @classmethod
    def _null_url(cls, value):
        return value or ""


class GeneratedMovieData(BaseModel):
    """Best-effort metadata guessed by the AI helper for a title."""

    year: str = ""
    category: str = ""
    genres: List[str] = Field(default_factory=list)
    language: str = ""
    description: str = ""
    qualityTag: str = ""
    seoTags: str = ""

    @field_validator("year", mode="before")
    @classmethod
    def _year_text(cls, value):
        return "" if value is None else str(value)
