"""Wire models for authors, publishers and book series."""

from .common import Address, CatalogRecord, WireModel


class SocialMedia(WireModel):
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None


class Author(CatalogRecord):
    name: str = ""
    slug: str = ""
    biography: str | None = None
    date_of_birth: str | None = None
    date_of_death: str | None = None
    nationality: str | None = None
    website: str | None = None
    social_media: SocialMedia | None = None
    photo_url: str | None = None
    is_active: bool = True
    books_count: int = 0
    awards: list[str] | None = None
    genres: list[str] | None = None


class Publisher(CatalogRecord):
    name: str = ""
    slug: str = ""
    description: str | None = None
    website: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None
    founded_year: int | None = None
    logo_url: str | None = None
    is_active: bool = True
    books_count: int = 0
    specialties: list[str] | None = None
    imprints: list[str] | None = None


class SeriesEntry(WireModel):
    """Position of one book inside a series."""

    book_id: str
    order: int
    title: str = ""


class BookSeries(CatalogRecord):
    name: str = ""
    slug: str = ""
    description: str | None = None
    author_id: str | None = None
    publisher_id: str | None = None
    genre: str | None = None
    age_group: str | None = None
    total_books: int = 0
    is_ongoing: bool = False
    first_published_year: int | None = None
    last_published_year: int | None = None
    cover_image_url: str | None = None
    is_active: bool = True
    book_ids: list[str] | None = None
    series_order: list[SeriesEntry] | None = None
