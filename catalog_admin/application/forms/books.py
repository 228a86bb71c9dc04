"""Forms for authors, publishers and book series."""

from typing import Any

from catalog_admin.application.schemas import Author, BookSeries, Publisher

from .base import EntityForm


class AuthorForm(EntityForm):
    record_type = Author
    label = "Author"
    create_title = "Add New Author"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "slug": "",
            "biography": "",
            "date_of_birth": "",
            "date_of_death": "",
            "nationality": "",
            "website": "",
            "photo_url": "",
            "is_active": True,
            "social_media": {"twitter": "", "facebook": "", "instagram": "", "linkedin": ""},
            "awards": [],
            "genres": [],
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Author name is required")
        return errors

    def payload(self) -> dict[str, Any]:
        data = super().payload()
        if not any((data.get("social_media") or {}).values()):
            data.pop("social_media", None)
        return data


class PublisherForm(EntityForm):
    record_type = Publisher
    label = "Publisher"
    create_title = "Add New Publisher"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "slug": "",
            "description": "",
            "website": "",
            "email": "",
            "phone": "",
            "founded_year": None,
            "logo_url": "",
            "is_active": True,
            "address": {"street": "", "city": "", "state": "", "postal_code": "", "country": ""},
            "specialties": [],
            "imprints": [],
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Publisher name is required")
        return errors

    def payload(self) -> dict[str, Any]:
        data = super().payload()
        if not any((data.get("address") or {}).values()):
            data.pop("address", None)
        for field in ("specialties", "imprints", "founded_year"):
            if not data.get(field):
                data.pop(field, None)
        return data


class BookSeriesForm(EntityForm):
    record_type = BookSeries
    label = "Book Series"
    create_title = "Add New Book Series"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "slug": "",
            "description": "",
            "author_id": "",
            "publisher_id": "",
            "genre": "",
            "age_group": "",
            "is_active": True,
            "is_ongoing": False,
            "first_published_year": None,
            "last_published_year": None,
            "cover_image_url": "",
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Series name is required")
        return errors

    def payload(self) -> dict[str, Any]:
        data = super().payload()
        for field in ("first_published_year", "last_published_year"):
            if not data.get(field):
                data.pop(field, None)
        return data
