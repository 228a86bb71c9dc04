"""Form for book specifications (bibliographic details of a book product)."""

from typing import Any

from catalog_admin.application.schemas import BookSpecification

from .base import EntityForm

BOOK_FORMATS = ("hardcover", "paperback", "ebook", "audiobook")
BOOK_LANGUAGES = (
    "english",
    "hindi",
    "bengali",
    "tamil",
    "telugu",
    "marathi",
    "gujarati",
    "kannada",
    "malayalam",
    "punjabi",
)


class BookSpecificationForm(EntityForm):
    record_type = BookSpecification
    label = "Book Specification"

    def defaults(self) -> dict[str, Any]:
        return {
            "product_id": "",
            "isbn": "",
            "isbn13": "",
            "isbn10": "",
            "format": "paperback",
            "language": "english",
            "page_count": None,
            "dimensions": {"length": 0, "width": 0, "height": 0},
            "weight": None,
            "publication_date": None,
            "edition": "",
            "volume": "",
            "series_name": "",
            "series_number": None,
            "age_group": "",
            "grade_level": "",
            "subject": None,
            "board": "",
            "syllabus_year": "",
            "authors": [],
            "editors": [],
            "illustrators": [],
            "publisher": "",
            "publisher_id": "",
            "author_id": "",
            "book_series_id": "",
            "table_of_contents": "",
            "summary": "",
            "key_features": [],
            "learning_objectives": [],
            "prerequisites": "",
            "target_audience": "",
            "cover_image_url": "",
            "sample_pages": [],
            "has_digital_version": False,
            "has_audio_version": False,
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "product_id", "Product is required")
        self._require(errors, "format", "Format is required")
        self._require(errors, "language", "Language is required")
        return errors
