"""Editable form models behind the create/edit dialogs.

A form keeps a local working copy of one record (``data``) keyed by Python
field names. It never talks to the backend itself: ``submit`` hands the
normalised payload to a callback supplied by the screen.
"""

import copy
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic.alias_generators import to_snake

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[dict[str, Any]], Awaitable[Any]]

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """``"Harry Potter & Co"`` -> ``"harry-potter-co"``."""
    slug = _SLUG_STRIP_RE.sub("", name.lower())
    return _WHITESPACE_RE.sub("-", slug)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def to_number(value: Any) -> float | None:
    """Read a numeric input, returning None for blanks and non-numbers."""
    if value is None or isinstance(value, bool) or is_blank(value):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _known_key(key: str, group: Mapping[str, Any]) -> str:
    """``postalCode`` -> ``postal_code`` when the group has that key."""
    snake = to_snake(key)
    return snake if snake in group else key


def _snake_keys(item: Any) -> Any:
    if isinstance(item, Mapping):
        return {to_snake(k): v for k, v in item.items()}
    return item


class EntityForm(ABC):
    """Base class for entity forms.

    Subclasses declare the record model, a display label and the default
    values of a new record, and implement ``check`` with their rules.
    """

    record_type: ClassVar[type[BaseModel]]
    label: ClassVar[str]
    create_title: ClassVar[str | None] = None

    def __init__(self, record: BaseModel | None = None):
        self.record = record
        self.errors: dict[str, str] = {}
        self.data: dict[str, Any] = self.defaults()
        if record is not None:
            self._seed(record.model_dump())

    @abstractmethod
    def defaults(self) -> dict[str, Any]:
        """Field values of a brand-new record (a fresh dict on every call)."""

    def check(self) -> dict[str, str]:
        """Return inline error messages keyed by field name."""
        return {}

    # ── State ────────────────────────────────────────────────────────

    @property
    def is_edit(self) -> bool:
        return self.record is not None

    @property
    def mode(self) -> str:
        return "edit" if self.is_edit else "create"

    @property
    def record_id(self) -> str | None:
        return getattr(self.record, "id", None)

    @property
    def title(self) -> str:
        if self.is_edit:
            return f"Edit {self.label}"
        return self.create_title or f"Add {self.label}"

    # ── Editing ──────────────────────────────────────────────────────

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.data:
            raise KeyError(f"{type(self).__name__} has no field '{name}'")
        self.data[name] = value
        self.errors.pop(name, None)

    def set_nested(self, group: str, key: str, value: Any) -> None:
        """Update one key of a grouped field (address, contact, ...)."""
        if group not in self.data:
            raise KeyError(f"{type(self).__name__} has no field '{group}'")
        self.data[group] = {**(self.data[group] or {}), key: value}
        self.errors.pop(group, None)
        self.errors.pop(key, None)

    def apply(self, values: Mapping[str, Any]) -> None:
        """Set several fields at once.

        Keys may be Python names or wire aliases; unknown keys and ``None``
        values are skipped. Grouped fields are merged key by key and the
        keys of list items (order lines, set items) become Python names.
        """
        aliases = {
            info.alias: name
            for name, info in self.record_type.model_fields.items()
            if info.alias
        }
        for key, value in values.items():
            name = key if key in self.data else aliases.get(key)
            if name is None or name not in self.data or value is None:
                continue
            current = self.data[name]
            if isinstance(current, dict) and isinstance(value, Mapping):
                nested = {_known_key(k, current): v for k, v in value.items() if v is not None}
                self.set_field(name, {**current, **nested})
            elif isinstance(value, list):
                self.set_field(name, [_snake_keys(item) for item in value])
            else:
                self.set_field(name, value)

    def add_to_list(self, field: str, value: str) -> bool:
        """Append a trimmed value unless it is blank or already present."""
        item = value.strip()
        current = list(self.data.get(field) or [])
        if not item or item in current:
            return False
        self.set_field(field, [*current, item])
        return True

    def remove_from_list(self, field: str, value: str) -> None:
        current = self.data.get(field) or []
        self.set_field(field, [item for item in current if item != value])

    def generate_slug(self) -> str:
        slug = slugify(self.data.get("name") or "")
        self.set_field("slug", slug)
        return slug

    # ── Submission ───────────────────────────────────────────────────

    def validate(self) -> bool:
        self.errors = self.check()
        return not self.errors

    def payload(self) -> dict[str, Any]:
        return copy.deepcopy(self.data)

    async def submit(self, on_submit: SubmitCallback) -> bool:
        """Validate, then hand the payload to ``on_submit``.

        Returns False without calling back when validation fails. Errors
        raised by the callback propagate to the caller.
        """
        if not self.validate():
            logger.debug("%s rejected: %s", type(self).__name__, sorted(self.errors))
            return False
        await on_submit(self.payload())
        return True

    # ── Internals ────────────────────────────────────────────────────

    def _seed(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            if name not in self.data or value is None:
                continue
            current = self.data[name]
            if isinstance(current, dict) and isinstance(value, Mapping):
                self.data[name] = {
                    **current,
                    **{k: v for k, v in value.items() if v is not None},
                }
            else:
                self.data[name] = value

    def _require(self, errors: dict[str, str], field: str, message: str) -> None:
        if is_blank(self.data.get(field)):
            errors[field] = message
