"""Category aggregate: a named, slugged grouping of products."""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")
_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str) -> str:
    """``"Home & Garden"`` -> ``"home-garden"``."""
    return _NON_SLUG_CHARS.sub("-", text.strip().lower()).strip("-")


@storefront.aggregate
class Category:
    """A top-level grouping for products.

    Products belong to exactly one category. Removing a category removes its
    products too (see ``DeleteCategory``).
    """

    name: String(required=True, max_length=100, unique=True)
    slug: String(required=True, max_length=120, unique=True)
    created_at: DateTime()

    @invariant.post
    def slug_must_be_url_safe(self):
        if self.slug and not _SLUG_PATTERN.match(self.slug):
            raise ValidationError({"slug": ["Slug must be lowercase alphanumeric words separated by single hyphens"]})

    @classmethod
    def create(cls, name, slug=None):
        return cls(
            name=name,
            slug=slug or slugify(name),
            created_at=datetime.now(UTC),
        )
