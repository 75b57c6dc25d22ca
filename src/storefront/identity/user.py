"""User aggregate: a registered shopper or administrator."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, String

from storefront.domain import storefront


@storefront.aggregate
class User:
    """A person who can place orders.

    ``password`` only ever holds a one-way hash; it is never copied into a
    response. Orders reference a user by id and never modify it.
    """

    user_name: String(required=True, max_length=100)
    email: String(required=True, max_length=100, unique=True)
    password: String(required=True, max_length=255)
    address: String(max_length=255)
    image: String(max_length=500)
    is_admin: Boolean(default=False)
    is_banned: Boolean(default=False)
    created_at: DateTime()

    @classmethod
    def register(cls, user_name, email, password_hash, address=None, image=None):
        return cls(
            user_name=user_name,
            email=email.lower(),
            password=password_hash,
            address=address or "",
            image=image or "",
            created_at=datetime.now(UTC),
        )

    def update_profile(self, user_name=None, password_hash=None, address=None, image=None):
        """Apply a partial update; ``None`` leaves a field as it is."""
        if user_name is not None:
            self.user_name = user_name
        if password_hash is not None:
            self.password = password_hash
        if address is not None:
            self.address = address
        if image is not None:
            self.image = image
