"""Outward representation of a User. The password hash is never included."""

from datetime import datetime

from pydantic import BaseModel


class UserView(BaseModel):
    user_id: str
    user_name: str
    email: str
    address: str | None = None
    image: str | None = None
    is_admin: bool = False
    is_banned: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_user(cls, user) -> "UserView":
        return cls(
            user_id=str(user.id),
            user_name=user.user_name,
            email=user.email,
            address=user.address,
            image=user.image,
            is_admin=bool(user.is_admin),
            is_banned=bool(user.is_banned),
            created_at=user.created_at,
        )
