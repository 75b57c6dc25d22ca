from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.user import User


def find_user(user_id) -> User | None:
    """Fetch a user by id, or ``None`` when there is no such user."""
    if not user_id:
        return None
    try:
        return current_domain.repository_for(User).get(str(user_id))
    except ObjectNotFoundError:
        return None
