"""User registration and profile updates: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.passwords import get_hasher
from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a user account; the password arrives in plain text and is hashed here."""

    user_name: String(required=True, max_length=100)
    email: String(required=True, max_length=100)
    password: String(required=True, max_length=100)
    address: String(max_length=255)
    image: String(max_length=500)


@storefront.command(part_of="User")
class UpdateUser:
    user_id: Identifier(required=True)
    user_name: String(max_length=100)
    password: String(max_length=100)
    address: String(max_length=255)
    image: String(max_length=500)


@storefront.command_handler(part_of=User)
class UserAccountHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        email = command.email.lower()

        existing = repo._dao.query.filter(email=email).all().items
        if existing:
            raise ValidationError({"email": ["A user with this email already exists"]})

        user = User.register(
            user_name=command.user_name,
            email=email,
            password_hash=get_hasher().hash(command.password),
            address=command.address,
            image=command.image,
        )
        repo.add(user)
        logger.info("user_registered", user_id=str(user.id))
        return str(user.id)

    @handle(UpdateUser)
    def update_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        password_hash = get_hasher().hash(command.password) if command.password else None
        user.update_profile(
            user_name=command.user_name,
            password_hash=password_hash,
            address=command.address,
            image=command.image,
        )
        repo.add(user)
        return str(user.id)
