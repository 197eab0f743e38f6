"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Date, List, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.role.role import Authority, Role
from storefront.identity.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=72)
    phone: String(max_length=30)
    birth_date: Date()
    authorities: List(content_type=String)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        users = current_domain.repository_for(User)
        if users.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email is already registered"]})

        roles = current_domain.repository_for(Role)
        authorities = command.authorities or [Authority.CLIENT.value]
        role_ids = [str(roles.ensure(authority).id) for authority in authorities]

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
            phone=command.phone,
            birth_date=command.birth_date,
            role_ids=role_ids,
        )
        users.add(user)

        logger.info("user.registered", user_id=str(user.id), authorities=list(authorities))
        return str(user.id)
