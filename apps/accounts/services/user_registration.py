"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from ..validators import normalize_cpf
from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    cpf: str,
    password: str,
    name: str,
    phone: str = ""
) -> User:
    """
    Register a new participant account.

    Args:
        cpf: CPF, formatted or digits only
        password: User's password (will be hashed)
        name: Full name
        phone: Optional mobile phone

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If a user with this CPF already exists
    """
    cpf = normalize_cpf(cpf)

    if User.objects.filter(cpf=cpf).exists():
        raise UserRegistrationError("A user with this CPF already exists")

    try:
        user = User.objects.create_user(
            cpf=cpf,
            password=password,
            name=name,
            phone=phone,
        )
    except IntegrityError:
        raise UserRegistrationError("A user with this CPF already exists")

    logger.info("Registered user %s", user.id)
    return user
