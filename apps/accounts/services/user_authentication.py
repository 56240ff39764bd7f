"""
CPF/password sign-in.

Participants type their CPF with or without punctuation, so the lookup runs
on the normalized digits. Failed attempts are logged with a masked CPF.
"""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from django.db import transaction

from ..validators import normalize_cpf
from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()

INVALID_CREDENTIALS_MESSAGE = "Invalid CPF or password"


def mask_cpf(cpf: str) -> str:
    """``52998224725`` -> ``*******4725``"""
    return '*' * max(len(cpf) - 4, 0) + cpf[-4:]


@transaction.atomic
def authenticate_user(*, cpf: str, password: str) -> User:
    """
    Return the active user owning ``cpf`` and record the login time.

    The user row is locked while ``last_login`` is written.

    Raises:
        InvalidCredentialsError: Unknown CPF or wrong password
        InactiveAccountError: Correct password on a deactivated account
    """
    digits = normalize_cpf(cpf)
    user = User.objects.select_for_update().filter(cpf=digits).first()

    if user is None:
        # Same hashing cost as a wrong password
        User().set_password(password)
        logger.info("Login failed for unknown CPF %s", mask_cpf(digits))
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    if not user.check_password(password):
        logger.info("Login failed for user %s: wrong password", user.id)
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    if not user.is_active:
        logger.warning("Login refused for deactivated user %s", user.id)
        raise InactiveAccountError("Account is deactivated")

    update_last_login(None, user)
    return user
