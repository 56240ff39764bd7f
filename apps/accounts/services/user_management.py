"""User administration service."""

import logging
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from ..models import UserRole
from .exceptions import (
    UserNotFoundError,
    RoleChangeNotAllowedError,
    CannotDeleteSelfError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


def get_user_by_id(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")


@transaction.atomic
def update_user(*, user_id: UUID, updated_by: User, **fields) -> User:
    """
    Update profile fields of a user.

    Only administrators may change ``role`` or ``is_active``. Promoting a user
    to admin also grants Django admin site access.

    Raises:
        UserNotFoundError: If user doesn't exist
        RoleChangeNotAllowedError: If a non-admin changes role or status
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    privileged = {'role', 'is_active'} & fields.keys()
    if privileged and not updated_by.is_admin:
        raise RoleChangeNotAllowedError("Only administrators can change role or status")

    password = fields.pop('password', None)
    for field, value in fields.items():
        setattr(user, field, value)
    if 'role' in fields:
        user.is_staff = fields['role'] == UserRole.ADMIN
    if password:
        user.set_password(password)

    user.save()
    return user


@transaction.atomic
def delete_user(*, user_id: UUID, deleted_by: User) -> None:
    """Delete a user; vouchers and raffle numbers cascade."""
    user = get_user_by_id(user_id=user_id)
    if user.id == deleted_by.id:
        raise CannotDeleteSelfError("Administrators cannot delete their own account")

    logger.info("User %s deleted by %s", user.id, deleted_by.id)
    user.delete()
