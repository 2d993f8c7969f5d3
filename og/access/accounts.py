from typing import Optional, Protocol

from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import AnonymousUser


class Account(Protocol):
    id: Optional[int]
    is_anonymous: bool

    def has_permission(self, name: str) -> bool:
        ...


class UserAccount:
    """Adapts a django user to the Account interface"""

    def __init__(self, user):
        self.user = user

    @property
    def id(self):
        return None if self.is_anonymous else self.user.pk

    @property
    def is_anonymous(self):
        return self.user is None or self.user.is_anonymous

    def has_permission(self, name):
        if self.is_anonymous or not self.user.is_active:
            return False
        return self.user.has_perm(name)


def get_account(user):
    """Django users are adapted, anything else is expected to be an Account already"""
    if user is None or isinstance(user, (AbstractBaseUser, AnonymousUser)):
        return UserAccount(user)
    return user
