from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from og.access.accounts import UserAccount, get_account
from og.groups.factories import UserFactory


class SiteAccount:
    id = 7
    is_anonymous = False

    def has_permission(self, name):
        return name == 'groups.administer_group'


class TestGetAccount(TestCase):
    def test_wraps_django_users(self):
        user = UserFactory()
        account = get_account(user)
        self.assertIsInstance(account, UserAccount)
        self.assertEqual(account.id, user.id)
        self.assertFalse(account.is_anonymous)

    def test_wraps_anonymous(self):
        for user in (AnonymousUser(), None):
            account = get_account(user)
            self.assertTrue(account.is_anonymous)
            self.assertIsNone(account.id)
            self.assertFalse(account.has_permission('groups.administer_group'))

    def test_keeps_other_accounts(self):
        account = SiteAccount()
        self.assertIs(get_account(account), account)

    def test_keeps_wrapped_users(self):
        account = UserAccount(UserFactory())
        self.assertIs(get_account(account), account)
