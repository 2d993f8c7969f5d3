from django.conf import settings
from django.contrib.auth.models import AnonymousUser, Permission
from django.test import TestCase, override_settings

from og.access.policies import AccessResult
from og.access.resolver import access_resolver, create_capability, is_strict, resolve, resolve_create
from og.groups import roles
from og.groups.factories import OgRoleFactory, UserFactory
from og.groups.membership import membership_manager
from og.groups.models import MembershipState
from og.groups.registry import GROUP_CONTENT, registry
from og.tests.host.factories import ArticleFactory, ClubFactory, CommentFactory, CommunityFactory, PostFactory

ALLOWED = AccessResult.ALLOWED
FORBIDDEN = AccessResult.FORBIDDEN
NEUTRAL = AccessResult.NEUTRAL


class FakeAccount:
    """Bare account, with capabilities given by name"""

    def __init__(self, id=None, capabilities=()):
        self.id = id
        self.is_anonymous = id is None
        self.capabilities = set(capabilities)

    def has_permission(self, name):
        return name in self.capabilities


def grant_administer_group(user):
    user.user_permissions.add(Permission.objects.get(codename='administer_group', content_type__app_label='groups'))
    # permissions are cached on the instance
    return type(user).objects.get(pk=user.pk)


class TestResolveGroup(TestCase):
    def setUp(self):
        self.owner = UserFactory()
        self.member = UserFactory()
        self.user = UserFactory()
        self.club = ClubFactory(owner=self.owner)
        self.membership = membership_manager.create_membership(self.club, self.member)

    def test_owner_has_full_access(self):
        self.assertEqual(resolve('update', self.club, self.owner), ALLOWED)
        self.assertEqual(resolve('delete', self.club, self.owner), ALLOWED)

    @override_settings(OG_GROUP_MANAGER_FULL_ACCESS=False)
    def test_owner_without_full_access_is_a_plain_member(self):
        self.assertEqual(resolve('update', self.club, self.owner), NEUTRAL)

    def test_member_needs_group_permission(self):
        self.assertEqual(resolve('update', self.club, self.member), NEUTRAL)
        self.membership.add_role(OgRoleFactory(name=roles.ADMINISTRATOR, permissions=['update group']))
        self.assertEqual(resolve('update', self.club, self.member), ALLOWED)
        self.assertEqual(resolve('delete', self.club, self.member), NEUTRAL)

    def test_blocked_member_loses_permissions(self):
        self.membership.add_role(OgRoleFactory(name=roles.ADMINISTRATOR, permissions=['update group']))
        self.membership.state = MembershipState.BLOCKED
        self.membership.save()
        self.assertEqual(resolve('update', self.club, self.member), NEUTRAL)

    def test_view_is_not_gated(self):
        self.assertEqual(resolve('view', self.club, self.owner), NEUTRAL)
        self.assertEqual(resolve('view', self.club, UserFactory(is_superuser=True)), NEUTRAL)

    def test_anonymous(self):
        self.assertEqual(resolve('update', self.club, AnonymousUser()), NEUTRAL)
        self.assertEqual(resolve('update', self.club, None), NEUTRAL)

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_strict_mode_forbids(self):
        self.assertEqual(resolve('update', self.club, self.user), FORBIDDEN)
        self.assertEqual(resolve('update', self.club, self.owner), ALLOWED)

    @override_settings(OG_NODE_ACCESS_STRICT=True, OG_STRICT_ACCESS_ENTITY_TYPES=['host.post'])
    def test_strict_mode_only_for_listed_types(self):
        self.assertEqual(resolve('update', self.club, self.user), NEUTRAL)


class TestResolveGroupContent(TestCase):
    def setUp(self):
        self.member = UserFactory()
        self.club = ClubFactory()
        self.other_club = ClubFactory()
        self.membership = membership_manager.create_membership(self.club, self.member)
        self.article = ArticleFactory(groups=[self.club])
        self.own_article = ArticleFactory(groups=[self.club], owner=self.member)

    def test_any_content_permission(self):
        self.membership.add_role(OgRoleFactory(permissions=['update any article content']))
        self.assertEqual(resolve('update', self.article, self.member), ALLOWED)
        self.assertEqual(resolve('delete', self.article, self.member), NEUTRAL)

    def test_own_content_permission(self):
        self.membership.add_role(OgRoleFactory(permissions=['update own article content']))
        self.assertEqual(resolve('update', self.own_article, self.member), ALLOWED)
        self.assertEqual(resolve('update', self.article, self.member), NEUTRAL)

    def test_permission_in_any_group_counts(self):
        article = ArticleFactory(groups=[self.other_club, self.club])
        self.membership.add_role(OgRoleFactory(permissions=['delete any article content']))
        self.assertEqual(resolve('delete', article, self.member), ALLOWED)

    def test_permission_in_unrelated_group_does_not_count(self):
        article = ArticleFactory(groups=[self.other_club])
        self.membership.add_role(OgRoleFactory(permissions=['update any article content']))
        self.assertEqual(resolve('update', article, self.member), NEUTRAL)

    def test_permission_through_other_group_type(self):
        community = CommunityFactory()
        post = PostFactory(communities=[community])
        membership = membership_manager.create_membership(community, self.member)
        membership.add_role(OgRoleFactory(group_entity_type='host.community', permissions=['update any post content']))
        self.assertEqual(resolve('update', post, self.member), ALLOWED)

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_strict_mode_forbids_content(self):
        self.assertEqual(resolve('update', self.article, self.member), FORBIDDEN)
        self.assertEqual(resolve('update', ArticleFactory(), self.member), FORBIDDEN)

    def test_non_strict_mode_defers(self):
        self.assertEqual(resolve('update', self.article, self.member), NEUTRAL)


class TestResolveOtherEntities(TestCase):
    def test_unrelated_entity(self):
        admin = UserFactory(is_superuser=True)
        self.assertEqual(resolve('update', CommentFactory(), admin), NEUTRAL)

    def test_unsaved_entity(self):
        admin = UserFactory(is_superuser=True)
        self.assertEqual(resolve('update', ArticleFactory.build(), admin), NEUTRAL)
        self.assertEqual(resolve('update', None, admin), NEUTRAL)


class TestAdministerGroup(TestCase):
    def setUp(self):
        self.user = grant_administer_group(UserFactory())
        self.club = ClubFactory()
        self.article = ArticleFactory(groups=[self.club])

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_always_allowed(self):
        for entity in (self.club, self.article, ArticleFactory(), PostFactory()):
            for operation in ('update', 'delete', roles.MANAGE_MEMBERS):
                self.assertEqual(resolve(operation, entity, self.user), ALLOWED)

    def test_allowed_regardless_of_membership_state(self):
        membership_manager.create_membership(self.club, self.user, state=MembershipState.BLOCKED)
        self.assertEqual(resolve('update', self.club, self.user), ALLOWED)
        self.assertEqual(resolve('delete', self.article, self.user), ALLOWED)

    def test_inactive_user_has_no_capabilities(self):
        self.user.is_active = False
        self.user.save()
        self.assertEqual(resolve('update', self.club, self.user), NEUTRAL)

    def test_works_with_any_account(self):
        account = FakeAccount(id=123, capabilities=[roles.ADMINISTER_GROUP])
        self.assertEqual(access_resolver.resolve('update', self.article, account), ALLOWED)


class TestResolveCreate(TestCase):
    def setUp(self):
        self.user = UserFactory()
        self.community = CommunityFactory()

    def test_not_group_content(self):
        self.assertEqual(resolve_create(self.user, 'host.node', 'club'), NEUTRAL)
        self.assertEqual(resolve_create(self.user, 'host.comment', 'comment'), NEUTRAL)

    def test_administrator(self):
        self.assertEqual(resolve_create(grant_administer_group(self.user), 'host.post', 'post'), ALLOWED)

    def test_optional_field_without_selectable_groups(self):
        self.assertEqual(resolve_create(self.user, 'host.node', 'page'), NEUTRAL)

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_required_field_without_selectable_groups_in_strict_mode(self):
        self.assertEqual(resolve_create(self.user, 'host.post', 'post'), FORBIDDEN)

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_optional_field_in_strict_mode(self):
        self.assertEqual(resolve_create(self.user, 'host.node', 'page'), NEUTRAL)

    def test_required_field_in_non_strict_mode(self):
        self.assertEqual(resolve_create(self.user, 'host.post', 'post'), NEUTRAL)

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_selectable_group_in_strict_mode(self):
        membership = membership_manager.create_membership(self.community, self.user)
        membership.add_role(OgRoleFactory(group_entity_type='host.community', permissions=['create post content']))
        self.assertEqual(resolve_create(self.user, 'host.post', 'post'), NEUTRAL)

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_creation_capability_does_not_help_in_strict_mode(self):
        account = FakeAccount(id=self.user.id, capabilities=['host.add_post'])
        self.assertEqual(access_resolver.resolve_create(account, 'host.post', 'post'), FORBIDDEN)

    def test_creation_capability_defers_in_non_strict_mode(self):
        account = FakeAccount(id=self.user.id, capabilities=['host.add_post'])
        self.assertEqual(access_resolver.resolve_create(account, 'host.post', 'post'), NEUTRAL)

    @override_settings(OG_NODE_ACCESS_STRICT=True)
    def test_anonymous_in_strict_mode(self):
        self.assertEqual(resolve_create(AnonymousUser(), 'host.post', 'post'), FORBIDDEN)


    def test_registered_type_without_model(self):
        self.addCleanup(membership_manager.invalidate_cache)
        self.addCleanup(registry.load, settings.OG_GROUP_TYPES)
        registry.register('node', 'article', GROUP_CONTENT)

        self.assertEqual(resolve_create(self.user, 'node', 'article'), NEUTRAL)
        with self.settings(OG_NODE_ACCESS_STRICT=True, OG_STRICT_ACCESS_ENTITY_TYPES=['node']):
            self.assertEqual(resolve_create(self.user, 'node', 'article'), NEUTRAL)


class TestHelpers(TestCase):
    def test_create_capability(self):
        self.assertEqual(create_capability('host.post'), 'host.add_post')
        self.assertIsNone(create_capability('node'))
        self.assertIsNone(create_capability('host.nothing'))

    def test_is_strict(self):
        self.assertFalse(is_strict('host.node'))
        with self.settings(OG_NODE_ACCESS_STRICT=True):
            self.assertTrue(is_strict('host.node'))
            self.assertFalse(is_strict('host.community'))
