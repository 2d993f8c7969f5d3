from django.test import TestCase

from og.groups.audience import AudienceFieldResolver
from og.groups.cache import CacheContext
from og.groups.registry import GroupTypeRegistry, registry
from og.tests.host.models import Node


class TestAudienceFieldResolver(TestCase):
    def setUp(self):
        self.cache = CacheContext()
        self.resolver = AudienceFieldResolver(registry, self.cache)

    def test_lists_fields_of_article(self):
        fields = self.resolver.list_audience_fields('host.node', 'article')
        self.assertEqual([f.field_name for f in fields], ['og_audience', 'og_community'])
        audience, community = fields
        self.assertEqual(audience.target_type, 'host.node')
        self.assertEqual(audience.target_bundles, ('club', ))
        self.assertFalse(audience.required)
        self.assertEqual(community.target_type, 'host.community')
        self.assertIsNone(community.target_bundles)

    def test_field_restricted_to_some_bundles(self):
        fields = self.resolver.list_audience_fields('host.node', 'page')
        self.assertEqual([f.field_name for f in fields], ['og_audience'])

    def test_required_field(self):
        fields = self.resolver.list_audience_fields('host.post', 'post')
        self.assertEqual(len(fields), 1)
        self.assertTrue(fields[0].required)
        self.assertEqual(fields[0].target_type, 'host.community')

    def test_groups_have_no_audience_fields(self):
        self.assertEqual(self.resolver.list_audience_fields('host.node', 'club'), [])

    def test_unknown_entity_type(self):
        self.assertEqual(self.resolver.list_audience_fields('host.nothing', 'nothing'), [])

    def test_field_pointing_to_non_group_type_is_ignored(self):
        other = GroupTypeRegistry()
        other.load({'group': [('host.community', 'community')], 'group_content': [('host.node', 'article')]})
        resolver = AudienceFieldResolver(other, CacheContext())
        fields = resolver.list_audience_fields('host.node', 'article')
        self.assertEqual([f.field_name for f in fields], ['og_community'])

    def test_is_group_audience_field(self):
        self.assertTrue(self.resolver.is_group_audience_field(Node._meta.get_field('og_audience')))
        self.assertFalse(self.resolver.is_group_audience_field(Node._meta.get_field('title')))

    def test_get_field(self):
        self.assertEqual(self.resolver.get_field('host.node', 'article', 'og_community').target_type, 'host.community')
        self.assertIsNone(self.resolver.get_field('host.node', 'page', 'og_community'))

    def test_results_are_memoized(self):
        self.resolver.list_audience_fields('host.node', 'article')
        self.assertEqual(len(self.cache), 1)
        self.cache.clear()
        self.assertEqual(len(self.cache), 0)
