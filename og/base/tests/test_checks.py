from django.test import TestCase, override_settings

from og.base.checks import group_types_check, orphan_settings_check


class TestOrphanSettingsCheck(TestCase):
    def test_known_strategy_passes(self):
        self.assertEqual(orphan_settings_check(None), [])

    @override_settings(OG_DELETE_ORPHANS_PLUGIN_ID='does-not-exist')
    def test_unknown_strategy_fails(self):
        errors = orphan_settings_check(None)
        self.assertEqual([e.id for e in errors], ['og.E001'])

    @override_settings(OG_ORPHANS_BATCH_SIZE=0)
    def test_batch_size_must_be_positive(self):
        errors = orphan_settings_check(None)
        self.assertEqual([e.id for e in errors], ['og.E002'])


class TestGroupTypesCheck(TestCase):
    def test_configured_types_pass(self):
        self.assertEqual(group_types_check(None), [])

    @override_settings(OG_GROUP_TYPES={
        'group': [('host.node', 'club')],
        'group_content': [('host.node', 'club')],
    })
    def test_bundle_with_two_roles_fails(self):
        errors = group_types_check(None)
        self.assertEqual([e.id for e in errors], ['og.E003'])

    @override_settings(OG_NODE_ACCESS_STRICT=True, OG_STRICT_ACCESS_ENTITY_TYPES=[])
    def test_warns_when_strict_mode_lists_no_types(self):
        errors = group_types_check(None)
        self.assertEqual([e.id for e in errors], ['og.W001'])
