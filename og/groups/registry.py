"""Classifies (entity type, bundle) pairs as groups or group content."""
import logging
from dataclasses import dataclass

from django.dispatch import Signal
from django.urls import clear_url_caches

logger = logging.getLogger(__name__)

GROUP = 'group'
GROUP_CONTENT = 'group_content'

ADMIN_LINK_TEMPLATE = '/api/og/{entity_type}/{entity_id}/admin/'

# sent whenever the registered pairs change, routes depending on them need a rebuild
group_types_changed = Signal()


@dataclass(frozen=True)
class GroupTypeDescriptor:
    entity_type: str
    bundle: str
    role: str


class GroupTypeRegistry:
    def __init__(self):
        self._descriptors = {}
        self.link_templates = {}

    def load(self, config):
        """Replaces all pairs with the ones in ``config``, a dict like settings.OG_GROUP_TYPES"""
        self._descriptors = {}
        for role in (GROUP, GROUP_CONTENT):
            for entity_type, bundle in config.get(role, ()):
                self._add(entity_type, bundle, role)

    def _add(self, entity_type, bundle, role):
        if role not in (GROUP, GROUP_CONTENT):
            raise ValueError('Unknown role {}'.format(role))
        existing = self._descriptors.get((entity_type, bundle))
        if existing is not None:
            if existing.role == role:
                return False
            raise ValueError('{} of bundle {} is already registered as {}'.format(entity_type, bundle, existing.role))
        self._descriptors[(entity_type, bundle)] = GroupTypeDescriptor(entity_type, bundle, role)
        return True

    def register(self, entity_type, bundle, role):
        if self._add(entity_type, bundle, role):
            logger.info('Registered %s:%s as %s', entity_type, bundle, role)
            self._routes_changed()

    def unregister(self, entity_type, bundle):
        # memberships pointing at the pair are left alone
        if self._descriptors.pop((entity_type, bundle), None) is not None:
            logger.info('Unregistered %s:%s', entity_type, bundle)
            self._routes_changed()

    def _routes_changed(self):
        clear_url_caches()
        group_types_changed.send(sender=self.__class__, registry=self)

    def get(self, entity_type, bundle):
        return self._descriptors.get((entity_type, bundle))

    def is_group(self, entity_type, bundle):
        descriptor = self.get(entity_type, bundle)
        return descriptor is not None and descriptor.role == GROUP

    def is_group_content(self, entity_type, bundle):
        descriptor = self.get(entity_type, bundle)
        return descriptor is not None and descriptor.role == GROUP_CONTENT

    def _bundles(self, role, entity_type=None):
        return [
            d.bundle for d in self._descriptors.values()
            if d.role == role and (entity_type is None or d.entity_type == entity_type)
        ]

    def get_group_bundles(self, entity_type):
        return self._bundles(GROUP, entity_type)

    def get_group_content_bundles(self, entity_type):
        return self._bundles(GROUP_CONTENT, entity_type)

    def get_all_group_types(self):
        return [(d.entity_type, d.bundle) for d in self._descriptors.values() if d.role == GROUP]

    def get_all_group_content_types(self):
        return [(d.entity_type, d.bundle) for d in self._descriptors.values() if d.role == GROUP_CONTENT]

    def is_group_entity_type(self, entity_type):
        return len(self.get_group_bundles(entity_type)) > 0

    def register_admin_link_templates(self, models):
        for model in models:
            entity_type = model._meta.label_lower
            if self.is_group_entity_type(entity_type):
                self.link_templates[entity_type] = {'og-admin': ADMIN_LINK_TEMPLATE}


registry = GroupTypeRegistry()
