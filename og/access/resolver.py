"""
Access decisions for groups and group content.

Results are three-valued: ALLOWED wins, FORBIDDEN is only returned in strict
mode when nothing can allow the operation, NEUTRAL leaves the decision to the
other access checks of the site.
"""
import logging

from django.conf import settings

from og.access.accounts import get_account
from og.access.policies import AccessResult, MembershipPolicy, PolicyRegistry
from og.groups import entities, roles
from og.groups.membership import membership_manager
from og.groups.registry import registry
from og.groups.selection import GroupSelection

logger = logging.getLogger(__name__)

VIEW = 'view'


def is_strict(entity_type):
    return settings.OG_NODE_ACCESS_STRICT and entity_type in settings.OG_STRICT_ACCESS_ENTITY_TYPES


def create_capability(entity_type):
    model = entities.get_model(entity_type)
    if model is None:
        return None
    return '{}.add_{}'.format(model._meta.app_label, model._meta.model_name)


class AccessResolver:
    def __init__(self, registry, membership_manager, policies):
        self.registry = registry
        self.membership_manager = membership_manager
        self.policies = policies

    def resolve(self, operation, entity, account):
        """
        :rtype: AccessResult
        """
        if entity is None or entity.pk is None:
            return AccessResult.NEUTRAL
        entity_type = entities.get_entity_type(entity)
        bundle = entities.get_bundle(entity)
        is_group = self.registry.is_group(entity_type, bundle)
        if not is_group and not self.registry.is_group_content(entity_type, bundle):
            return AccessResult.NEUTRAL

        if operation == VIEW:
            return AccessResult.NEUTRAL

        account = get_account(account)
        if account.has_permission(roles.ADMINISTER_GROUP):
            return AccessResult.ALLOWED

        if is_group:
            group_types = [entity_type]
        else:
            group_types = sorted(self.membership_manager.get_group_ids(entity))

        for group_type in group_types:
            result = self.policies.get(group_type).decide(operation, entity, account, group_type)
            if result.is_allowed():
                return result

        if is_strict(entity_type):
            logger.debug('Denied %s on %s:%s for account %s', operation, entity_type, entity.pk, account.id)
            return AccessResult.FORBIDDEN
        return AccessResult.NEUTRAL

    def resolve_create(self, account, entity_type, bundle):
        """
        Access to create content of a bundle, before there is an entity

        :rtype: AccessResult
        """
        if not self.registry.is_group_content(entity_type, bundle):
            return AccessResult.NEUTRAL

        account = get_account(account)
        if account.has_permission(roles.ADMINISTER_GROUP):
            return AccessResult.ALLOWED

        strict = is_strict(entity_type)
        capability = create_capability(entity_type)
        if not strict and capability is not None and account.has_permission(capability):
            return AccessResult.NEUTRAL

        required = False
        for field in self.membership_manager.audience.list_audience_fields(entity_type, bundle):
            if GroupSelection(self.registry, field).has_selectable_groups(account):
                # the group can be picked when creating
                return AccessResult.NEUTRAL
            required = required or field.required

        if strict and required:
            return AccessResult.FORBIDDEN
        return AccessResult.NEUTRAL


access_resolver = AccessResolver(registry, membership_manager, PolicyRegistry(MembershipPolicy(membership_manager)))


def resolve(operation, entity, user):
    return access_resolver.resolve(operation, entity, user)


def resolve_create(user, entity_type, bundle):
    return access_resolver.resolve_create(user, entity_type, bundle)
