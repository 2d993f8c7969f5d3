from enum import Enum

from django.conf import settings

from og.groups import entities, roles


class AccessResult(Enum):
    ALLOWED = 'allowed'
    FORBIDDEN = 'forbidden'
    NEUTRAL = 'neutral'

    def is_allowed(self):
        return self is AccessResult.ALLOWED

    def is_forbidden(self):
        return self is AccessResult.FORBIDDEN

    def is_neutral(self):
        return self is AccessResult.NEUTRAL


class MembershipPolicy:
    """Decides using the permissions of the account's active memberships"""

    def __init__(self, membership_manager):
        self.membership_manager = membership_manager

    def decide(self, operation, entity, account, group_type):
        if account.is_anonymous:
            return AccessResult.NEUTRAL
        if entities.is_group(entity):
            return self.decide_group(operation, entity, account)
        return self.decide_group_content(operation, entity, account, group_type)

    def decide_group(self, operation, group, account):
        if settings.OG_GROUP_MANAGER_FULL_ACCESS and entities.get_owner_id(group) == account.id:
            return AccessResult.ALLOWED
        permissions = self.membership_manager.get_permissions(account.id, entities.get_entity_type(group), group.pk)
        # "manage members" is granted as is, other operations as "{operation} group"
        if {operation, roles.group_permission(operation)} & permissions:
            return AccessResult.ALLOWED
        return AccessResult.NEUTRAL

    def decide_group_content(self, operation, entity, account, group_type):
        bundle = entities.get_bundle(entity)
        wanted = {roles.content_permission(operation, bundle)}
        if entities.get_owner_id(entity) == account.id:
            wanted.add(roles.content_permission(operation, bundle, own=True))

        for target_type, group_ids in self.membership_manager.get_group_ids(entity, group_type=group_type).items():
            for group_id in sorted(group_ids):
                permissions = self.membership_manager.get_permissions(account.id, target_type, group_id)
                if wanted & permissions:
                    return AccessResult.ALLOWED
        return AccessResult.NEUTRAL


class PolicyRegistry:
    """Policy delegates by group entity type"""

    def __init__(self, default):
        self.default = default
        self._policies = {}

    def register(self, group_entity_type, policy):
        self._policies[group_entity_type] = policy

    def unregister(self, group_entity_type):
        self._policies.pop(group_entity_type, None)

    def get(self, group_entity_type):
        return self._policies.get(group_entity_type, self.default)
