from django.contrib.contenttypes.models import ContentType

from og.groups import entities, roles
from og.groups.audience import get_target_bundles, restrict_to_targets
from og.groups.models import OgMembership


class GroupSelection:
    """Groups an account may pick as value of an audience field"""

    def __init__(self, registry, audience_field):
        self.registry = registry
        self.field = audience_field

    def get_target_bundles(self):
        return get_target_bundles(self.registry, self.field)

    def get_queryset(self):
        model = entities.get_model(self.field.target_type)
        if model is None:
            return None
        return restrict_to_targets(self.registry, self.field, model._default_manager.all())

    def selectable_groups(self, account):
        qs = self.get_queryset()
        if qs is None:
            return []
        if account.has_permission(roles.ADMINISTER_GROUP):
            return qs
        if account.is_anonymous:
            return qs.none()

        permission = roles.create_content_permission(self.field.bundle)
        memberships = OgMembership.objects.active().filter(
            user_id=account.id,
            group_content_type=ContentType.objects.get_for_model(qs.model),
        ).prefetch_related('roles')
        ids = [m.group_id for m in memberships if permission in m.get_permissions()]
        return qs.filter(pk__in=ids)

    def has_selectable_groups(self, account):
        groups = self.selectable_groups(account)
        return groups.exists() if hasattr(groups, 'exists') else len(groups) > 0
