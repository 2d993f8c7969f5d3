import logging
from collections import defaultdict

from django.conf import settings
from django.contrib.contenttypes.models import ContentType
from django.db import IntegrityError, transaction

from og.groups import entities, stats
from og.groups.audience import AudienceFieldResolver, get_target_bundles, restrict_to_targets
from og.groups.cache import CacheContext
from og.groups.exceptions import AlreadyExists
from og.groups.models import MembershipState, OgMembership, OgRole
from og.groups.registry import registry

logger = logging.getLogger(__name__)

ACTIVE_ONLY = (MembershipState.ACTIVE, )


class MembershipManager:
    def __init__(self, registry):
        self.registry = registry
        self.cache = CacheContext()
        self.audience = AudienceFieldResolver(registry, self.cache)

    def invalidate_cache(self):
        self.cache.clear()

    def _check_group(self, group):
        if not entities.is_group(group):
            raise ValueError('{} is not a group'.format(group))

    def create_membership(self, group, user, state=MembershipState.ACTIVE):
        """
        Persists a membership of ``user`` in ``group`` with the default role

        Raises AlreadyExists if the user already has a membership in the group.
        """
        self._check_group(group)
        existing = self.get_membership(group, user, states=None)
        if existing is not None:
            raise AlreadyExists(existing)

        role = OgRole.objects.get_or_create_default(entities.get_entity_type(group), settings.OG_DEFAULT_ROLE)
        try:
            with transaction.atomic():
                membership = OgMembership.objects.create(
                    user=user,
                    group_content_type=entities.get_content_type(group),
                    group_id=group.pk,
                    state=state,
                )
                membership.roles.add(role)
        except IntegrityError:
            # created concurrently since we checked
            raise AlreadyExists(self.get_membership(group, user, states=None))

        logger.info('Created membership of user %s in %s', user.pk, membership.group_entity_type)
        stats.membership_created(membership)
        return membership

    def get_membership(self, group, user, states=ACTIVE_ONLY):
        qs = OgMembership.objects.for_group(group).filter(user_id=user.pk)
        if states is not None:
            qs = qs.with_states(states)
        return qs.first()

    def get_memberships(self, user, states=ACTIVE_ONLY):
        qs = OgMembership.objects.filter(user_id=user.pk).select_related('group_content_type')
        if states is not None:
            qs = qs.with_states(states)
        return qs

    def is_member(self, group, user, states=ACTIVE_ONLY):
        if user is None or user.is_anonymous:
            return False
        return self.get_membership(group, user, states=states) is not None

    def delete_membership(self, group, user):
        deleted, _ = OgMembership.objects.for_group(group).filter(user_id=user.pk).delete()
        if deleted:
            stats.membership_deleted(entities.get_entity_type(group))

    def delete_group_memberships(self, group):
        """Memberships of a deleted group, its roles are kept"""
        deleted, _ = OgMembership.objects.for_group(group).delete()
        if deleted:
            logger.info('Deleted memberships of %s:%s', entities.get_entity_type(group), group.pk)

    def get_user_group_ids(self, user, states=ACTIVE_ONLY):
        """
        :rtype: dict[str, set]
        """
        group_ids = defaultdict(set)
        for membership in self.get_memberships(user, states=states):
            group_ids[membership.group_entity_type].add(membership.group_id)
        return dict(group_ids)

    def get_permissions(self, user_id, group_entity_type, group_id):
        if user_id is None:
            return set()
        model = entities.get_model(group_entity_type)
        if model is None:
            return set()
        membership = OgMembership.objects.active().for_group_id(
            ContentType.objects.get_for_model(model),
            group_id,
        ).filter(user_id=user_id).prefetch_related('roles').first()
        if membership is None:
            return set()
        return membership.get_permissions()

    def get_group_ids(self, entity, group_type=None):
        """
        Ids of the groups an entity belongs to, by group entity type

        Only group content has groups. Groups referencing other groups are not followed.

        :rtype: dict[str, set]
        """
        if entity.pk is None or not entities.is_group_content(entity):
            return {}

        group_ids = defaultdict(set)
        fields = self.audience.list_audience_fields(entities.get_entity_type(entity), entities.get_bundle(entity))
        for field in fields:
            if group_type is not None and field.target_type != group_type:
                continue
            qs = restrict_to_targets(self.registry, field, getattr(entity, field.field_name).all())
            ids = qs.values_list('pk', flat=True)
            group_ids[field.target_type].update(ids)
        return {key: value for key, value in group_ids.items() if value}

    def get_groups(self, entity, group_type=None):
        groups = {}
        for entity_type, ids in self.get_group_ids(entity, group_type=group_type).items():
            model = entities.get_model(entity_type)
            groups[entity_type] = list(model._default_manager.filter(pk__in=ids).order_by('pk'))
        return groups

    def get_group_content_ids(self, group, entity_types=None):
        """
        Reverse of get_group_ids: ids of all group content referencing ``group``

        :rtype: dict[str, set]
        """
        group_type = entities.get_entity_type(group)
        group_bundle = entities.get_bundle(group)
        content_ids = defaultdict(set)
        for entity_type, bundle in self.registry.get_all_group_content_types():
            if entity_types is not None and entity_type not in entity_types:
                continue
            model = entities.get_model(entity_type)
            if model is None:
                continue
            for field in self.audience.list_audience_fields(entity_type, bundle):
                if field.target_type != group_type or group_bundle not in get_target_bundles(self.registry, field):
                    continue
                ids = entities.get_bundle_queryset(model, bundle).filter(**{
                    field.field_name: group
                }).values_list('pk', flat=True)
                content_ids[entity_type].update(ids)
        return {key: value for key, value in content_ids.items() if value}


membership_manager = MembershipManager(registry)
