import logging

from django.db.models.signals import m2m_changed, post_delete, post_save, pre_delete
from django.dispatch import receiver

from og.groups import cache_tags, entities
from og.groups.exceptions import AlreadyExists
from og.groups.fields import GroupAudienceField
from og.groups.membership import membership_manager
from og.groups.registry import group_types_changed

logger = logging.getLogger(__name__)


@receiver(post_save)
def entity_saved(sender, instance, created, raw=False, **kwargs):
    """Invalidate the listings of the groups the entity belongs to."""
    if raw or not entities.is_og_entity(instance):
        return
    cache_tags.invalidate_tags(cache_tags.tags_for_entity(instance))


@receiver(post_save)
def group_created(sender, instance, created, raw=False, **kwargs):
    """Ensure the owner of a new group is a member of it."""
    if raw or not created or not entities.is_group(instance):
        return
    owner_id = entities.get_owner_id(instance)
    if owner_id is None:
        return
    try:
        membership_manager.create_membership(instance, instance.owner)
    except AlreadyExists:
        logger.info('Owner %s of %s is already a member', owner_id, instance)


@receiver(pre_delete)
def entity_about_to_be_deleted(sender, instance, **kwargs):
    # the audience field rows are gone by the time post_delete runs
    if entities.is_og_entity(instance):
        instance._og_cache_tags = cache_tags.tags_for_entity(instance)


@receiver(post_delete)
def entity_deleted(sender, instance, **kwargs):
    if not entities.is_og_entity(instance):
        return
    cache_tags.invalidate_tags(getattr(instance, '_og_cache_tags', []))
    if entities.is_group(instance):
        membership_manager.delete_group_memberships(instance)
    membership_manager.invalidate_cache()


def get_audience_field(instance, through):
    for field in instance._meta.many_to_many:
        if isinstance(field, GroupAudienceField) and field.remote_field.through is through:
            return field


@receiver(m2m_changed)
def audience_changed(sender, instance, action, reverse, model, pk_set, **kwargs):
    """Invalidate the listings of groups that were added or removed, and the current ones."""
    if reverse or not entities.is_group_content(instance):
        return
    field = get_audience_field(instance, sender)
    if field is None:
        return

    group_type = entities.get_entity_type(model)
    if action == 'pre_clear':
        instance._og_cleared_tags = cache_tags.tags_for_entity(instance)
    elif action in ('post_add', 'post_remove'):
        changed = cache_tags.tags_for_group_ids({group_type: pk_set or set()})
        cache_tags.invalidate_tags(sorted(set(changed) | set(cache_tags.tags_for_entity(instance))))
    elif action == 'post_clear':
        cleared = getattr(instance, '_og_cleared_tags', [])
        cache_tags.invalidate_tags(sorted(set(cleared) | set(cache_tags.tags_for_entity(instance))))


@receiver(group_types_changed)
def group_types_updated(sender, **kwargs):
    # audience fields are derived from the registered pairs
    membership_manager.invalidate_cache()
