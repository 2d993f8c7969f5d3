from django.conf import settings
from django.db.models.signals import pre_delete
from django.dispatch import receiver

from og.groups import entities
from og.orphans.strategies import get_strategy


@receiver(pre_delete)
def group_about_to_be_deleted(sender, instance, **kwargs):
    """Register the content of the group, to delete what is left without any group."""
    if not settings.OG_DELETE_ORPHANS or not entities.is_group(instance):
        return
    get_strategy().register(instance)
