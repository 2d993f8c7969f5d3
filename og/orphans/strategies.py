import logging

from django.conf import settings
from django.contrib.contenttypes.models import ContentType
from django.core.exceptions import ImproperlyConfigured

from og.groups import entities
from og.groups.membership import membership_manager
from og.orphans import stats, tasks, worker
from og.orphans.models import QUEUE_CRON, QUEUE_IMMEDIATE, OrphanQueueItem, OrphanRegistration
from og.utils.misc import on_transaction_commit

logger = logging.getLogger(__name__)


class OrphanDeletionStrategy:
    """Queues the content of a group that is about to be deleted"""
    plugin_id = None
    queue = QUEUE_IMMEDIATE

    def register(self, group):
        if not entities.is_group(group):
            raise ValueError('{} is not a group'.format(group))

        registration = OrphanRegistration.objects.create(
            group_content_type=entities.get_content_type(group),
            group_id=group.pk,
            plugin_id=self.plugin_id,
        )
        items = []
        for entity_type, ids in membership_manager.get_group_content_ids(group).items():
            content_type = ContentType.objects.get_for_model(entities.get_model(entity_type))
            for object_id in sorted(ids):
                items.append(
                    OrphanQueueItem(
                        registration=registration,
                        queue=self.queue,
                        content_type=content_type,
                        object_id=object_id,
                    )
                )
        OrphanQueueItem.objects.bulk_create(items)
        logger.info('Queued %d possible orphans of %s:%s', len(items), registration.group_entity_type, group.pk)
        stats.orphans_registered(registration, len(items))
        return registration

    def process(self, registration=None):
        outcomes, _ = worker.process_queue(self.queue, registration=registration)
        return outcomes


class ImmediateStrategy(OrphanDeletionStrategy):
    """Deletes the orphans right away, in the transaction deleting the group"""
    plugin_id = 'immediate'

    def register(self, group):
        registration = super().register(group)
        self.process(registration)
        return registration


class BatchStrategy(OrphanDeletionStrategy):
    """Deletes the orphans in chunks in the background, once the group deletion is committed"""
    plugin_id = 'batch'

    def register(self, group):
        registration = super().register(group)
        schedule_batch(registration.id)
        return registration


class QueueStrategy(OrphanDeletionStrategy):
    """Leaves the orphans to the periodic queue worker"""
    plugin_id = 'queue'
    queue = QUEUE_CRON


@on_transaction_commit
def schedule_batch(registration_id):
    tasks.process_orphan_batch(registration_id)


STRATEGIES = {
    strategy.plugin_id: strategy
    for strategy in (ImmediateStrategy, BatchStrategy, QueueStrategy)
}


def get_strategy(plugin_id=None):
    if plugin_id is None:
        plugin_id = settings.OG_DELETE_ORPHANS_PLUGIN_ID
    strategy = STRATEGIES.get(plugin_id)
    if strategy is None:
        raise ImproperlyConfigured('Unknown orphan deletion strategy "{}"'.format(plugin_id))
    return strategy()
