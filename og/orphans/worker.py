"""
Consumes orphan queue items.

Items can be processed long after they were queued, so every item is checked
against the current state: content that is gone or that still belongs to
another group is left alone. Items are removed once handled, items hitting a
database error stay queued for the next run.
"""
import logging
from collections import Counter

from django.db import DatabaseError, transaction
from django.db.models import F, Q

from og.groups.membership import membership_manager
from og.orphans import stats
from og.orphans.models import QUEUES, OrphanQueueItem, OrphanRegistration

logger = logging.getLogger(__name__)

DELETED = 'deleted'
SKIPPED_MISSING = 'skipped_missing'
SKIPPED_NOT_ORPHANED = 'skipped_not_orphaned'
FAILED = 'failed'


def remaining_group_ids(entity, group_type, group_id):
    group_ids = membership_manager.get_group_ids(entity)
    if group_type in group_ids:
        group_ids[group_type].discard(group_id)
    return {key: value for key, value in group_ids.items() if value}


def process_item(item):
    registration = item.registration
    model = item.content_type.model_class()
    entity = model._default_manager.filter(pk=item.object_id).first() if model else None

    if entity is None:
        outcome = SKIPPED_MISSING
    elif remaining_group_ids(entity, registration.group_entity_type, registration.group_id):
        outcome = SKIPPED_NOT_ORPHANED
    else:
        logger.info(
            'Deleting %s:%s, its last group %s:%s was deleted', item.entity_type, item.object_id,
            registration.group_entity_type, registration.group_id
        )
        entity.delete()
        outcome = DELETED

    item.delete()
    return outcome


def process_queue(queue, registration=None, limit=None, after_id=0, stale_before=None):
    """
    Processes items of ``queue`` in id order

    :return: outcome counts and the id of the last item looked at
    :rtype: (Counter, int)
    """
    qs = OrphanQueueItem.objects.in_queue(queue).filter(id__gt=after_id)
    if registration is not None:
        qs = qs.filter(registration=registration)
    if stale_before is not None:
        # failed before, or nothing picked it up in time
        qs = qs.filter(Q(attempts__gt=0) | Q(created_at__lt=stale_before))
    qs = qs.select_related('registration', 'content_type').order_by('id')
    if limit is not None:
        qs = qs[:limit]

    outcomes = Counter()
    last_id = after_id
    for item in list(qs):
        last_id = item.id
        try:
            with transaction.atomic():
                outcomes[process_item(item)] += 1
        except DatabaseError:
            logger.exception('Could not process orphan queue item %s, will try again later', item.id)
            OrphanQueueItem.objects.filter(pk=item.pk).update(attempts=F('attempts') + 1)
            outcomes[FAILED] += 1

    remove_finished_registrations()
    if outcomes:
        stats.orphans_processed(queue, outcomes)
    return outcomes, last_id


def remove_finished_registrations():
    OrphanRegistration.objects.filter(items__isnull=True).delete()


def drain_orphan_queues():
    """Discards all queued work, e.g. when the engine is removed"""
    deleted, _ = OrphanQueueItem.objects.filter(queue__in=QUEUES).delete()
    OrphanRegistration.objects.all().delete()
    logger.info('Discarded %d orphan queue items', deleted)
    return deleted
