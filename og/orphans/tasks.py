from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from huey import crontab
from huey.contrib.djhuey import db_periodic_task, db_task

from og.orphans import worker
from og.orphans.models import QUEUE_CRON, QUEUE_IMMEDIATE, OrphanRegistration
from og.utils import stats_utils
from og.utils.stats_utils import timer


@db_task()
def process_orphan_batch(registration_id, after_id=0):
    """Works through the items of one registration, one chunk per task"""
    registration = OrphanRegistration.objects.filter(id=registration_id).first()
    if registration is None:
        return

    batch_size = settings.OG_ORPHANS_BATCH_SIZE
    outcomes, last_id = worker.process_queue(
        QUEUE_IMMEDIATE,
        registration=registration,
        limit=batch_size,
        after_id=after_id,
    )
    if sum(outcomes.values()) >= batch_size:
        process_orphan_batch(registration_id, after_id=last_id)


@db_periodic_task(crontab(minute='*/{}'.format(settings.OG_ORPHANS_CRON_MINUTES)))
def process_orphan_queue():
    with timer() as t:
        outcomes, _ = worker.process_queue(QUEUE_CRON)
        # batch items that failed, or whose batch task got lost
        stale_before = timezone.now() - timedelta(minutes=settings.OG_ORPHANS_BATCH_GRACE_MINUTES)
        retried, _ = worker.process_queue(QUEUE_IMMEDIATE, stale_before=stale_before)
        outcomes.update(retried)

    stats_utils.periodic_task('orphans__process_orphan_queue', seconds=t.elapsed_seconds, extra_fields=dict(outcomes))
