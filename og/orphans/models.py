from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.db.models import QuerySet
from django.utils import timezone

from og.base.base_models import BaseModel

# consumed right away (batch job)
QUEUE_IMMEDIATE = 'og_orphaned_group_content'
# consumed by the periodic worker
QUEUE_CRON = 'og_orphaned_group_content_cron'

QUEUES = (QUEUE_IMMEDIATE, QUEUE_CRON)


class OrphanRegistration(BaseModel):
    """A deleted group whose content still needs to be checked"""
    group_content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE, related_name='+')
    group_id = models.PositiveIntegerField()
    plugin_id = models.CharField(max_length=100)
    scheduled_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'og_orphan_registration'

    def __str__(self):
        return 'Orphans of {}:{} ({})'.format(self.group_entity_type, self.group_id, self.plugin_id)

    @property
    def group_entity_type(self):
        return '{}.{}'.format(self.group_content_type.app_label, self.group_content_type.model)


class OrphanQueueItemQuerySet(QuerySet):
    def in_queue(self, queue):
        return self.filter(queue=queue)


class OrphanQueueItem(BaseModel):
    objects = OrphanQueueItemQuerySet.as_manager()

    registration = models.ForeignKey(OrphanRegistration, on_delete=models.CASCADE, related_name='items')
    queue = models.CharField(max_length=100, choices=[(q, q) for q in QUEUES], db_index=True)
    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE, related_name='+')
    object_id = models.PositiveIntegerField()
    attempts = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'og_orphan_queue_item'

    @property
    def entity_type(self):
        return '{}.{}'.format(self.content_type.app_label, self.content_type.model)
