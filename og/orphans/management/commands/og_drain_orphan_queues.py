from django.core.management.base import BaseCommand

from og.orphans.worker import drain_orphan_queues


class Command(BaseCommand):
    help = 'Discards all queued orphan deletion work'

    def handle(self, *args, **options):
        deleted = drain_orphan_queues()
        self.stdout.write(self.style.SUCCESS('Discarded {} queued items'.format(deleted)))
