from timeit import default_timer

from og.utils.influxdb_utils import write_points


def periodic_task(name, seconds=None, extra_fields=None):
    fields = {'value': 1, **(extra_fields or {})}
    if seconds is not None:
        fields['seconds'] = seconds
    write_points([{
        'measurement': 'og.periodic',
        'tags': {
            'name': name,
        },
        'fields': fields,
    }])


class timer:
    end = None

    def __enter__(self):
        self.start = default_timer()
        return self

    def __exit__(self, type, value, traceback):
        self.end = default_timer()

    @property
    def elapsed_seconds(self):
        # still inside the block
        if self.end is None:
            return default_timer() - self.start
        return self.end - self.start
