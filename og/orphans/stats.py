from og.utils.influxdb_utils import write_points


def orphans_registered(registration, count):
    write_points([{
        'measurement': 'og.orphans',
        'tags': {
            'group_type': registration.group_entity_type,
            'plugin_id': registration.plugin_id,
        },
        'fields': {
            'registered': count,
        },
    }])


def orphans_processed(queue, outcomes):
    write_points([{
        'measurement': 'og.orphans',
        'tags': {
            'queue': queue,
        },
        'fields': dict(outcomes),
    }])
