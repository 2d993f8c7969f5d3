from og.utils.influxdb_utils import write_points


def group_tags(entity_type):
    return {
        'group_type': entity_type,
    }


def membership_created(membership):
    write_points([{
        'measurement': 'og.events',
        'tags': group_tags(membership.group_entity_type),
        'fields': {
            'membership_created': 1,
        },
    }])


def membership_deleted(entity_type):
    write_points([{
        'measurement': 'og.events',
        'tags': group_tags(entity_type),
        'fields': {
            'membership_deleted': 1,
        },
    }])


def cache_tags_invalidated(count):
    write_points([{
        'measurement': 'og.cache',
        'tags': {},
        'fields': {
            'tags_invalidated': count,
        },
    }])
