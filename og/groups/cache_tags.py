"""
Cache tags for listings derived from the group graph.

A tag is ``og-group-content:{group type}:{group id}``. Every tag has a version
stored in the django cache, cached listings are keyed by the versions of their
tags, so invalidating a tag means storing a fresh version for it.
"""
from uuid import uuid4

from django.core.cache import cache

from og.groups import entities, stats
from og.groups.membership import membership_manager

TAG_PREFIX = 'og-group-content'


def group_content_tag(group_type, group_id):
    return '{}:{}:{}'.format(TAG_PREFIX, group_type, group_id)


def tags_for_group_ids(group_ids):
    return sorted(group_content_tag(group_type, group_id) for group_type, ids in group_ids.items() for group_id in ids)


def tags_for_entity(entity):
    return tags_for_group_ids(membership_manager.get_group_ids(entity))


def _version_key(tag):
    return 'og-cache-tag-version:' + tag


def invalidate_tags(tags):
    if not tags:
        return
    cache.set_many({_version_key(tag): uuid4().hex for tag in tags}, timeout=None)
    stats.cache_tags_invalidated(len(tags))


def get_tag_versions(tags):
    keys = [_version_key(tag) for tag in tags]
    versions = cache.get_many(keys)
    missing = {key: uuid4().hex for key in keys if key not in versions}
    if missing:
        # add() keeps a version somebody else stored in the meantime
        for key, version in missing.items():
            cache.add(key, version, timeout=None)
        versions.update(cache.get_many(list(missing)))
    return [versions[key] for key in keys]


def get_tagged(key, tags, default, timeout=None):
    """Returns the cached value for ``key`` as long as none of the ``tags`` got invalidated"""
    tags = sorted(tags)
    versioned_key = 'og-tagged:{}:{}'.format(key, ':'.join(get_tag_versions(tags)))
    return cache.get_or_set(versioned_key, default, timeout=timeout)


def group_content_listing(group):
    """
    Ids of the content of ``group``, cached until the group content changes

    :rtype: dict[str, list]
    """
    group_type = entities.get_entity_type(group)

    def compute():
        return {
            entity_type: sorted(ids)
            for entity_type, ids in membership_manager.get_group_content_ids(group).items()
        }

    return get_tagged(
        'group-content-listing:{}:{}'.format(group_type, group.pk),
        [group_content_tag(group_type, group.pk)],
        compute,
    )
