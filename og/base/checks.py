from django.conf import settings
from django.core.checks import Error, Warning, register

from og.groups.registry import GROUP, GROUP_CONTENT


@register()
def orphan_settings_check(app_configs, **kwargs):
    from og.orphans.strategies import STRATEGIES

    errors = []
    if settings.OG_DELETE_ORPHANS_PLUGIN_ID not in STRATEGIES:
        errors.append(
            Error(
                "Unknown orphan deletion strategy",
                hint="Set OG_DELETE_ORPHANS_PLUGIN_ID to one of: {}".format(', '.join(sorted(STRATEGIES))),
                obj=settings.OG_DELETE_ORPHANS_PLUGIN_ID,
                id="og.E001",
            )
        )
    if settings.OG_ORPHANS_BATCH_SIZE < 1:
        errors.append(Error("OG_ORPHANS_BATCH_SIZE must be positive", obj=settings.OG_ORPHANS_BATCH_SIZE, id="og.E002"))
    return errors


@register()
def group_types_check(app_configs, **kwargs):
    errors = []
    groups = set(settings.OG_GROUP_TYPES.get(GROUP, ()))
    for pair in settings.OG_GROUP_TYPES.get(GROUP_CONTENT, ()):
        if pair in groups:
            errors.append(
                Error(
                    "Bundle configured as group and as group content",
                    hint="A bundle can only have one role",
                    obj=pair,
                    id="og.E003",
                )
            )
    if settings.OG_NODE_ACCESS_STRICT and not settings.OG_STRICT_ACCESS_ENTITY_TYPES:
        errors.append(
            Warning(
                "OG_NODE_ACCESS_STRICT has no effect",
                hint="List the entity types in OG_STRICT_ACCESS_ENTITY_TYPES",
                id="og.W001",
            )
        )
    return errors
