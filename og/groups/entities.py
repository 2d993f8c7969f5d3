from django.apps import apps
from django.contrib.contenttypes.models import ContentType

from og.groups.registry import registry

BUNDLE_FIELD = 'bundle'
OWNER_FIELD = 'owner'


def get_entity_type(entity_or_model):
    return entity_or_model._meta.label_lower


def get_model(entity_type):
    """
    :rtype: type[django.db.models.Model] | None
    """
    try:
        return apps.get_model(entity_type)
    except (LookupError, ValueError):
        return None


def has_bundle_field(model):
    return any(f.name == BUNDLE_FIELD for f in model._meta.concrete_fields)


def get_bundle(entity):
    if has_bundle_field(entity):
        return getattr(entity, BUNDLE_FIELD)
    return entity._meta.model_name


def get_bundle_queryset(model, bundle):
    qs = model._default_manager.all()
    if has_bundle_field(model):
        qs = qs.filter(**{BUNDLE_FIELD: bundle})
    return qs


def get_owner_id(entity):
    return getattr(entity, OWNER_FIELD + '_id', None)


def get_content_type(entity_or_model):
    return ContentType.objects.get_for_model(entity_or_model)


def entity_type_for_content_type(content_type):
    return '{}.{}'.format(content_type.app_label, content_type.model)


def is_group(entity):
    return registry.is_group(get_entity_type(entity), get_bundle(entity))


def is_group_content(entity):
    return registry.is_group_content(get_entity_type(entity), get_bundle(entity))


def is_og_entity(entity):
    return is_group(entity) or is_group_content(entity)


def load_entity(entity_type, entity_id):
    model = get_model(entity_type)
    if model is None:
        return None
    return model._default_manager.filter(pk=entity_id).first()
