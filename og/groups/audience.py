from dataclasses import dataclass
from typing import Optional

from og.groups import entities
from og.groups.fields import GroupAudienceField


@dataclass(frozen=True)
class AudienceField:
    entity_type: str
    bundle: str
    field_name: str
    required: bool
    target_type: str
    target_bundles: Optional[tuple] = None


class AudienceFieldResolver:
    def __init__(self, registry, cache):
        self.registry = registry
        self.cache = cache

    def is_group_audience_field(self, field):
        if not isinstance(field, GroupAudienceField):
            return False
        return self.registry.is_group_entity_type(entities.get_entity_type(field.related_model))

    def list_audience_fields(self, entity_type, bundle):
        """
        Audience fields of a group content bundle, in declaration order

        :rtype: list[AudienceField]
        """
        return self.cache.get_or_compute(
            ('audience_fields', entity_type, bundle),
            lambda: self._collect(entity_type, bundle),
        )

    def _collect(self, entity_type, bundle):
        if not self.registry.is_group_content(entity_type, bundle):
            return []
        model = entities.get_model(entity_type)
        if model is None:
            return []
        return [
            AudienceField(
                entity_type=entity_type,
                bundle=bundle,
                field_name=field.name,
                required=not field.blank,
                target_type=entities.get_entity_type(field.related_model),
                target_bundles=field.target_bundles,
            ) for field in model._meta.get_fields()
            if self.is_group_audience_field(field) and field.applies_to(bundle)
        ]

    def get_field(self, entity_type, bundle, field_name):
        for field in self.list_audience_fields(entity_type, bundle):
            if field.field_name == field_name:
                return field


def get_target_bundles(registry, field):
    """Group bundles the audience ``field`` can reference"""
    bundles = registry.get_group_bundles(field.target_type)
    if field.target_bundles:
        bundles = [b for b in bundles if b in field.target_bundles]
    return bundles


def restrict_to_targets(registry, field, qs):
    """Narrows a queryset of ``field.target_type`` down to the groups the field can reference"""
    bundles = get_target_bundles(registry, field)
    if entities.has_bundle_field(qs.model):
        return qs.filter(**{entities.BUNDLE_FIELD + '__in': bundles})
    if qs.model._meta.model_name in bundles:
        return qs
    return qs.none()
