from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import ValidationError

from og.groups import entities
from og.groups.exceptions import AlreadyExists
from og.groups.membership import membership_manager
from og.groups.models import MembershipState, OgMembership
from og.groups.registry import registry


class IsGroupField(serializers.ReadOnlyField):
    """Computed flag telling whether an entity is a group"""

    def __init__(self, **kwargs):
        kwargs['source'] = '*'
        super().__init__(**kwargs)

    def to_representation(self, entity):
        return entities.is_group(entity)


class GroupInfoSerializer(serializers.Serializer):
    entity_type = serializers.SerializerMethodField()
    id = serializers.IntegerField(source='pk', read_only=True)
    bundle = serializers.SerializerMethodField()
    is_group = IsGroupField()
    member_count = serializers.SerializerMethodField()
    links = serializers.SerializerMethodField()

    def get_entity_type(self, entity):
        return entities.get_entity_type(entity)

    def get_bundle(self, entity):
        return entities.get_bundle(entity)

    def get_member_count(self, entity):
        return OgMembership.objects.for_group(entity).active().count()

    def get_links(self, entity):
        entity_type = entities.get_entity_type(entity)
        templates = registry.link_templates.get(entity_type, {})
        return {
            name: template.format(entity_type=entity_type, entity_id=entity.pk)
            for name, template in templates.items()
        }


class OgMembershipSerializer(serializers.ModelSerializer):
    class Meta:
        model = OgMembership
        fields = [
            'id',
            'user',
            'state',
            'roles',
            'created_at',
        ]
        read_only_fields = ['id', 'state', 'roles', 'created_at']

    user = serializers.PrimaryKeyRelatedField(queryset=get_user_model().objects.all())
    roles = serializers.SlugRelatedField(many=True, read_only=True, slug_field='name')

    def create(self, validated_data):
        group = self.context['group']
        try:
            return membership_manager.create_membership(
                group,
                validated_data['user'],
                state=validated_data.get('state', MembershipState.ACTIVE),
            )
        except AlreadyExists:
            raise ValidationError('User is already a member of this group')
