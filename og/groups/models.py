from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.db.models import QuerySet, TextChoices

from og.base.base_models import BaseModel
from og.groups import roles


class MembershipState(TextChoices):
    ACTIVE = 'active'
    PENDING = 'pending'
    BLOCKED = 'blocked'


class OgRoleQuerySet(QuerySet):
    def for_entity_type(self, entity_type):
        return self.filter(group_entity_type=entity_type)

    def get_or_create_default(self, entity_type, name):
        role, _ = self.get_or_create(
            group_entity_type=entity_type,
            name=name,
            defaults={'permissions': list(roles.DEFAULT_PERMISSIONS.get(name, []))},
        )
        return role


class OgRole(BaseModel):
    objects = OgRoleQuerySet.as_manager()

    group_entity_type = models.CharField(max_length=255)
    name = models.CharField(max_length=255)
    permissions = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = 'og_role'
        unique_together = (('group_entity_type', 'name'), )

    def __str__(self):
        return '{}-{}'.format(self.group_entity_type, self.name)

    def has_permission(self, permission):
        return permission in self.permissions

    def grant_permission(self, permission):
        if permission not in self.permissions:
            self.permissions.append(permission)

    def revoke_permission(self, permission):
        while permission in self.permissions:
            self.permissions.remove(permission)


class OgMembershipQuerySet(QuerySet):
    def for_group(self, group):
        return self.filter(
            group_content_type=ContentType.objects.get_for_model(group),
            group_id=group.pk,
        )

    def for_group_id(self, group_content_type, group_id):
        return self.filter(group_content_type=group_content_type, group_id=group_id)

    def with_states(self, states):
        return self.filter(state__in=states)

    def active(self):
        return self.with_states([MembershipState.ACTIVE])

    def with_role(self, name):
        return self.filter(roles__name=name)


class OgMembership(BaseModel):
    objects = OgMembershipQuerySet.as_manager()

    # memberships of deleted users are left in place, cleaning them up is up to the caller
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='og_memberships',
    )
    group_content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    group_id = models.PositiveIntegerField()
    group = GenericForeignKey('group_content_type', 'group_id')
    roles = models.ManyToManyField(OgRole, related_name='memberships', blank=True)
    state = models.CharField(
        max_length=20,
        choices=MembershipState.choices,
        default=MembershipState.ACTIVE,
    )

    class Meta:
        db_table = 'og_membership'
        unique_together = (('user', 'group_content_type', 'group_id'), )
        indexes = [models.Index(fields=['group_content_type', 'group_id'], name='og_membership_group_idx')]
        permissions = [
            ('administer_group', 'Administer all groups, regardless of membership'),
        ]

    def __str__(self):
        return 'Membership of user {} in {}:{}'.format(self.user_id, self.group_entity_type, self.group_id)

    @property
    def group_entity_type(self):
        return '{}.{}'.format(self.group_content_type.app_label, self.group_content_type.model)

    def is_active(self):
        return self.state == MembershipState.ACTIVE

    def get_permissions(self):
        permissions = set()
        for role in self.roles.all():
            permissions.update(role.permissions)
        return permissions

    def has_permission(self, permission):
        return permission in self.get_permissions()

    def add_role(self, role):
        self.roles.add(role)

    def remove_role(self, role):
        self.roles.remove(role)
