from django.contrib.auth import get_user_model
from django.http import Http404
from rest_framework import mixins, status
from rest_framework.permissions import BasePermission, IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from og.access import resolver
from og.groups import entities, roles
from og.groups.membership import membership_manager
from og.groups.models import OgMembership
from og.groups.serializers import GroupInfoSerializer, OgMembershipSerializer


def get_group_or_404(entity_type, entity_id):
    group = entities.load_entity(entity_type, entity_id)
    if group is None or not entities.is_group(group):
        raise Http404()
    return group


class CanManageMembers(BasePermission):
    message = 'You need to be allowed to manage the members of this group'

    def has_permission(self, request, view):
        # the admin pages need an explicit allow, neutral is not enough
        return resolver.resolve(roles.MANAGE_MEMBERS, view.get_group(), request.user).is_allowed()


class GroupAdminMixin:
    permission_classes = (IsAuthenticated, CanManageMembers)

    def get_group(self):
        if not hasattr(self, '_group'):
            self._group = get_group_or_404(self.kwargs['entity_type'], self.kwargs['entity_id'])
        return self._group


class GroupAdminViewSet(GroupAdminMixin, GenericViewSet):
    """Group administration - overview of one group"""
    serializer_class = GroupInfoSerializer

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_group())
        return Response(serializer.data)


class GroupMembershipAdminViewSet(
        GroupAdminMixin,
        mixins.ListModelMixin,
        mixins.CreateModelMixin,
        GenericViewSet,
):
    """
    Group administration - memberships

    Deleting a membership that does not exist is not an error.
    """
    serializer_class = OgMembershipSerializer
    lookup_field = 'user_id'

    def get_queryset(self):
        return OgMembership.objects.for_group(self.get_group()).prefetch_related('roles').order_by('id')

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if 'entity_type' in self.kwargs:
            context['group'] = self.get_group()
        return context

    def destroy(self, request, *args, **kwargs):
        user = get_user_model().objects.filter(pk=self.kwargs['user_id']).first()
        if user is not None:
            membership_manager.delete_membership(self.get_group(), user)
        return Response(status=status.HTTP_204_NO_CONTENT)
