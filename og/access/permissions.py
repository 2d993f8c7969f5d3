from rest_framework import permissions

from og.access import resolver

OPERATIONS = {
    'GET': 'view',
    'HEAD': 'view',
    'OPTIONS': 'view',
    'PUT': 'update',
    'PATCH': 'update',
    'DELETE': 'delete',
}


class OgEntityAccess(permissions.BasePermission):
    """Denies only what is forbidden for groups and group content, the other permission classes decide the rest"""
    message = 'You do not have access to this group content.'

    def get_operation(self, request, view):
        return getattr(view, 'og_operation', None) or OPERATIONS.get(request.method, 'update')

    def has_object_permission(self, request, view, obj):
        result = resolver.resolve(self.get_operation(request, view), obj, request.user)
        return not result.is_forbidden()


class OgCreateAccess(permissions.BasePermission):
    """Needs ``og_entity_type`` and ``og_bundle`` (or ``get_og_bundle(request)``) on the view"""
    message = 'You cannot create content in any group.'

    def has_permission(self, request, view):
        if request.method != 'POST':
            return True
        bundle = view.get_og_bundle(request) if hasattr(view, 'get_og_bundle') else view.og_bundle
        result = resolver.resolve_create(request.user, view.og_entity_type, bundle)
        return not result.is_forbidden()
