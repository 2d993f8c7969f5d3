from django.core.exceptions import PermissionDenied

from og.access import resolver

PERMISSION_PREFIX = 'og.'


class OgAccessBackend:
    """
    Object permissions for groups and group content, e.g. ``user.has_perm('og.update', node)``

    Allowed grants the permission, forbidden stops all other backends, otherwise
    the other backends decide.
    """

    def authenticate(self, request, **kwargs):
        return None

    def has_perm(self, user_obj, perm, obj=None):
        if obj is None or not perm.startswith(PERMISSION_PREFIX):
            return False
        result = resolver.resolve(perm[len(PERMISSION_PREFIX):], obj, user_obj)
        if result.is_forbidden():
            raise PermissionDenied
        return result.is_allowed()
