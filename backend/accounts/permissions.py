from rest_framework import permissions


class HasRole(permissions.BasePermission):
    """Allow users whose `role` is listed on the view.

    Views declare `allowed_roles` (for every method) and optionally
    `read_roles`, which, when set, replaces `allowed_roles` for safe methods.
    An empty role list means any authenticated user. Superusers always pass.
    """

    message = 'Your role does not allow this action.'

    def has_permission(self, request, view):
        user = getattr(request, 'user', None)
        if not user or not user.is_authenticated:
            return False
        if getattr(user, 'is_superuser', False):
            return True

        roles = getattr(view, 'allowed_roles', None) or ()
        if request.method in permissions.SAFE_METHODS:
            read_roles = getattr(view, 'read_roles', None)
            if read_roles is not None:
                roles = read_roles

        if not roles:
            return True
        return getattr(user, 'role', None) in set(roles)
