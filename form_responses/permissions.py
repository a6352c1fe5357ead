from rest_framework import permissions

from accounts.services import accounts_service


class IsAccountMember(permissions.BasePermission):
    """
    Object permission for accounts and anything that belongs to one.
    Staff users may access every account.
    """

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        account = getattr(obj, "account", obj)
        return accounts_service.is_member(account, request.user)
