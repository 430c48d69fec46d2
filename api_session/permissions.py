from rest_framework.permissions import BasePermission

from .utils.mixins import TokenizerWorkMixin


class BearerTokenPermission(BasePermission, TokenizerWorkMixin):
    """Permission - запрос несет заголовок 'Authorization: Bearer <token>'."""

    def has_permission(self, request, view) -> bool:
        self._get_bearer_token(request)

        return True
