"""
Console views for the server groups of an activation key.

Both pages are selectable lists driven by ListSelectionHelper:
- the key's groups, where selected groups are removed from the key
- the organization's other groups, where selected groups are added
"""

import logging
from typing import Any, Dict
from urllib.parse import urlencode

from asgiref.sync import async_to_sync
from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import BadRequest, PermissionDenied
from django.http import Http404, HttpRequest, HttpResponse, HttpResponseRedirect
from django.urls import reverse
from django.views import View

from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from activation_keys.application.commands.add_server_groups import AddServerGroupsCommand
from activation_keys.application.commands.remove_server_groups import RemoveServerGroupsCommand
from activation_keys.application.dto.activation_key_dto import ServerGroupListDTO
from activation_keys.application.handlers.list_server_groups_handlers import (
    ListAvailableServerGroupsHandler,
    ListKeyServerGroupsHandler,
)
from activation_keys.application.handlers.server_group_change_handlers import (
    AddServerGroupsHandler,
    RemoveServerGroupsHandler,
)
from activation_keys.application.queries.list_server_groups import (
    ListAvailableServerGroupsQuery,
    ListKeyServerGroupsQuery,
)
from activation_keys.infrastructure.repositories.django_activation_key_repository import (
    DjangoActivationKeyRepository,
)
from console.list_helpers import ListSelectionHelper
from console.selection import SessionSelection
from core.domain.exceptions import AccessDeniedError, DomainException, NotFoundError
from server_groups.infrastructure.repositories.django_server_group_repository import (
    DjangoServerGroupRepository,
)

logger = logging.getLogger(__name__)

# Initialize repositories (in production, use DI container)
_user_repo = DjangoUserRepository()
_activation_key_repo = DjangoActivationKeyRepository()
_server_group_repo = DjangoServerGroupRepository()

TOKEN_ID = "tid"


def _repositories() -> Dict[str, Any]:
    return {
        "user_repository": _user_repo,
        "activation_key_repository": _activation_key_repo,
        "server_group_repository": _server_group_repo,
    }


class DomainErrorMixin:
    """Translate domain exceptions into Django HTTP errors."""

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except NotFoundError as e:
            raise Http404(e.message) from e
        except AccessDeniedError as e:
            raise PermissionDenied(e.message) from e
        except DomainException as e:
            logger.warning("Domain exception: %s - %s", e.code, e.message)
            raise BadRequest(e.message) from e


class ServerGroupSelectionView(LoginRequiredMixin, DomainErrorMixin, View):
    """Base view for a selectable list of an activation key's server groups."""

    template_name = ""
    selection_name = ""
    success_url_name = "console:activation-key-groups"
    empty_selection_message = "No server groups selected."
    page_title = ""
    dispatch_label = ""

    def get(self, request: HttpRequest) -> HttpResponse:
        return ListSelectionHelper(self).execute(request)

    def post(self, request: HttpRequest) -> HttpResponse:
        return ListSelectionHelper(self).execute(request)

    def get_tid(self, request: HttpRequest) -> int:
        raw_tid = request.GET.get(TOKEN_ID) or request.POST.get(TOKEN_ID)
        try:
            return int(raw_tid)
        except (TypeError, ValueError):
            raise BadRequest(f"Invalid activation key id: {raw_tid!r}") from None

    def get_declaration(self, request: HttpRequest) -> str:
        """Each activation key gets its own selection."""
        return f"{self.selection_name}{self.get_tid(request)}"

    def get_extra_context(self) -> Dict[str, Any]:
        return {"page_title": self.page_title, "dispatch_label": self.dispatch_label}

    def get_result(self, request: HttpRequest) -> ServerGroupListDTO:
        raise NotImplementedError

    def handle_dispatch(self, request: HttpRequest, selection: SessionSelection) -> HttpResponse:
        raise NotImplementedError

    def success_redirect(self, tid: int) -> HttpResponse:
        url = reverse(self.success_url_name)
        return HttpResponseRedirect(f"{url}?{urlencode({TOKEN_ID: tid})}")


class ListRemoveGroupsView(ServerGroupSelectionView):
    """Lists the key's server groups; dispatch removes the selected ones."""

    template_name = "console/activation_keys/groups_list.html"
    selection_name = "activation_key_groups_remove"
    page_title = "Activation Key Groups"
    dispatch_label = "Remove Selected Groups"

    def get_result(self, request: HttpRequest) -> ServerGroupListDTO:
        handler = ListKeyServerGroupsHandler(**_repositories())
        query = ListKeyServerGroupsQuery(
            activation_key_id=self.get_tid(request), user_id=request.user.id
        )
        return async_to_sync(handler.handle)(query)

    def handle_dispatch(self, request: HttpRequest, selection: SessionSelection) -> HttpResponse:
        """
        Remove the selected server groups from the activation key.

        The message counts the selection, including groups that were
        not attached to the key.
        """
        handler = RemoveServerGroupsHandler(**_repositories())
        command = RemoveServerGroupsCommand(
            activation_key_id=self.get_tid(request),
            user_id=request.user.id,
            server_group_ids=list(selection),
        )
        result = async_to_sync(handler.handle)(command)

        selection.clear()
        messages.success(request, f"{result.count} server group(s) removed.")
        return self.success_redirect(result.activation_key_id)


class AddGroupsView(ServerGroupSelectionView):
    """Lists the organization's other server groups; dispatch adds the selected ones."""

    template_name = "console/activation_keys/groups_add.html"
    selection_name = "activation_key_groups_add"
    page_title = "Add Server Groups"
    dispatch_label = "Add Selected Groups"

    def get_result(self, request: HttpRequest) -> ServerGroupListDTO:
        handler = ListAvailableServerGroupsHandler(**_repositories())
        query = ListAvailableServerGroupsQuery(
            activation_key_id=self.get_tid(request), user_id=request.user.id
        )
        return async_to_sync(handler.handle)(query)

    def handle_dispatch(self, request: HttpRequest, selection: SessionSelection) -> HttpResponse:
        handler = AddServerGroupsHandler(**_repositories())
        command = AddServerGroupsCommand(
            activation_key_id=self.get_tid(request),
            user_id=request.user.id,
            server_group_ids=list(selection),
        )
        result = async_to_sync(handler.handle)(command)

        selection.clear()
        messages.success(request, f"{result.count} server group(s) added.")
        return self.success_redirect(result.activation_key_id)
