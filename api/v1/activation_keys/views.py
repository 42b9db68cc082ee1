"""
Activation key API views.

These endpoints let API clients:
- List the server groups of an activation key
- List the organization's server groups available to a key
- Remove server groups from and add server groups to a key
"""

from dataclasses import asdict

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from activation_keys.application.commands.add_server_groups import AddServerGroupsCommand
from activation_keys.application.commands.remove_server_groups import RemoveServerGroupsCommand
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
from api.exceptions import APIError
from api.v1.activation_keys.serializers import (
    GroupChangeResponseSerializer,
    ServerGroupListResponseSerializer,
    ServerGroupSelectionRequestSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from server_groups.infrastructure.repositories.django_server_group_repository import (
    DjangoServerGroupRepository,
)

# Initialize repositories (in production, use DI container)
_user_repo = DjangoUserRepository()
_activation_key_repo = DjangoActivationKeyRepository()
_server_group_repo = DjangoServerGroupRepository()

tracer = get_tracer(__name__)

ERROR_RESPONSES = {
    400: {"description": "Bad Request"},
    401: {"description": "Unauthorized - Missing or invalid API key"},
    403: {"description": "Forbidden - Missing role or server group access"},
    404: {"description": "Not Found"},
}


def _handler_kwargs():
    return {
        "user_repository": _user_repo,
        "activation_key_repository": _activation_key_repo,
        "server_group_repository": _server_group_repo,
    }


def _api_user_id(request: Request) -> int:
    """Return the id of the user authenticated by API key middleware."""
    user = getattr(request, "api_user", None)
    if user is None:
        raise APIError(
            "Missing API key", code="not_authenticated", status_code=status.HTTP_401_UNAUTHORIZED
        )
    return user.id


def _validation_error(serializer) -> Response:
    return Response(
        {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request",
                "details": serializer.errors,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class ListKeyServerGroupsView(APIView):
    """View for listing the server groups of an activation key."""

    @extend_schema(
        operation_id="list_activation_key_server_groups",
        summary="List Activation Key Server Groups",
        description=(
            "List the server groups attached to an activation key. Groups the "
            "caller may not administer are included with can_access false."
        ),
        tags=["Activation Keys"],
        responses={200: ServerGroupListResponseSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request, tid: int) -> Response:
        """List the key's server groups."""
        handler = ListKeyServerGroupsHandler(**_handler_kwargs())
        query = ListKeyServerGroupsQuery(activation_key_id=tid, user_id=_api_user_id(request))
        result = async_to_sync(handler.handle)(query)
        return Response(ServerGroupListResponseSerializer(asdict(result)).data)


class ListAvailableServerGroupsView(APIView):
    """View for listing server groups that can be added to an activation key."""

    @extend_schema(
        operation_id="list_available_server_groups",
        summary="List Available Server Groups",
        description="List the organization's server groups not attached to the activation key.",
        tags=["Activation Keys"],
        responses={200: ServerGroupListResponseSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request, tid: int) -> Response:
        """List server groups available to the key."""
        handler = ListAvailableServerGroupsHandler(**_handler_kwargs())
        query = ListAvailableServerGroupsQuery(activation_key_id=tid, user_id=_api_user_id(request))
        result = async_to_sync(handler.handle)(query)
        return Response(ServerGroupListResponseSerializer(asdict(result)).data)


class RemoveServerGroupsView(APIView):
    """View for removing server groups from an activation key."""

    @extend_schema(
        operation_id="remove_activation_key_server_groups",
        summary="Remove Server Groups",
        description=(
            "Remove the given server groups from an activation key. Every group "
            "must be administered by the caller, otherwise the key is left unchanged."
        ),
        tags=["Activation Keys"],
        request=ServerGroupSelectionRequestSerializer,
        responses={200: GroupChangeResponseSerializer, **ERROR_RESPONSES},
    )
    def post(self, request: Request, tid: int) -> Response:
        """Remove server groups from the key."""
        return async_to_sync(self._handle_remove)(request, tid)

    async def _handle_remove(self, request: Request, tid: int) -> Response:
        """Async handler for remove server groups."""
        with tracer.start_as_current_span("api_remove_server_groups") as span:
            span.set_attribute("operation", "remove_server_groups")
            span.set_attribute("activation_key.id", tid)

            serializer = ServerGroupSelectionRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return _validation_error(serializer)

            handler = RemoveServerGroupsHandler(**_handler_kwargs())
            command = RemoveServerGroupsCommand(
                activation_key_id=tid,
                user_id=_api_user_id(request),
                server_group_ids=serializer.validated_data["server_group_ids"],
            )
            result = await handler.handle(command)

            span.set_attribute("server_groups.count", result.count)
            span.set_status(Status(StatusCode.OK))

            data = asdict(result)
            data["message"] = f"{result.count} server group(s) removed."
            return Response(GroupChangeResponseSerializer(data).data, status=status.HTTP_200_OK)


class AddServerGroupsView(APIView):
    """View for adding server groups to an activation key."""

    @extend_schema(
        operation_id="add_activation_key_server_groups",
        summary="Add Server Groups",
        description="Attach the given server groups to an activation key.",
        tags=["Activation Keys"],
        request=ServerGroupSelectionRequestSerializer,
        responses={200: GroupChangeResponseSerializer, **ERROR_RESPONSES},
    )
    def post(self, request: Request, tid: int) -> Response:
        """Add server groups to the key."""
        return async_to_sync(self._handle_add)(request, tid)

    async def _handle_add(self, request: Request, tid: int) -> Response:
        """Async handler for add server groups."""
        with tracer.start_as_current_span("api_add_server_groups") as span:
            span.set_attribute("operation", "add_server_groups")
            span.set_attribute("activation_key.id", tid)

            serializer = ServerGroupSelectionRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return _validation_error(serializer)

            handler = AddServerGroupsHandler(**_handler_kwargs())
            command = AddServerGroupsCommand(
                activation_key_id=tid,
                user_id=_api_user_id(request),
                server_group_ids=serializer.validated_data["server_group_ids"],
            )
            result = await handler.handle(command)

            span.set_attribute("server_groups.count", result.count)
            span.set_status(Status(StatusCode.OK))

            data = asdict(result)
            data["message"] = f"{result.count} server group(s) added."
            return Response(GroupChangeResponseSerializer(data).data, status=status.HTTP_200_OK)
