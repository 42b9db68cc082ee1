"""
URL configuration for activation key API endpoints.
"""

from django.urls import path

from api.v1.activation_keys import views

urlpatterns = [
    path(
        "<int:tid>/server-groups",
        views.ListKeyServerGroupsView.as_view(),
        name="list-server-groups",
    ),
    path(
        "<int:tid>/server-groups/available",
        views.ListAvailableServerGroupsView.as_view(),
        name="available-server-groups",
    ),
    path(
        "<int:tid>/server-groups/remove",
        views.RemoveServerGroupsView.as_view(),
        name="remove-server-groups",
    ),
    path(
        "<int:tid>/server-groups/add",
        views.AddServerGroupsView.as_view(),
        name="add-server-groups",
    ),
]
