"""
URL configuration for console pages.
"""

from django.urls import path

from console import views

urlpatterns = [
    path(
        "groups/",
        views.ListRemoveGroupsView.as_view(),
        name="activation-key-groups",
    ),
    path(
        "groups/add/",
        views.AddGroupsView.as_view(),
        name="activation-key-groups-add",
    ),
]
