"""
Integration tests for the add server groups page.
"""

import pytest
from django.urls import reverse


def add_url(tid):
    return f"{reverse('console:activation-key-groups-add')}?tid={tid}"


@pytest.mark.django_db
@pytest.mark.integration
class TestAddGroupsView:
    """Integration tests for AddGroupsView."""

    def test_lists_groups_not_on_key(self, client, org_admin, activation_key, spare_group):
        client.force_login(org_admin)

        response = client.get(add_url(activation_key.id))

        assert response.status_code == 200
        assert [row.item.name for row in response.context["rows"]] == ["Spare Hosts"]

    def test_add_selected_groups(
        self, client, key_admin, activation_key, spare_group, group_names
    ):
        client.force_login(key_admin)

        response = client.post(
            add_url(activation_key.id),
            {
                "items_on_page": [spare_group.id],
                "items_selected": [spare_group.id],
                "dispatch": "1",
            },
        )

        assert response.status_code == 302
        assert response["Location"] == (
            f"{reverse('console:activation-key-groups')}?tid={activation_key.id}"
        )
        assert "Spare Hosts" in group_names(activation_key)

        page = client.get(response["Location"])
        assert "1 server group(s) added." in page.content.decode()

    def test_foreign_group_not_found(self, client, org_admin, activation_key, foreign_group):
        client.force_login(org_admin)

        response = client.post(
            add_url(activation_key.id),
            {
                "items_on_page": [foreign_group.id],
                "items_selected": [foreign_group.id],
                "dispatch": "1",
            },
        )

        assert response.status_code == 404
