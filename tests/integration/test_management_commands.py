"""
Integration tests for management commands.
"""

from io import StringIO

import pytest
from django.core.management import call_command

from accounts.infrastructure.models import ApiKey, UserProfile
from activation_keys.infrastructure.models import ActivationKey
from activation_keys.domain.events import ServerGroupsRemovedFromKey
from core.infrastructure.event_handlers import AuditLogEventHandler
from core.infrastructure.events import event_bus


@pytest.mark.django_db
@pytest.mark.integration
class TestCreateDemoData:
    """Integration tests for the create_demo_data command."""

    def test_creates_demo_data(self):
        out = StringIO()

        call_command("create_demo_data", stdout=out)

        key = ActivationKey.objects.get()
        assert key.server_groups.count() == 3
        assert UserProfile.objects.filter(is_org_admin=True).count() == 1
        assert UserProfile.objects.filter(is_activation_key_admin=True).count() == 1
        assert ApiKey.objects.count() == 1
        assert f"?tid={key.id}" in out.getvalue()

    def test_running_twice_reuses_data(self):
        call_command("create_demo_data", stdout=StringIO())
        call_command("create_demo_data", stdout=StringIO())

        assert ActivationKey.objects.count() == 1


def test_register_event_handlers_command():
    out = StringIO()

    call_command("register_event_handlers", stdout=out)

    assert "ServerGroupsRemovedFromKey" in out.getvalue()
    assert any(
        isinstance(handler, AuditLogEventHandler)
        for handler in event_bus.handlers_for(ServerGroupsRemovedFromKey)
    )
