import os
import sys
import pytest
from unittest.mock import MagicMock

# Make src importable without an editable install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from webapp_slots.config import Settings


def make_site(name, farm_id="/subscriptions/sub-12345/serverfarms/plan"):
    """Site-like mock; MagicMock(name=...) would name the mock, not set .name."""
    site = MagicMock()
    site.name = name
    site.server_farm_id = farm_id
    site.enabled_host_names = []
    return site


@pytest.fixture(autouse=True)
def no_real_probes(monkeypatch):
    """Keep tests from reaching *.azurewebsites.net."""
    probe = MagicMock(return_value="200 ok")
    monkeypatch.setattr("webapp_slots.resources.check_address", probe)
    return probe


@pytest.fixture
def settings():
    return Settings(
        client_id="client-id",
        client_secret="s3cret",
        tenant_id="tenant-id",
        subscription_id="sub-12345",
    )


@pytest.fixture
def mock_clients():
    """AzureClients stand-in whose pollers return named sites."""
    clients = MagicMock()
    clients.subscription_id = "sub-12345"

    plan = MagicMock()
    plan.id = "/subscriptions/sub-12345/resourceGroups/rg/providers/Microsoft.Web/serverfarms/plan"
    clients.web.app_service_plans.begin_create_or_update.return_value.result.return_value = plan

    def create_app(resource_group_name, name, site_envelope):
        poller = MagicMock()
        poller.result.return_value = make_site(name, site_envelope.server_farm_id)
        return poller

    def create_slot(resource_group_name, name, slot, site_envelope):
        poller = MagicMock()
        poller.result.return_value = make_site(f"{name}/{slot}", site_envelope.server_farm_id)
        return poller

    clients.web.web_apps.begin_create_or_update.side_effect = create_app
    clients.web.web_apps.begin_create_or_update_slot.side_effect = create_slot

    def create_rg(name, parameters):
        rg = MagicMock()
        rg.name = name
        rg.location = parameters.location
        return rg

    clients.resource.resource_groups.create_or_update.side_effect = create_rg
    return clients
