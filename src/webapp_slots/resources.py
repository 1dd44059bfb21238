"""
App Service resources for the slot sample.

Every call waits for its long-running operation (``poller.result()``) before
returning, so the sample never moves on while the control plane is still busy.

Resources created:
    - Resource Group
    - App Service Plan (Standard S1, one per web app; slots need Standard or above)
    - Web App (.NET Framework 4)
    - Deployment slot with auto swap to production
    - Source control binding on the slot
"""

import logging

from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceNotFoundError,
)
from azure.mgmt.resource.resources.models import ResourceGroup
from azure.mgmt.web.models import (
    AppServicePlan,
    CsmSlotEntity,
    Site,
    SiteConfig,
    SiteSourceControl,
    SkuDescription,
)

from webapp_slots.clients import AzureClients
from webapp_slots.naming import app_host, plan_name, slot_host
from webapp_slots.probe import check_address

logger = logging.getLogger(__name__)

PRODUCTION_SLOT = "production"


def describe_site(site: Site) -> str:
    """Multi-line summary of a web app or slot for the log."""
    lines = [
        f"Web app: {site.id}",
        f"\tName: {site.name}",
        f"\tResource group: {site.resource_group}",
        f"\tRegion: {site.location}",
        f"\tState: {site.state}",
        f"\tDefault hostname: {site.default_host_name}",
        f"\tApp service plan: {site.server_farm_id}",
    ]
    for host in site.enabled_host_names or []:
        lines.append(f"\tHost name: {host}")
    config = site.site_config
    if config is not None:
        lines.append(f"\tNet framework version: {config.net_framework_version}")
        if config.auto_swap_slot_name:
            lines.append(f"\tAuto swap slot: {config.auto_swap_slot_name}")
    return "\n".join(lines)


def slot_short_name(slot: Site) -> str:
    # slot resources are named "<app>/<slot>"
    return slot.name.split("/")[-1]


def _curl(host: str) -> None:
    logger.info(f"CURLing {host}...")
    logger.info(check_address(f"http://{host}"))


# ==========================================
# Resource Group
# ==========================================

def create_resource_group(clients: AzureClients, name: str, region: str) -> ResourceGroup:
    logger.info(f"Creating resource group {name} in {region}...")
    try:
        rg = clients.resource.resource_groups.create_or_update(
            name, ResourceGroup(location=region)
        )
    except ClientAuthenticationError as e:
        logger.error(f"PERMISSION DENIED creating Resource Group: {e.message}")
        raise
    logger.info(f"Created resource group {rg.name}")
    return rg


def delete_resource_group(clients: AzureClients, name: str) -> None:
    """
    Delete the resource group and everything in it, waiting for completion.

    A group that is already gone is logged and ignored.
    """
    try:
        clients.resource.resource_groups.begin_delete(name).result()
    except ResourceNotFoundError:
        logger.info(f"Resource group not found (already deleted): {name}")


# ==========================================
# Web App
# ==========================================

def create_app_service_plan(clients: AzureClients, rg_name: str, name: str, region: str) -> AppServicePlan:
    logger.debug(f"Creating App Service Plan: {name}")
    params = AppServicePlan(
        location=region,
        sku=SkuDescription(name="S1", tier="Standard", size="S1", family="S", capacity=1),
    )
    poller = clients.web.app_service_plans.begin_create_or_update(
        resource_group_name=rg_name,
        name=name,
        app_service_plan=params,
    )
    return poller.result()


def create_web_app(clients: AzureClients, rg_name: str, app_name: str, region: str) -> Site:
    """
    Create a web app on its own Standard S1 plan and probe it.

    Raises:
        HttpResponseError: If creation fails
        ClientAuthenticationError: If permission denied
    """
    logger.info(f"Creating web app {app_name} with master branch...")

    try:
        plan = create_app_service_plan(clients, rg_name, plan_name(app_name), region)
        params = Site(
            location=region,
            server_farm_id=plan.id,
            site_config=SiteConfig(net_framework_version="v4.0"),
        )
        poller = clients.web.web_apps.begin_create_or_update(
            resource_group_name=rg_name,
            name=app_name,
            site_envelope=params,
        )
        site = poller.result()
    except ClientAuthenticationError as e:
        logger.error(f"PERMISSION DENIED creating Web App: {e.message}")
        raise
    except HttpResponseError as e:
        logger.error(f"HTTP error creating Web App {app_name}: {e.status_code} - {e.message}")
        raise

    logger.info(f"Created web app {site.name}")
    logger.info(describe_site(site))

    _curl(app_host(app_name))
    return site


# ==========================================
# Deployment Slot
# ==========================================

def create_slot(clients: AzureClients, rg_name: str, app: Site, slot_name: str, region: str) -> Site:
    logger.info(f"Creating a slot {slot_name} with auto swap turned on...")

    params = Site(
        location=region,
        server_farm_id=app.server_farm_id,
        site_config=SiteConfig(auto_swap_slot_name=PRODUCTION_SLOT),
    )
    try:
        poller = clients.web.web_apps.begin_create_or_update_slot(
            resource_group_name=rg_name,
            name=app.name,
            slot=slot_name,
            site_envelope=params,
        )
        slot = poller.result()
    except HttpResponseError as e:
        logger.error(f"HTTP error creating slot {slot_name} on {app.name}: {e.status_code} - {e.message}")
        raise

    logger.info(f"Created slot {slot.name}")
    logger.info(describe_site(slot))
    return slot


def deploy_to_staging(
    clients: AzureClients,
    rg_name: str,
    app: Site,
    slot: Site,
    repo_url: str,
    branch: str,
) -> SiteSourceControl:
    """
    Bind the slot to ``branch`` of ``repo_url`` and wait for the deployment.

    With auto swap on, App Service promotes the slot to production once the
    deployment finishes.
    """
    name = slot_short_name(slot)
    logger.info(f"Deploying {branch} branch to slot {name}...")

    source = SiteSourceControl(
        repo_url=repo_url,
        branch=branch,
        is_manual_integration=True,
    )
    try:
        poller = clients.web.web_apps.begin_create_or_update_source_control_slot(
            resource_group_name=rg_name,
            name=app.name,
            slot=name,
            site_source_control=source,
        )
        result = poller.result()
    except HttpResponseError as e:
        logger.error(f"HTTP error deploying to slot {name} of {app.name}: {e.status_code} - {e.message}")
        raise

    logger.info(f"Deployed {branch} branch to slot {name}")

    _curl(slot_host(app.name, name))
    _curl(app_host(app.name))
    return result


def swap_production_back_to_slot(
    clients: AzureClients,
    rg_name: str,
    app: Site,
    slot: Site,
    preserve_vnet: bool = True,
) -> None:
    """Swap production with ``slot``, undoing the auto swap."""
    name = slot_short_name(slot)
    logger.info(f"Manually swap production slot back to {name}...")

    try:
        clients.web.web_apps.begin_swap_slot_with_production(
            resource_group_name=rg_name,
            name=app.name,
            slot_swap_entity=CsmSlotEntity(target_slot=name, preserve_vnet=preserve_vnet),
        ).result()
    except HttpResponseError as e:
        logger.error(f"HTTP error swapping {app.name} with slot {name}: {e.status_code} - {e.message}")
        raise

    logger.info(f"Swapped production slot back to {name}")

    _curl(app_host(app.name))
