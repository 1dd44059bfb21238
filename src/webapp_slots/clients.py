import logging
from dataclasses import dataclass

from azure.identity import ClientSecretCredential
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.web import WebSiteManagementClient

from webapp_slots.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class AzureClients:
    subscription_id: str
    resource: ResourceManagementClient
    web: WebSiteManagementClient


def build_clients(settings: Settings) -> AzureClients:
    """Authenticate with the service principal and build the management clients."""
    cred = ClientSecretCredential(
        tenant_id=settings.tenant_id,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
    )
    clients = AzureClients(
        subscription_id=settings.subscription_id,
        resource=ResourceManagementClient(cred, settings.subscription_id),
        web=WebSiteManagementClient(cred, settings.subscription_id),
    )
    logger.info(f"Selected subscription: /subscriptions/{settings.subscription_id}")
    return clients
