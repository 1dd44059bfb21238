"""
Azure App Service sample for managing web app slots.

 - Create 3 web apps, each on its own App Service plan
 - For each of the web apps, create a staging slot with auto swap to production
 - For each of the web apps, deploy the staging branch to the slot
   (auto swap then promotes it to production)
 - For each of the web apps, swap production back to the slot (something went wrong)
 - Delete the resource group
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from webapp_slots import resources
from webapp_slots.clients import AzureClients, build_clients
from webapp_slots.config import MissingSettingsError, Settings, load_settings
from webapp_slots.naming import SampleNames

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    # the SDK's HTTP policy logs every request/response at INFO
    logging.getLogger("azure").setLevel(logging.DEBUG if debug else logging.WARNING)


def run_sample(
    clients: AzureClients,
    settings: Settings,
    app_count: int = 3,
    names: Optional[SampleNames] = None,
) -> None:
    names = names or SampleNames.generate(app_count)
    region = settings.region
    rg = None

    try:
        rg = resources.create_resource_group(clients, names.resource_group, region)

        # ============================================================
        # Create the web apps, each with a new App Service plan

        apps = [
            resources.create_web_app(clients, rg.name, app_name, region)
            for app_name in names.web_apps
        ]

        # ============================================================
        # Create a deployment slot under each web app with auto swap

        slots = [
            resources.create_slot(clients, rg.name, app, settings.slot_name, region)
            for app in apps
        ]

        # ============================================================
        # Deploy the staging branch to the slot

        for app, slot in zip(apps, slots):
            resources.deploy_to_staging(
                clients, rg.name, app, slot, settings.repo_url, settings.repo_branch
            )

        # ============================================================
        # Swap back

        for app, slot in zip(apps, slots):
            resources.swap_production_back_to_slot(clients, rg.name, app, slot)

    finally:
        _cleanup(clients, rg, names.resource_group)


def _cleanup(clients: AzureClients, rg, rg_name: str) -> None:
    if rg is None:
        logger.info("Did not create any resources in Azure. No clean up is necessary")
        return
    try:
        logger.info(f"Deleting Resource Group: {rg_name}")
        resources.delete_resource_group(clients, rg_name)
        logger.info(f"Deleted Resource Group: {rg_name}")
    except Exception:
        logger.exception(f"Failed to delete Resource Group: {rg_name}")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="webapp-slots",
        description="Create web apps with staging slots, deploy, swap back and clean up",
    )
    parser.add_argument("--region", "-l", help="Azure region (default: $REGION or eastus)")
    parser.add_argument("--apps", "-n", type=int, default=3, help="Number of web apps to create")
    parser.add_argument("--debug", action="store_true", help="Verbose logging, including the Azure SDK")
    args = parser.parse_args(argv)
    if args.apps < 1:
        parser.error("--apps must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.debug)

    try:
        settings = load_settings()
    except MissingSettingsError as e:
        logger.error(str(e))
        return 1

    if args.region:
        settings = replace(settings, region=args.region)

    try:
        clients = build_clients(settings)
        run_sample(clients, settings, app_count=args.apps)
    except Exception:
        logger.exception("Sample failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
