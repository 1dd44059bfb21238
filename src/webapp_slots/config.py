"""
Settings for the slot sample, read from the environment.

Prerequisites
-------------
• SERVICE_PRINCIPAL creds in env (CLIENT_ID / CLIENT_SECRET / TENANT_ID)
• SUBSCRIPTION_ID env var
• AZURE_-prefixed names (AZURE_CLIENT_ID, ...) are accepted too
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_REGION    = "eastus"
DEFAULT_REPO_URL  = "https://github.com/jianghaolu/azure-site-test.git"
DEFAULT_BRANCH    = "staging"
DEFAULT_SLOT_NAME = "staging"

REQUIRED = ("CLIENT_ID", "CLIENT_SECRET", "TENANT_ID", "SUBSCRIPTION_ID")


class MissingSettingsError(ValueError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Missing env vars: {', '.join(self.missing)}"
        )


@dataclass(frozen=True)
class Settings:
    client_id: str
    client_secret: str
    tenant_id: str
    subscription_id: str
    region: str = DEFAULT_REGION
    repo_url: str = DEFAULT_REPO_URL
    repo_branch: str = DEFAULT_BRANCH
    slot_name: str = DEFAULT_SLOT_NAME

    def __repr__(self) -> str:
        # keep the secret out of logs
        return (f"Settings(client_id={self.client_id!r}, tenant_id={self.tenant_id!r}, "
                f"subscription_id={self.subscription_id!r}, region={self.region!r})")


def _lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name) or env.get(f"AZURE_{name}")
    return value.strip() if value else None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from ``env`` (defaults to os.environ after loading .env).

    Raises MissingSettingsError listing every required variable that is unset.
    """
    if env is None:
        load_dotenv()                   # picks up .env or Codespace secrets
        env = os.environ

    values = {name: _lookup(env, name) for name in REQUIRED}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise MissingSettingsError(missing)

    return Settings(
        client_id       = values["CLIENT_ID"],
        client_secret   = values["CLIENT_SECRET"],
        tenant_id       = values["TENANT_ID"],
        subscription_id = values["SUBSCRIPTION_ID"],
        region          = env.get("REGION") or DEFAULT_REGION,
        repo_url        = env.get("REPO_URL") or DEFAULT_REPO_URL,
        repo_branch     = env.get("REPO_BRANCH") or DEFAULT_BRANCH,
    )
