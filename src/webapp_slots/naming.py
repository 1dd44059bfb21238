"""
Resource names and public host names for the slot sample.

Names are random so repeated runs in one subscription don't collide:
    - Resource Group:   rg1NEMV_xxxxxxxx
    - Web App:          webapp{n}-xxxxxxxx (2-60 chars, alphanumeric and hyphens)
    - App Service Plan: {web_app}-plan
"""

import random
import string
from dataclasses import dataclass, field
from typing import List

SUFFIX = ".azurewebsites.net"

_ALPHABET = string.ascii_lowercase + string.digits


def random_name(prefix: str, max_len: int = 30) -> str:
    """Prefix followed by random lowercase alphanumerics, cut to max_len."""
    if len(prefix) >= max_len:
        return prefix[:max_len]
    tail = "".join(random.choice(_ALPHABET) for _ in range(max_len - len(prefix)))
    return (prefix + tail)[:max_len]


def plan_name(app_name: str) -> str:
    return f"{app_name}-plan"


def app_host(app_name: str) -> str:
    return app_name + SUFFIX


def slot_host(app_name: str, slot_name: str) -> str:
    return f"{app_name}-{slot_name}{SUFFIX}"


@dataclass
class SampleNames:
    resource_group: str
    web_apps: List[str] = field(default_factory=list)

    @classmethod
    def generate(cls, count: int = 3) -> "SampleNames":
        if count < 1:
            raise ValueError("count must be at least 1")
        return cls(
            resource_group=random_name("rg1NEMV_", 24),
            web_apps=[random_name(f"webapp{i}-", 20) for i in range(1, count + 1)],
        )
