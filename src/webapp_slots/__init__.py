"""Provision App Service web apps with staging slots, deploy, swap, tear down."""

__version__ = "0.1.0"
