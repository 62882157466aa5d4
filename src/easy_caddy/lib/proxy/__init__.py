"""
Proxy module initialization
"""
from .base import ProxyEntry, ProxyError, InstallError
from .caddy import CaddyProxy
from .caddyfile import CaddyfileWriter
from .registry import ProxyRegistry

__all__ = [
    "ProxyEntry",
    "ProxyError",
    "InstallError",
    "CaddyProxy",
    "CaddyfileWriter",
    "ProxyRegistry"
]
