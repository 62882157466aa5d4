"""
Package manager and service manager wrappers
"""
from .apt import AptInstaller
from .systemd import ServiceController

__all__ = ["AptInstaller", "ServiceController"]
