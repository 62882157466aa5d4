"""
systemd service controller for Caddy
"""
import logging

from ..utils import run_command

logger = logging.getLogger(__name__)

class ServiceController:
    """Thin wrapper around systemctl for a single unit"""

    def __init__(self, service_name: str = "caddy"):
        self.service_name = service_name

    def restart(self) -> bool:
        """Restart the service. Returns True if systemctl exited cleanly."""
        logger.info(f"Restarting {self.service_name}")
        return run_command(["systemctl", "restart", self.service_name]).returncode == 0

    def stop(self) -> bool:
        """Stop the service. Returns True if systemctl exited cleanly."""
        logger.info(f"Stopping {self.service_name}")
        return run_command(["systemctl", "stop", self.service_name]).returncode == 0

    def status(self) -> str:
        """Raw `systemctl status` output, unparsed"""
        result = run_command(["systemctl", "status", self.service_name, "--no-pager"], capture=True)
        return (result.stdout or "") + (result.stderr or "")

    def is_active(self) -> bool:
        """Query systemd for the unit's active state"""
        result = run_command(["systemctl", "is-active", self.service_name], capture=True)
        return result.stdout.strip() == "active"
