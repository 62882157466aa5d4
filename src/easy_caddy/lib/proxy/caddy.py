"""
Caddy reverse proxy manager for easy-caddy
"""
import logging
from typing import List, Optional, Tuple

from ..config import Config
from ..system.apt import AptInstaller
from ..system.systemd import ServiceController
from .. import utils
from .base import ProxyEntry, ProxyError
from .caddyfile import CaddyfileWriter
from .registry import ProxyRegistry

logger = logging.getLogger(__name__)

class CaddyProxy:
    """
    Manages reverse proxies on a systemd-run Caddy

    The registry file and the live Caddyfile are kept in step: the
    Caddyfile is always the backup snapshot followed by one block per
    registry line, in registry order.
    """

    def __init__(self, config: Config,
                 service: Optional[ServiceController] = None,
                 installer: Optional[AptInstaller] = None):
        """
        Initialize Caddy proxy manager

        Args:
            config: Application configuration
            service: Service controller (built from config if omitted)
            installer: Package installer (built from config if omitted)
        """
        self.config = config
        self.registry = ProxyRegistry(config.registry_file)
        self.caddyfile = CaddyfileWriter(config.caddyfile, config.backup_file)
        self.service = service or ServiceController(config.service_name)
        self.installer = installer or AptInstaller(config)

    def upstream_url(self, port) -> str:
        """Loopback upstream for a port"""
        return f"http://{self.config.upstream_host}:{str(port).strip()}"

    def probe(self, port) -> bool:
        """Check if the upstream port accepts TCP connections"""
        return utils.is_port_open(port, host=self.config.upstream_host,
                                  timeout=self.config.probe_timeout)

    def add(self, port, pattern: Optional[str] = None) -> Tuple[ProxyEntry, bool]:
        """
        Add a reverse proxy to a local port

        Args:
            port: Upstream port as typed (not validated)
            pattern: Host match rule (defaults to config.default_pattern)

        Returns:
            Tuple of (new entry, whether the upstream is reachable)

        Raises:
            ProxyError: If no port was given
        """
        if port is None or not str(port).strip():
            raise ProxyError("No port given")

        pattern = (pattern or "").strip() or self.config.default_pattern
        upstream = self.upstream_url(port)
        logger.info(f"Adding reverse proxy {pattern} -> {upstream}")

        self.caddyfile.ensure_backup()
        entry = ProxyEntry(index=0, pattern=pattern, upstream_url=upstream)
        self.caddyfile.append_block(entry)
        entry = self.registry.append(pattern, upstream)

        self.service.restart()
        return entry, self.probe(port)

    def list(self) -> List[Tuple[ProxyEntry, Optional[bool]]]:
        """
        List registered proxies with a live probe of each upstream

        Returns:
            List of (entry, running) where running is None when the
            entry has no numeric port to probe
        """
        results = []
        for entry in self.registry.entries():
            port = entry.upstream_port
            running = self.probe(port) if port is not None else None
            results.append((entry, running))
        return results

    def delete(self, index) -> bool:
        """
        Delete the proxy at a 1-based position and rebuild the Caddyfile

        The restore, replay and restart always run, even when the index
        matched nothing.

        Args:
            index: Position as typed (not bounds checked)

        Returns:
            True if a registry line was removed

        Raises:
            ProxyError: If no index was given or no backup exists
        """
        if index is None or not str(index).strip():
            raise ProxyError("No entry number given")
        if not self.caddyfile.backup_path.exists():
            raise ProxyError(f"No Caddyfile backup at {self.caddyfile.backup_path}, nothing to rebuild from")

        removed = self.registry.delete(str(index).strip())
        self.caddyfile.rebuild(self.registry.entries())
        self.service.restart()
        return removed

    def is_installed(self) -> bool:
        return self.installer.is_installed()

    def install(self) -> bool:
        """Install Caddy if missing (see AptInstaller.install)"""
        return self.installer.install()

    def uninstall(self) -> None:
        """
        Stop and purge Caddy, then delete the Caddyfile, backup and registry
        """
        self.service.stop()
        self.installer.uninstall()
        self.caddyfile.remove_files()
        self.registry.remove_file()
        logger.info("Caddy removed together with its configuration")
