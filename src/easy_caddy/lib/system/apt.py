"""
Caddy installation through the vendor apt repository
"""
import logging
import shutil

import requests

from ..config import Config
from ..errors import InstallError
from ..utils import run_command, download

logger = logging.getLogger(__name__)

# Packages needed before the vendor repository can be added
PREREQUISITES = ["debian-keyring", "debian-archive-keyring", "apt-transport-https", "curl"]

class AptInstaller:
    """Installs and purges Caddy with apt-get"""

    def __init__(self, config: Config):
        self.config = config

    def is_installed(self) -> bool:
        """Check whether the Caddy binary is on PATH"""
        return shutil.which(self.config.binary_name) is not None

    def _add_repository(self) -> None:
        """Import the signing key and write the source list"""
        key = download(self.config.gpg_key_url)
        run_command(["gpg", "--batch", "--yes", "--dearmor", "-o", str(self.config.keyring)], input=key)

        sources = download(self.config.sources_url)
        run_command(["tee", str(self.config.sources_list)], input=sources)

    def install(self) -> bool:
        """
        Install Caddy unless it is already present

        Individual apt-get failures are logged and the sequence carries on;
        success is judged only by the binary being on PATH afterwards.

        Returns:
            True if Caddy was installed by this call, False if it was
            already present

        Raises:
            InstallError: If the binary is still missing afterwards
        """
        if self.is_installed():
            logger.info("Caddy already installed, skipping")
            return False

        logger.info("Installing Caddy from the vendor repository")
        run_command(["apt-get", "update"])
        run_command(["apt-get", "install", "-y"] + PREREQUISITES)

        try:
            self._add_repository()
        except requests.RequestException as e:
            raise InstallError(f"Failed to fetch Caddy repository files: {e}")

        run_command(["apt-get", "update"])
        run_command(["apt-get", "install", "-y", self.config.package_name])

        if not self.is_installed():
            raise InstallError("Caddy installation failed, check the apt-get output above")

        logger.info("Caddy installed")
        return True

    def uninstall(self) -> None:
        """Purge the package and drop the vendor source list"""
        run_command(["apt-get", "remove", "--purge", "-y", self.config.package_name])
        run_command(["rm", "-f", str(self.config.sources_list)])
        run_command(["apt-get", "update"])
        logger.info("Caddy package purged")
