"""
Caddyfile writer for easy-caddy
"""
import logging
import shutil
from pathlib import Path
from typing import Iterable

from .base import ProxyEntry, ProxyError

logger = logging.getLogger(__name__)

class CaddyfileWriter:
    """Appends and replays reverse proxy blocks on top of a backup snapshot"""

    def __init__(self, caddyfile_path: Path, backup_path: Path):
        """
        Initialize Caddyfile writer

        Args:
            caddyfile_path: Path to the live Caddyfile
            backup_path: Path to the snapshot taken before the first block
        """
        self.caddyfile_path = Path(caddyfile_path)
        self.backup_path = Path(backup_path)

    def ensure_backup(self) -> bool:
        """
        Snapshot the live Caddyfile once

        An existing backup is never overwritten. A missing live Caddyfile
        yields an empty backup.

        Returns:
            True if a new backup was written
        """
        if self.backup_path.exists():
            return False

        self.backup_path.parent.mkdir(parents=True, exist_ok=True)
        if self.caddyfile_path.exists():
            shutil.copyfile(self.caddyfile_path, self.backup_path)
        else:
            self.backup_path.write_text("")
        logger.info(f"Backed up {self.caddyfile_path} to {self.backup_path}")
        return True

    def append_block(self, entry: ProxyEntry) -> None:
        """Append the site block for one entry to the live Caddyfile"""
        self.caddyfile_path.parent.mkdir(parents=True, exist_ok=True)
        needs_newline = False
        if self.caddyfile_path.exists():
            content = self.caddyfile_path.read_text()
            needs_newline = bool(content) and not content.endswith("\n")

        with open(self.caddyfile_path, 'a') as f:
            if needs_newline:
                f.write("\n")
            f.write(entry.to_block())
        logger.debug(f"Appended block for {entry.to_line()}")

    def restore(self) -> None:
        """
        Overwrite the live Caddyfile with the backup

        Raises:
            ProxyError: If no backup exists
        """
        if not self.backup_path.exists():
            raise ProxyError(f"No backup found at {self.backup_path}")
        shutil.copyfile(self.backup_path, self.caddyfile_path)
        logger.info(f"Restored {self.caddyfile_path} from {self.backup_path}")

    def rebuild(self, entries: Iterable[ProxyEntry]) -> int:
        """
        Restore from backup and replay entries in order

        Returns:
            Number of blocks replayed
        """
        self.restore()
        count = 0
        for entry in entries:
            self.append_block(entry)
            count += 1
        logger.info(f"Replayed {count} proxy blocks into {self.caddyfile_path}")
        return count

    def remove_files(self) -> None:
        """Delete both the live Caddyfile and its backup"""
        for path in (self.caddyfile_path, self.backup_path):
            if path.exists():
                path.unlink()
                logger.info(f"Removed {path}")
