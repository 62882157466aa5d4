"""
Flat-file registry of reverse proxies created by easy-caddy
"""
import logging
from pathlib import Path
from typing import List

from .base import ProxyEntry

logger = logging.getLogger(__name__)

class ProxyRegistry:
    """
    Line-oriented registry file

    Each non-empty line is one entry. An entry's index is its 1-based
    position in the file and changes whenever an earlier line is deleted.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_lines(self) -> List[str]:
        if not self.path.exists():
            return []
        return [line for line in self.path.read_text().splitlines() if line.strip()]

    def entries(self) -> List[ProxyEntry]:
        """Read all entries top to bottom, numbered from 1"""
        return [ProxyEntry.from_line(i, line) for i, line in enumerate(self._read_lines(), start=1)]

    def append(self, pattern: str, upstream_url: str) -> ProxyEntry:
        """
        Append one entry, creating the registry file if needed

        Returns:
            The new entry
        """
        lines = self._read_lines()
        entry = ProxyEntry(index=len(lines) + 1, pattern=pattern, upstream_url=upstream_url)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        needs_newline = False
        if self.path.exists():
            content = self.path.read_text()
            needs_newline = bool(content) and not content.endswith("\n")

        with open(self.path, 'a') as f:
            if needs_newline:
                f.write("\n")
            f.write(entry.to_line() + "\n")

        logger.info(f"Registered proxy #{entry.index}: {entry.to_line()}")
        return entry

    def delete(self, index) -> bool:
        """
        Remove the line at a 1-based position

        Args:
            index: Position as typed by the operator

        Returns:
            True if a line was removed. Out-of-range, non-positive or
            non-numeric positions leave the file untouched.
        """
        try:
            position = int(index)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-numeric registry index {index!r}")
            return False

        lines = self._read_lines()
        if not 1 <= position <= len(lines):
            logger.warning(f"Registry index {position} out of range (1-{len(lines)})")
            return False

        removed = lines.pop(position - 1)
        self.path.write_text("".join(line + "\n" for line in lines))
        logger.info(f"Removed proxy #{position}: {removed}")
        return True

    def remove_file(self) -> None:
        """Delete the registry file if it exists"""
        if self.path.exists():
            self.path.unlink()
            logger.info(f"Removed registry {self.path}")
