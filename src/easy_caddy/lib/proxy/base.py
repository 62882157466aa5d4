"""
Base types for reverse proxy entries
"""
import re
from dataclasses import dataclass
from typing import Optional

from ..errors import ProxyError, InstallError

__all__ = ["ProxyEntry", "ProxyError", "InstallError"]

# Registry lines look like "<pattern> -> <upstream_url>"
ARROW = "->"
SEPARATOR = f" {ARROW} "
TRAILING_PORT = re.compile(r':(\d+)\s*$')

@dataclass
class ProxyEntry:
    """One reverse proxy registered by easy-caddy"""
    index: int
    pattern: str
    upstream_url: str

    @property
    def upstream_port(self) -> Optional[int]:
        """Trailing numeric port of the upstream URL, if there is one"""
        match = TRAILING_PORT.search(self.upstream_url)
        return int(match.group(1)) if match else None

    @classmethod
    def from_line(cls, index: int, line: str) -> 'ProxyEntry':
        """
        Build an entry from a registry line

        The split is on the last arrow, since upstream URLs never contain
        one. Lines without an arrow keep the whole text as the upstream so
        that hand-edited registries still list and replay.
        """
        line = line.strip()
        if ARROW in line:
            pattern, _, upstream = line.rpartition(ARROW)
            return cls(index=index, pattern=pattern.strip(), upstream_url=upstream.strip())
        return cls(index=index, pattern="", upstream_url=line)

    def to_line(self) -> str:
        """Registry line for this entry"""
        return f"{self.pattern}{SEPARATOR}{self.upstream_url}"

    def to_block(self) -> str:
        """Caddyfile site block for this entry"""
        return f"{self.pattern} {{\n    reverse_proxy {self.upstream_url}\n}}\n"
