"""
Reverse proxy command implementations for easy-caddy (add, list and delete)
"""
import logging
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt

from ..errors import ProxyError
from ..proxy.base import ProxyEntry
from ..proxy.caddy import CaddyProxy
from .install import install_command

console = Console()
logger = logging.getLogger(__name__)

def _status_label(running: Optional[bool]) -> str:
    if running is None:
        return "[dim]unknown"
    return "[green]running" if running else "[red]not running"

def add_command(proxy: CaddyProxy) -> Optional[ProxyEntry]:
    """
    Prompt for a port and host pattern, then add a reverse proxy

    Installs Caddy first when it is missing.

    Returns:
        The new entry, or None if nothing was added
    """
    if not proxy.is_installed():
        console.print("[yellow]Caddy is not installed, installing it first.")
        install_command(proxy)

    port = Prompt.ask("Upstream port on this host (e.g. 8080)", default="", show_default=False)
    if not port.strip():
        console.print("[yellow]Invalid input: no port given.")
        return None
    pattern = Prompt.ask("Host pattern", default=proxy.config.default_pattern)

    try:
        entry, running = proxy.add(port, pattern)
    except (ProxyError, OSError) as e:
        console.print(f"[bold red]Error: {str(e)}")
        return None

    console.print(f"[bold green]✓ Reverse proxy added:[/bold green] {entry.pattern} -> {entry.upstream_url}")
    if running:
        console.print(f"[green]Port {port} is accepting connections.")
    else:
        console.print(f"[yellow]Nothing is listening on port {port} yet.")

    console.print("[bold blue]Caddy service status:")
    console.print(proxy.service.status(), markup=False, highlight=False)
    return entry

def list_command(proxy: CaddyProxy) -> List[Tuple[ProxyEntry, Optional[bool]]]:
    """
    Show the registered reverse proxies with a live probe of each upstream

    Returns:
        The listed (entry, running) pairs
    """
    try:
        results = proxy.list()
    except OSError as e:
        console.print(f"[bold red]Error: {str(e)}")
        return []

    if not results:
        console.print("[yellow]No reverse proxies configured.")
        return results

    table = Table(title="Reverse proxies")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Pattern", style="magenta")
    table.add_column("Upstream", style="green")
    table.add_column("Status")

    for entry, running in results:
        table.add_row(str(entry.index), entry.pattern, entry.upstream_url, _status_label(running))

    console.print(table)
    return results

def delete_command(proxy: CaddyProxy) -> bool:
    """
    Show the list, prompt for an entry number and delete it

    Returns:
        True if a registry entry was removed
    """
    list_command(proxy)
    index = Prompt.ask("Number of the reverse proxy to delete", default="", show_default=False)

    try:
        removed = proxy.delete(index)
    except (ProxyError, OSError) as e:
        console.print(f"[bold red]Error: {str(e)}")
        return False

    if removed:
        console.print(f"[bold green]✓ Reverse proxy #{index.strip()} deleted, Caddyfile regenerated")
    else:
        logger.info(f"No registry entry at position {index!r}")
        console.print(f"[yellow]No reverse proxy #{index.strip()}, Caddyfile regenerated unchanged")
    return removed
