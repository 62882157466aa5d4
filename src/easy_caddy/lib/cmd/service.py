"""
Service command implementations for easy-caddy
"""
from rich.console import Console

from ..proxy.caddy import CaddyProxy

console = Console()

def status_command(proxy: CaddyProxy) -> None:
    """Show `systemctl status` output verbatim"""
    if not proxy.is_installed():
        console.print("[yellow]Caddy is not installed on this system.")
        return

    console.print("[bold blue]Caddy service status:")
    console.print(proxy.service.status(), markup=False, highlight=False)

def restart_command(proxy: CaddyProxy) -> None:
    """Restart the Caddy service and show its status"""
    console.print("[bold blue]Restarting Caddy service...")
    if proxy.service.restart():
        console.print("[bold green]✓ Caddy service restarted")
    else:
        console.print("[bold yellow]! systemctl reported an error while restarting Caddy")
    console.print(proxy.service.status(), markup=False, highlight=False)
