"""
Install and uninstall command implementations for easy-caddy
"""
import typer
from rich.console import Console
from rich.prompt import Confirm

from ..errors import InstallError
from ..proxy.caddy import CaddyProxy

console = Console()

def install_command(proxy: CaddyProxy) -> None:
    """
    Install Caddy unless it is already present

    Installation failure is fatal and exits the program with code 1.
    """
    if proxy.is_installed():
        console.print("[green]Caddy is already installed, skipping installation.")
        return

    console.print("[bold blue]Installing Caddy...")
    try:
        proxy.install()
    except InstallError as e:
        console.print(f"[bold red]Caddy installation failed: {str(e)}")
        raise typer.Exit(code=1)

    console.print("[bold green]✓ Caddy installed successfully")

def uninstall_command(proxy: CaddyProxy) -> bool:
    """
    Uninstall Caddy and delete its configuration after confirmation

    Returns:
        True if Caddy was removed, False if the operator declined
    """
    if not Confirm.ask("Uninstall Caddy and delete its configuration files?", default=False):
        console.print("[yellow]Operation cancelled")
        return False

    try:
        proxy.uninstall()
    except OSError as e:
        console.print(f"[bold red]Error: {str(e)}")
        return False

    console.print("[bold green]✓ Caddy uninstalled and configuration files deleted")
    return True
