"""
Interactive main menu for easy-caddy
"""
from rich.console import Console
from rich.prompt import Prompt

from ..config import Config
from ..proxy.caddy import CaddyProxy
from .install import install_command, uninstall_command
from .proxy import add_command, list_command, delete_command
from .service import status_command, restart_command

console = Console()

MENU_ITEMS = [
    ("1", "Install Caddy (skipped if already installed)", install_command),
    ("2", "Configure & enable a reverse proxy", add_command),
    ("3", "Show Caddy service status", status_command),
    ("4", "Show configured reverse proxies", list_command),
    ("5", "Delete a reverse proxy", delete_command),
    ("6", "Restart Caddy service", restart_command),
    ("7", "Uninstall Caddy (remove configuration)", uninstall_command),
]

EXIT_CHOICE = "0"

def show_menu() -> None:
    """Print the numbered menu"""
    console.rule("[bold]Caddy deployment & management")
    for key, label, _ in MENU_ITEMS:
        console.print(f" {key}) {label}")
    console.print(f" {EXIT_CHOICE}) Exit")
    console.rule()

def dispatch(choice: str, proxy: CaddyProxy) -> bool:
    """
    Run the command for a menu choice

    Returns:
        False when the operator chose to exit
    """
    choice = choice.strip()
    if choice == EXIT_CHOICE:
        return False

    for key, _, command in MENU_ITEMS:
        if choice == key:
            command(proxy)
            break
    else:
        console.print("[yellow]Invalid option, please try again.")
    return True

def run_menu(config: Config) -> None:
    """Menu loop: read a choice, dispatch, repeat until 0 or end of input"""
    proxy = CaddyProxy(config)

    while True:
        show_menu()
        try:
            choice = Prompt.ask("Choose an option", default="", show_default=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not dispatch(choice, proxy):
            break
        console.print()

    console.print("Exiting.")
