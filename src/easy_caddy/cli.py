"""
Command-line interface for easy-caddy
"""
import logging

import typer
from rich.console import Console

from .lib.cmd import run_menu
from .lib.config import Config, ConfigError

console = Console()
app = typer.Typer(help="easy-caddy - Install Caddy and manage reverse proxies from a menu",
                  add_completion=False)

@app.command()
def menu():
    """Open the interactive management menu"""
    try:
        config = Config.load()
    except ConfigError as e:
        console.print(f"[bold red]Configuration error: {str(e)}")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logging.debug(f"Loaded configuration: {config}")

    run_menu(config)

def main():
    """Main entry point"""
    # Set locale to avoid warnings
    try:
        import locale
        locale.setlocale(locale.LC_ALL, 'C.UTF-8')
    except locale.Error:
        pass

    # Run the app
    app()

if __name__ == "__main__":
    main()
