"""
Command implementations for easy-caddy
"""

# Command implementations
from .install import install_command, uninstall_command
from .proxy import add_command, list_command, delete_command
from .service import status_command, restart_command
from .menu import run_menu, dispatch, show_menu

__all__ = [
    # Command implementations
    'install_command',
    'uninstall_command',
    'add_command',
    'list_command',
    'delete_command',
    'status_command',
    'restart_command',

    # Menu
    'run_menu',
    'dispatch',
    'show_menu'
]
