"""
Utility functions for easy-caddy
"""
import os
import logging
import socket
import subprocess
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)

# Socket utility functions
def is_port_open(port, host: str = '127.0.0.1', timeout: float = 1.0) -> bool:
    """
    Check whether something accepts TCP connections on host:port

    Args:
        port: Port to probe (anything int() accepts)
        host: Host to connect to
        timeout: Connect timeout in seconds

    Returns:
        True if the connection succeeded
    """
    try:
        port = int(port)
    except (TypeError, ValueError):
        return False

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.settimeout(timeout)
        try:
            s.connect((host, port))
            return True
        except (socket.error, OverflowError):
            return False

def with_sudo(cmd: List[str]) -> List[str]:
    """Prefix a command with sudo unless already running as root"""
    if os.geteuid() != 0:
        return ["sudo"] + cmd
    return cmd

def run_command(cmd: List[str], input: Optional[bytes] = None,
                capture: bool = False) -> subprocess.CompletedProcess:
    """
    Run a privileged system command

    Exit codes are logged, never raised.

    Args:
        cmd: Command and arguments
        input: Bytes to feed on stdin
        capture: Capture stdout/stderr as text instead of inheriting the terminal

    Returns:
        CompletedProcess
    """
    full_cmd = with_sudo(cmd)
    logger.debug(f"Running: {' '.join(full_cmd)}")

    if capture:
        result = subprocess.run(full_cmd, capture_output=True, text=True, check=False)
    else:
        result = subprocess.run(full_cmd, input=input, check=False)

    if result.returncode != 0:
        logger.warning(f"Command {' '.join(cmd)} exited with code {result.returncode}")
    return result

def download(url: str, timeout: int = 30) -> bytes:
    """
    Download a small file into memory

    Raises:
        requests.RequestException: If the download fails
    """
    headers = {
        'User-Agent': 'easy-caddy/1.0'
    }
    logger.debug(f"Downloading {url}")
    response = requests.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    return response.content
