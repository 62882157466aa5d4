"""
Configuration management for easy-caddy
"""
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import yaml

# Load environment variables from .env file
load_dotenv()

CONFIG_DIR = Path("~/.config/easy-caddy").expanduser()
CONFIG_FILE = CONFIG_DIR / "config.yaml"
ENV_PREFIX = "EASY_CADDY_"

PATH_FIELDS = ['caddyfile', 'registry_file', 'sources_list', 'keyring']

@dataclass
class Config:
    """Configuration data"""
    # Caddy files
    caddyfile: Path = Path("/etc/caddy/Caddyfile")
    registry_file: Path = Path("/root/caddy_reverse_proxies.txt")

    # Vendor apt repository
    sources_list: Path = Path("/etc/apt/sources.list.d/caddy-stable.list")
    keyring: Path = Path("/usr/share/keyrings/caddy-stable-archive-keyring.gpg")
    gpg_key_url: str = "https://dl.cloudsmith.io/public/caddy/stable/gpg.key"
    sources_url: str = "https://dl.cloudsmith.io/public/caddy/stable/debian.deb.txt"

    # Service settings
    service_name: str = "caddy"
    package_name: str = "caddy"
    binary_name: str = "caddy"

    # Proxy settings
    upstream_host: str = "127.0.0.1"
    default_pattern: str = "*"
    probe_timeout: float = 1.0

    log_level: str = "WARNING"

    @property
    def backup_file(self) -> Path:
        """Backup snapshot sitting next to the live Caddyfile"""
        return self.caddyfile.with_name(self.caddyfile.name + ".bak")

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'Config':
        """
        Load configuration

        Defaults are overlaid with the YAML file (if it exists) and then
        with EASY_CADDY_* environment variables.

        Args:
            path: Path to YAML file (defaults to ~/.config/easy-caddy/config.yaml)

        Returns:
            Config object

        Raises:
            ConfigError: If the file is malformed or has unknown keys
        """
        config_file = Path(path) if path else CONFIG_FILE
        data = {}

        if config_file.exists():
            try:
                with open(config_file) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to read {config_file}: {e}")
            if not isinstance(data, dict):
                raise ConfigError(f"{config_file} must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        # Environment variables take precedence over the config file
        for name in known:
            value = os.getenv(ENV_PREFIX + name.upper())
            if value:
                data[name] = value

        # Convert path strings to Path objects
        for key in PATH_FIELDS:
            if key in data:
                data[key] = Path(data[key]).expanduser()

        if 'probe_timeout' in data:
            try:
                data['probe_timeout'] = float(data['probe_timeout'])
            except (TypeError, ValueError):
                raise ConfigError(f"probe_timeout must be a number, got {data['probe_timeout']!r}")

        return cls(**data)

    def save(self, path: Optional[Path] = None):
        """Save configuration to file"""
        config_file = Path(path) if path else CONFIG_FILE
        config_file.parent.mkdir(parents=True, exist_ok=True)

        # Convert to dict and ensure paths are strings
        data = asdict(self)
        for key in PATH_FIELDS:
            data[key] = str(data[key])

        with open(config_file, 'w') as f:
            yaml.safe_dump(data, f)

class ConfigError(Exception):
    """Configuration error"""
    pass
