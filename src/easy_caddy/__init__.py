"""
easy-caddy: interactive Caddy installer and reverse proxy manager
"""

__version__ = "0.1.0"
