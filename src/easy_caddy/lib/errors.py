"""
Exceptions shared by the proxy and system layers
"""

class ProxyError(Exception):
    """Base exception for proxy operations"""
    pass

class InstallError(ProxyError):
    """Caddy could not be installed"""
    pass
