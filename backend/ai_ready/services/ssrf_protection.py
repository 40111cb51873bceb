"""
SSRF Protection - Refuse to analyze private or internal hosts.
"""
import ipaddress
import socket
from urllib.parse import urlparse

from ai_ready.logger import logger


class SSRFProtection:
    """Validates analysis targets before the page fetch."""

    # Private/internal IP ranges to block
    BLOCKED_RANGES = [
        ipaddress.ip_network("10.0.0.0/8"),
        ipaddress.ip_network("172.16.0.0/12"),
        ipaddress.ip_network("192.168.0.0/16"),
        ipaddress.ip_network("127.0.0.0/8"),
        ipaddress.ip_network("169.254.0.0/16"),
        ipaddress.ip_network("0.0.0.0/8"),
        ipaddress.ip_network("::1/128"),
        ipaddress.ip_network("fc00::/7"),
        ipaddress.ip_network("fe80::/10"),
    ]

    # Blocked hostnames
    BLOCKED_HOSTS = {
        "localhost",
        "metadata.google.internal",
    }

    @classmethod
    def is_blocked_ip(cls, ip_str: str) -> bool:
        try:
            ip = ipaddress.ip_address(ip_str)
        except ValueError:
            return False
        return any(ip in blocked for blocked in cls.BLOCKED_RANGES)

    @classmethod
    def validate_url(cls, url: str, resolve: bool = True) -> tuple[bool, str]:
        """
        Check that a URL points at a public http(s) host.

        Args:
            url: Absolute URL
            resolve: Also resolve the hostname and check the address

        Returns:
            tuple: (is_valid, error_message)
        """
        parsed = urlparse(url)

        if parsed.scheme not in ("http", "https"):
            return False, f"Invalid scheme: {parsed.scheme}"

        hostname = parsed.hostname
        if not hostname:
            return False, "Empty hostname"

        if hostname.lower() in cls.BLOCKED_HOSTS:
            return False, f"Blocked hostname: {hostname}"

        if cls.is_blocked_ip(hostname):
            return False, f"IP {hostname} is in a blocked range"

        if resolve:
            try:
                ip_str = socket.gethostbyname(hostname)
                if cls.is_blocked_ip(ip_str):
                    return False, f"IP {ip_str} is in a blocked range"
            except socket.gaierror:
                # The fetch itself will fail for unknown hosts
                logger.warning(f"DNS resolution failed for {hostname}")

        return True, ""
