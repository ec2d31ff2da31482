"""Dangling CNAME and subdomain takeover scanner."""

__version__ = "0.1.0"
