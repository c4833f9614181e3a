"""
mackerel-inventory Host Sources

Suppliers of host records for the inventory engine.
"""

from mackerel_inventory.sources.base import HostSource
from mackerel_inventory.sources.mackerel import MackerelHostSource

__all__ = [
    'HostSource',
    'MackerelHostSource',
]
