"""
mackerel-inventory Engine Module

Host classification and inventory document rendering.
"""

from mackerel_inventory.engine.inventory import Inventory, empty_list_document
from mackerel_inventory.engine.network import is_private_ip
from mackerel_inventory.engine.results import HostRecord, Interface, SourceResult
from mackerel_inventory.engine.errors import (
    MackerelInventoryError,
    ConfigError,
    MissingCredentialError,
    SourceUnavailableError,
)

__all__ = [
    'Inventory',
    'empty_list_document',
    'is_private_ip',
    'HostRecord',
    'Interface',
    'SourceResult',
    'MackerelInventoryError',
    'ConfigError',
    'MissingCredentialError',
    'SourceUnavailableError',
]
