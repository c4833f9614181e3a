# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
mackerel-inventory Host Source Base Class

Abstract base class for everything that can supply host records.
"""

from abc import ABC, abstractmethod
from typing import Optional

from mackerel_inventory.engine.results import SourceResult


class HostSource(ABC):
    """
    Abstract base class for host sources.
    
    A failed query must be returned as ``SourceResult.failure(...)`` and
    never as an empty success, so that callers can tell the two apart.
    Implementations should not raise for transport or data errors.
    """
    
    @abstractmethod
    def find_hosts(self, name: Optional[str] = None) -> SourceResult:
        """
        Fetch host records.
        
        Args:
            name: If given, only hosts with this name are returned
            
        Returns:
            SourceResult with the host records, or the error that occurred
        """
        pass
