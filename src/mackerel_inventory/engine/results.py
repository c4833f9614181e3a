# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
mackerel-inventory Result Classes

Host records as delivered by a host source, and the result of a host query.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from mackerel_inventory.engine.errors import SourceUnavailableError


@dataclass
class Interface:
    """A network interface reported for a host."""
    
    name: str = ""
    ip_address: str = ""
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Interface':
        """Build from a Mackerel API interface object."""
        return cls(
            name=_as_str(data.get("name")),
            ip_address=_as_str(data.get("ipAddress")),
        )


@dataclass
class HostRecord:
    """A monitored host as reported by the host source."""
    
    name: str
    # service name -> role names
    roles: Dict[str, List[str]] = field(default_factory=dict)
    type: str = ""
    status: str = ""
    interfaces: List[Interface] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HostRecord':
        """
        Build from a Mackerel API host object.
        
        Missing or null fields become empty values. A field of the wrong
        shape (roles not a mapping, a role list or the interface list not a
        list, an interface not a mapping) raises ValueError, so one bad
        entry fails the whole response.
        """
        if not isinstance(data, dict):
            raise ValueError(f"host entry is not an object: {data!r}")
        
        roles_data = data.get("roles") or {}
        if not isinstance(roles_data, dict):
            raise ValueError(f"roles of host {data.get('name')!r} is not an object")
        roles: Dict[str, List[str]] = {}
        for service, role_names in roles_data.items():
            role_names = role_names or []
            if not isinstance(role_names, list):
                raise ValueError(
                    f"roles of service {service!r} on host {data.get('name')!r} is not a list"
                )
            roles[_as_str(service)] = [_as_str(role) for role in role_names]
        
        interfaces_data = data.get("interfaces") or []
        if not isinstance(interfaces_data, list):
            raise ValueError(f"interfaces of host {data.get('name')!r} is not a list")
        interfaces = []
        for item in interfaces_data:
            if not isinstance(item, dict):
                raise ValueError(f"interface of host {data.get('name')!r} is not an object: {item!r}")
            interfaces.append(Interface.from_dict(item))
        
        return cls(
            name=_as_str(data.get("name")),
            roles=roles,
            type=_as_str(data.get("type")),
            status=_as_str(data.get("status")),
            interfaces=interfaces,
        )


class SourceStatus(Enum):
    """Outcome of a host source query."""
    OK = "ok"
    FAILED = "failed"


@dataclass
class SourceResult:
    """
    Result of querying a host source.
    
    Either carries the host records or the error that prevented fetching
    them. An empty host list is a success, not a failure.
    """
    
    status: SourceStatus
    hosts: List[HostRecord] = field(default_factory=list)
    error: Optional[SourceUnavailableError] = None
    
    @classmethod
    def success(cls, hosts: List[HostRecord]) -> 'SourceResult':
        return cls(status=SourceStatus.OK, hosts=list(hosts))
    
    @classmethod
    def failure(cls, error: SourceUnavailableError) -> 'SourceResult':
        return cls(status=SourceStatus.FAILED, error=error)
    
    @property
    def ok(self) -> bool:
        return self.status == SourceStatus.OK
    
    @property
    def failed(self) -> bool:
        return self.status == SourceStatus.FAILED


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
