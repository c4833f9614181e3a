# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
mackerel-inventory Inventory Engine

Classifies host records into Ansible groups and host variables, and renders
the two dynamic inventory documents (``--list`` and ``--host``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Set

from mackerel_inventory.display import Display
from mackerel_inventory.engine.network import is_private_ip
from mackerel_inventory.engine.results import HostRecord, SourceResult

if TYPE_CHECKING:
    from mackerel_inventory.sources.base import HostSource


META_KEY = '_meta'
HOSTVARS_KEY = 'hostvars'


def empty_list_document() -> Dict[str, Any]:
    """Return the document printed for ``--list`` when nothing could be fetched."""
    return {META_KEY: {HOSTVARS_KEY: {}}}


class Inventory:
    """
    Accumulates groups and host variables for one inventory query.

    Groups are keyed by service name, role name, host type and host status,
    all sharing one namespace. A role that happens to be named like a
    service (or a status) lands in the same group, and a host can be
    appended to one group more than once that way.

    Each host is classified at most once; records for a name that has
    already been seen are ignored.
    """

    def __init__(self, source: HostSource, display: Optional[Display] = None):
        self.source = source
        self.display = display or Display()
        self.groups: Dict[str, List[str]] = {}
        self.hostvars: Dict[str, Dict[str, Any]] = {}
        self._seen: Set[str] = set()

    def add_host(self, host: HostRecord) -> None:
        """Classify a host into groups and record its connection address."""
        if host.name in self._seen:
            return

        for service, roles in host.roles.items():
            # Grouping by service
            if service:
                self._add_to_group(service, host.name)
            # Grouping by role
            for role in roles:
                if role:
                    self._add_to_group(role, host.name)

        # Grouping by host type
        if host.type:
            self._add_to_group(host.type, host.name)

        # Grouping by status
        if host.status:
            self._add_to_group(host.status, host.name)

        # Last private interface wins
        for interface in host.interfaces:
            if is_private_ip(interface.ip_address):
                self.hostvars[host.name] = {'ansible_host': interface.ip_address}

        if host.name not in self.hostvars:
            self.display.debug(f"{host.name}: no private interface address", level=3)

        self._seen.add(host.name)

    def add_hosts(self, result: SourceResult) -> bool:
        """
        Classify every host of a successful source result.

        Returns False (and classifies nothing) if the query failed.
        """
        if result.failed:
            self.display.warning(f"Returning empty inventory: {result.error}")
            return False

        self.display.debug(f"Classifying {len(result.hosts)} host(s)", level=2)
        for host in result.hosts:
            self.add_host(host)
        return True

    def list_document(self) -> Dict[str, Any]:
        """
        Fetch all hosts and return the ``--list`` document.

        If the host source fails, the minimal valid document
        ``{"_meta": {"hostvars": {}}}`` is returned instead.
        """
        if not self.add_hosts(self.source.find_hosts()):
            return empty_list_document()
        return self.to_dict()

    def host_document(self, name: str) -> Dict[str, Any]:
        """
        Fetch hosts matching ``name`` and return its ``--host`` document.

        An empty dict is returned when the host is unknown, has no private
        interface, or the host source fails.
        """
        if not self.add_hosts(self.source.find_hosts(name=name)):
            return {}
        return dict(self.hostvars.get(name, {}))

    def to_dict(self) -> Dict[str, Any]:
        """Return groups and hostvars in dynamic inventory layout."""
        data: Dict[str, Any] = {
            META_KEY: {
                HOSTVARS_KEY: {
                    name: dict(variables) for name, variables in self.hostvars.items()
                },
            },
        }
        for group_name, host_names in self.groups.items():
            data[group_name] = list(host_names)
        return data

    def _add_to_group(self, group_name: str, host_name: str) -> None:
        self.groups.setdefault(group_name, []).append(host_name)

    def __repr__(self) -> str:
        return f"Inventory(groups={len(self.groups)}, hosts={len(self._seen)})"
