"""
Shared fixtures for unit tests.
"""

from typing import Dict, List, Optional

import pytest

from mackerel_inventory.engine.errors import SourceUnavailableError
from mackerel_inventory.engine.results import HostRecord, Interface, SourceResult
from mackerel_inventory.sources.base import HostSource


class FakeHostSource(HostSource):
    """In-memory host source that records the queries it receives."""
    
    def __init__(self, hosts: Optional[List[HostRecord]] = None, fail: bool = False):
        self.hosts = hosts or []
        self.fail = fail
        self.queries: List[Optional[str]] = []
    
    def find_hosts(self, name: Optional[str] = None) -> SourceResult:
        self.queries.append(name)
        if self.fail:
            return SourceResult.failure(SourceUnavailableError("connection refused"))
        if name is None:
            return SourceResult.success(self.hosts)
        return SourceResult.success([h for h in self.hosts if h.name == name])


def _make_host(
    name: str,
    roles: Optional[Dict[str, List[str]]] = None,
    type: str = "",
    status: str = "",
    ips: Optional[List[str]] = None,
) -> HostRecord:
    """Build a host record with one interface per address."""
    return HostRecord(
        name=name,
        roles=roles or {},
        type=type,
        status=status,
        interfaces=[Interface(name=f"eth{i}", ip_address=ip) for i, ip in enumerate(ips or [])],
    )


@pytest.fixture
def fake_source():
    """Factory for in-memory host sources: ``fake_source(hosts, fail=False)``."""
    return FakeHostSource


@pytest.fixture
def make_host():
    """Factory for host records: ``make_host(name, roles, type, status, ips)``."""
    return _make_host


@pytest.fixture
def sample_hosts() -> List[HostRecord]:
    return [
        _make_host(
            "web1",
            roles={"shop": ["web", "frontend"]},
            type="ec2",
            status="working",
            ips=["192.168.1.10"],
        ),
        _make_host(
            "db1",
            roles={"shop": ["db"]},
            type="ec2",
            status="standby",
            ips=["203.0.113.5", "10.0.0.20"],
        ),
        _make_host(
            "edge1",
            roles={"cdn": ["edge"]},
            status="working",
            ips=["203.0.113.9"],
        ),
    ]
