# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
mackerel-inventory: Ansible dynamic inventory backed by Mackerel.

Reads the host list from the Mackerel monitoring service and prints it in
the JSON shape Ansible expects from a dynamic inventory script.

Features:
    - Groups hosts by service, role, host type and status
    - Picks a private IPv4 interface address as ``ansible_host``
    - Always prints valid JSON, even when the Mackerel API is unreachable

This package exposes the CLI entry point and release metadata.
"""

from __future__ import annotations

from mackerel_inventory.release import __version__, __author__

__all__ = [
    "__version__",
    "__author__",
]
