# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""mackerel-inventory release metadata."""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "Mackerel Inventory Contributors"

# Version info tuple for programmatic comparison
VERSION_INFO = (0, 3, 0)
