# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
Document rendering for the inventory CLI.
"""

from __future__ import annotations

import json
from typing import Any, Dict

import yaml


def to_json(document: Dict[str, Any]) -> str:
    """
    Render a document as compact JSON.

    Keys are sorted so that output is stable across runs.
    """
    return json.dumps(document, sort_keys=True, separators=(",", ":"))


def to_yaml(document: Dict[str, Any]) -> str:
    """Render a document as YAML."""
    return yaml.safe_dump(document, default_flow_style=False, sort_keys=True).rstrip("\n")


def render(document: Dict[str, Any], yaml_output: bool = False) -> str:
    """Render a document in the requested format."""
    if yaml_output:
        return to_yaml(document)
    return to_json(document)
