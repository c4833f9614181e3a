"""Unit tests for document rendering and diagnostics."""

import io

import yaml

from mackerel_inventory.display import Display
from mackerel_inventory.engine.output import render, to_json, to_yaml


class TestRender:
    
    def test_empty_list_document(self):
        assert to_json({"_meta": {"hostvars": {}}}) == '{"_meta":{"hostvars":{}}}'
    
    def test_keys_are_sorted(self):
        assert to_json({"web": ["a"], "_meta": {"hostvars": {}}, "db": ["b"]}) == (
            '{"_meta":{"hostvars":{}},"db":["b"],"web":["a"]}'
        )
    
    def test_group_member_order_is_kept(self):
        assert to_json({"web": ["c", "a", "b"]}) == '{"web":["c","a","b"]}'
    
    def test_yaml(self):
        text = to_yaml({"web": ["a"], "_meta": {"hostvars": {"a": {"ansible_host": "10.0.0.1"}}}})
        assert yaml.safe_load(text)["_meta"]["hostvars"]["a"]["ansible_host"] == "10.0.0.1"
        assert not text.endswith("\n")
    
    def test_render_dispatch(self):
        assert render({}) == "{}"
        assert render({}, yaml_output=True) == "{}"


class TestDisplay:
    
    def test_warning_and_error(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        stream = io.StringIO()
        display = Display(stream=stream)
        
        display.warning("careful")
        display.error("broken")
        
        assert stream.getvalue() == "[WARNING]: careful\nERROR: broken\n"
    
    def test_debug_respects_verbosity(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        stream = io.StringIO()
        display = Display(verbosity=2, stream=stream)
        
        display.debug("shown", level=2)
        display.debug("hidden", level=3)
        
        assert stream.getvalue() == "shown\n"
    
    def test_no_color_disables_force_color(self, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("NO_COLOR", "1")
        stream = io.StringIO()
        
        Display(stream=stream).warning("plain")
        
        assert "\033[" not in stream.getvalue()
    
    def test_force_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        stream = io.StringIO()
        
        Display(stream=stream).error("red")
        
        assert stream.getvalue().startswith("\033[31m")
