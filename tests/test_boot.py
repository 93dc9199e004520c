import importlib
from types import SimpleNamespace

from kurdish_calendar import boot, hooks


def reload_preferences():
    module = importlib.import_module("kurdish_calendar.api.preferences")
    return importlib.reload(module)


def test_boot_session_populates_dict_payload():
    reload_preferences()
    bootinfo = {}
    boot.boot_session(bootinfo)
    context = bootinfo["kurdish_calendar"]
    assert context["preferences"]["active_variant"] == "rojhalat"
    assert context["today"]["variant"] == "rojhalat"
    assert context["today"]["kurdish_year"] > 2700


def test_boot_session_uses_resolved_variant_on_objects():
    preferences = reload_preferences()
    preferences.set_system_variant("bashur")
    bootinfo = SimpleNamespace()
    boot.boot_session(bootinfo)
    assert bootinfo.kurdish_calendar["today"]["variant"] == "bashur"
    assert bootinfo.kurdish_calendar["preferences"]["source"] == "system"


def test_hooks_point_at_boot_session():
    module_path, _, attr = hooks.boot_session.rpartition(".")
    assert getattr(importlib.import_module(module_path), attr) is boot.boot_session
    assert hooks.app_name == "kurdish_calendar"
