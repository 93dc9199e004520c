"""Hook implementations that integrate the Kurdish calendar with Frappe."""
from __future__ import annotations

from .api import kurdish, preferences


def get_boot_context(user=None):
    """Return the resolved variant preference together with today's Kurdish date."""

    context = preferences.get_preference_context(user)
    variant = preferences.resolve_variant(user).value
    return {
        "preferences": context,
        "today": kurdish.today(variant).to_dict(),
    }


def boot_session(bootinfo):
    """Inject the Kurdish calendar context into the boot payload."""

    context = get_boot_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("kurdish_calendar", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "kurdish_calendar", context)
