"""Kurdish calendar variant preferences for the server and client layers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Union

from .frappe_compat import frappe, get_db, maybe_whitelist
from .kurdish import CalendarVariant, normalize_variant

__all__ = [
    "DEFAULT_VARIANT",
    "VALID_VARIANTS",
    "VariantSelection",
    "get_preference_context",
    "get_system_variant",
    "get_user_variant",
    "get_variant_preference",
    "resolve_variant",
    "set_system_variant",
    "set_user_variant",
    "set_variant_preference",
]

logger = logging.getLogger(__name__)

PreferenceSource = Literal["default", "system", "user"]

DEFAULT_VARIANT = CalendarVariant.ROJHALAT
VALID_VARIANTS = {variant.value for variant in CalendarVariant}
_PREFERENCE_KEY = "kurdish_calendar_variant"


@dataclass(frozen=True)
class VariantSelection:
    """Resolved calendar variant and the scope it came from."""

    value: CalendarVariant
    source: PreferenceSource


_FALLBACK_STORE: Dict[str, Dict[Optional[str], Optional[CalendarVariant]]] = {
    "system": {None: None},
    "user": {},
}


def _parse_variant(value: object) -> Optional[CalendarVariant]:
    if value is None:
        return None
    try:
        return normalize_variant(value)  # type: ignore[arg-type]
    except ValueError:
        return None


def _require_variant(value: Union[str, CalendarVariant, None]) -> CalendarVariant:
    variant = _parse_variant(value)
    if variant is None:
        raise ValueError(
            "variant must be one of: {}".format(", ".join(sorted(VALID_VARIANTS)))
        )
    return variant


def _session_user(user: Optional[str]) -> Optional[str]:
    if user:
        return user
    return getattr(getattr(frappe, "session", None), "user", None)  # type: ignore[attr-defined]


def _read_system_value() -> Optional[CalendarVariant]:
    db = get_db()
    if db:
        return _parse_variant(db.get_default(_PREFERENCE_KEY))
    return _FALLBACK_STORE["system"].get(None)


def _write_system_value(variant: CalendarVariant) -> None:
    db = get_db()
    if db:
        db.set_default(_PREFERENCE_KEY, variant.value)
        if hasattr(frappe, "clear_cache"):
            frappe.clear_cache()
        return
    _FALLBACK_STORE["system"][None] = variant


def _read_user_value(user: Optional[str]) -> Optional[CalendarVariant]:
    db = get_db()
    if db:
        user = _session_user(user)
        if not user or user == "Guest":
            return None
        return _parse_variant(db.get_default(_PREFERENCE_KEY, user=user))
    if user is None:
        return None
    return _FALLBACK_STORE["user"].get(user)


def _write_user_value(variant: CalendarVariant, user: Optional[str]) -> None:
    db = get_db()
    if db:
        user = _session_user(user)
        if not user or user == "Guest":  # pragma: no cover - depends on Frappe session
            raise ValueError("Cannot store calendar variant for anonymous sessions")
        db.set_default(_PREFERENCE_KEY, variant.value, user=user)
        if hasattr(frappe, "defaults") and hasattr(frappe.defaults, "clear_cache"):
            frappe.defaults.clear_cache(user=user)  # type: ignore[attr-defined]
        return
    if user is None:
        raise RuntimeError("user must be provided when frappe is unavailable")
    _FALLBACK_STORE["user"][user] = variant


def get_system_variant(*, raw: bool = False) -> Optional[CalendarVariant]:
    """Return the system-wide variant, or ``None`` for an unset value when ``raw``."""

    stored = _read_system_value()
    if raw:
        return stored
    return stored or DEFAULT_VARIANT


def set_system_variant(variant: Union[str, CalendarVariant]) -> VariantSelection:
    """Persist the system-wide variant preference."""

    selected = _require_variant(variant)
    _write_system_value(selected)
    logger.info("System Kurdish calendar variant set to %s", selected.value)
    return resolve_variant()


def get_user_variant(user: Optional[str] = None) -> Optional[CalendarVariant]:
    return _read_user_value(user)


def set_user_variant(variant: Union[str, CalendarVariant], user: Optional[str] = None) -> VariantSelection:
    """Persist the variant preference for a specific user."""

    selected = _require_variant(variant)
    _write_user_value(selected, user)
    logger.info("Kurdish calendar variant for %s set to %s", user or "session user", selected.value)
    return resolve_variant(user)


def resolve_variant(user: Optional[str] = None) -> VariantSelection:
    """Resolve the active variant for a user taking overrides into account."""

    user_value = get_user_variant(user)
    if user_value:
        return VariantSelection(user_value, "user")

    system_raw = get_system_variant(raw=True)
    if system_raw:
        return VariantSelection(system_raw, "system")

    return VariantSelection(DEFAULT_VARIANT, "default")


def get_preference_context(user: Optional[str] = None) -> Dict[str, object]:
    """Return a serialisable representation of the resolved preference."""

    resolved = resolve_variant(user)
    context: Dict[str, object] = {
        "active_variant": resolved.value.value,
        "source": resolved.source,
    }

    system_raw = get_system_variant(raw=True)
    if system_raw:
        context["system_variant"] = system_raw.value

    user_raw = get_user_variant(user)
    if user_raw:
        context["user_variant"] = user_raw.value

    return context


def set_variant_preference(scope: str, variant: str, user: Optional[str] = None) -> Dict[str, object]:
    """Update a variant preference and return the resulting context."""

    normalized_scope = (scope or "user").strip().lower()
    if normalized_scope == "system":
        set_system_variant(variant)
        return get_preference_context()
    if normalized_scope == "user":
        set_user_variant(variant, user)
        return get_preference_context(user)
    raise ValueError("scope must be either 'system' or 'user'")


def get_variant_preference(user: Optional[str] = None) -> Dict[str, object]:
    return get_preference_context(user)


get_variant_preference = maybe_whitelist(get_variant_preference)
set_variant_preference = maybe_whitelist(set_variant_preference)
