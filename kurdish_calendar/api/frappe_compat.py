"""Access to the Frappe runtime when the package runs inside a bench."""
from __future__ import annotations

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - handled via fallback store
    frappe = None  # type: ignore

__all__ = [
    "frappe",
    "get_db",
    "maybe_whitelist",
]


def get_db():
    """Return ``frappe.db`` for the active site, or ``None`` outside a request."""

    if not frappe:
        return None
    # ``frappe.db`` is a local proxy that is falsy until a site is connected.
    db = getattr(frappe, "db", None)
    return db if db else None


def maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist()(func)  # type: ignore[attr-defined]
    return func
