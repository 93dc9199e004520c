"""Server-side helpers exposed by the Kurdish calendar package."""

from . import converter, kurdish, locale, preferences

__all__ = [
    "converter",
    "kurdish",
    "locale",
    "preferences",
]
