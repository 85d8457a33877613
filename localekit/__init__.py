"""localekit - message lookup, pluralization and interpolation.

Resolves display strings from nested per-locale translation tables with a
locale fallback chain, pluralization rules and placeholder substitution.
"""

from localekit.i18n import I18n, create_i18n

__all__ = ["I18n", "create_i18n"]
