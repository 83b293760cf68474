from __future__ import annotations


class ImplementorFormatError(ValueError):
    """Raised when implementor data (script, wire entry or markup) cannot be understood."""
