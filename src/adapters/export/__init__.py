"""Export adapters - Tabular serializers for the participant roster."""

from .xlsx import XlsxRosterSerializer

__all__ = ["XlsxRosterSerializer"]
