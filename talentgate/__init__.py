"""Talentgate authorization core.

Role-permission matrix, context-aware permission evaluation and an
append-only audit trail for the staffing and vendor-hub application.
"""

__version__ = "0.1.0"
