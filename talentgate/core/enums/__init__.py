"""Core enums package.

Usage:
    from talentgate.core.enums import ErrorCode, Environment
"""

from talentgate.core.enums.environment import Environment
from talentgate.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
