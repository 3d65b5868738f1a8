"""Domain protocols (ports).

Usage:
    from talentgate.domain.protocols import AuditProtocol, LoggerProtocol
"""

from talentgate.domain.protocols.actor_resolver_protocol import ActorResolverProtocol
from talentgate.domain.protocols.audit_protocol import AuditProtocol
from talentgate.domain.protocols.logger_protocol import LoggerProtocol
from talentgate.domain.protocols.policy_compiler_protocol import PolicyCompilerProtocol
from talentgate.domain.protocols.role_grant_repository_protocol import (
    RoleGrantRepositoryProtocol,
)

__all__ = [
    "ActorResolverProtocol",
    "AuditProtocol",
    "LoggerProtocol",
    "PolicyCompilerProtocol",
    "RoleGrantRepositoryProtocol",
]
