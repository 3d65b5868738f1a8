"""Authorization infrastructure package.

- model.conf: Casbin RBAC model definition
- casbin_policy_compiler.py: resolves role inheritance through Casbin
"""

from talentgate.infrastructure.authorization.casbin_policy_compiler import (
    MODEL_PATH,
    CasbinPolicyCompiler,
)

__all__ = ["MODEL_PATH", "CasbinPolicyCompiler"]
