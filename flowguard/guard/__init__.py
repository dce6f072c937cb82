"""Path and command guard for sandboxed execution."""

from flowguard.guard.types import (
    SecurityLevel,
    MountMode,
    NetworkAccess,
    CommandDecision,
    SandboxPolicy,
    PathCheck,
)
from flowguard.guard.paths import (
    is_path_traversal,
    normalize_path,
    is_within_base,
    check_path,
)
from flowguard.guard.commands import (
    extract_binary_name,
    is_safe_binary,
    SAFE_BINARIES,
)
from flowguard.guard.policy import (
    BASIC_POLICY,
    STRICT_POLICY,
    PARANOID_POLICY,
    check_command,
    check_domain,
    policy_for_level,
    serialize_policy,
)

__all__ = [
    "SecurityLevel",
    "MountMode",
    "NetworkAccess",
    "CommandDecision",
    "SandboxPolicy",
    "PathCheck",
    "is_path_traversal",
    "normalize_path",
    "is_within_base",
    "check_path",
    "extract_binary_name",
    "is_safe_binary",
    "SAFE_BINARIES",
    "BASIC_POLICY",
    "STRICT_POLICY",
    "PARANOID_POLICY",
    "check_command",
    "check_domain",
    "policy_for_level",
    "serialize_policy",
]
