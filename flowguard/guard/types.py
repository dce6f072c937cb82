"""Type definitions for the path and command guard."""

from dataclasses import dataclass
from enum import Enum


class SecurityLevel(str, Enum):
    """Sandbox strictness levels."""
    NONE = "none"            # No sandbox (trusted)
    BASIC = "basic"          # Limited network, no host mounts
    STRICT = "strict"        # No network, read-only workspace
    PARANOID = "paranoid"    # No network, no mounts, minimal tools

    @classmethod
    def from_string(cls, value: str) -> "SecurityLevel | None":
        """Look up a level by its label, None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


class MountMode(str, Enum):
    """How the workspace is mounted into the sandbox."""
    NONE = "none"
    RO = "ro"
    RW = "rw"


class NetworkAccess(str, Enum):
    """Network reachability from inside the sandbox."""
    FULL = "full"
    LIMITED = "limited"      # Only allowed domains
    NONE = "none"


class CommandDecision(str, Enum):
    """Outcome of a policy check on a command."""
    ALLOW = "allow"
    DENY = "deny"
    SANDBOX = "sandbox"      # Run inside the sandbox


@dataclass(frozen=True)
class SandboxPolicy:
    """Resource and access limits for sandboxed execution."""
    level: SecurityLevel = SecurityLevel.BASIC
    mount_mode: MountMode = MountMode.RW
    network: NetworkAccess = NetworkAccess.LIMITED
    max_memory_mb: int = 512
    max_cpu_percent: int = 100
    max_runtime_seconds: int = 300  # 5 minutes
    allowed_commands: tuple[str, ...] = ()
    blocked_commands: tuple[str, ...] = ()
    allowed_domains: tuple[str, ...] = ()


@dataclass
class PathCheck:
    """Result of checking a path against a workspace root."""
    ok: bool
    reason: str | None = None
    normalized: str | bytes | None = None
