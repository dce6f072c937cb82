"""Sandbox policy presets and command/domain decisions."""

import json

from loguru import logger

from flowguard.guard.types import (
    CommandDecision,
    MountMode,
    NetworkAccess,
    SandboxPolicy,
    SecurityLevel,
)

BASIC_POLICY = SandboxPolicy(
    level=SecurityLevel.BASIC,
    mount_mode=MountMode.RW,
    network=NetworkAccess.LIMITED,
    max_memory_mb=512,
    max_cpu_percent=100,
    max_runtime_seconds=300,
)

STRICT_POLICY = SandboxPolicy(
    level=SecurityLevel.STRICT,
    mount_mode=MountMode.RO,
    network=NetworkAccess.NONE,
    max_memory_mb=256,
    max_cpu_percent=50,
    max_runtime_seconds=60,
)

PARANOID_POLICY = SandboxPolicy(
    level=SecurityLevel.PARANOID,
    mount_mode=MountMode.NONE,
    network=NetworkAccess.NONE,
    max_memory_mb=128,
    max_cpu_percent=25,
    max_runtime_seconds=30,
)


def _matches(cmd: str, pattern: str) -> bool:
    """Exact match, or prefix match when the pattern ends with ``*``."""
    if cmd == pattern:
        return True
    if pattern.endswith("*"):
        return cmd.startswith(pattern[:-1])
    return False


def check_command(cmd: str, policy: SandboxPolicy) -> CommandDecision:
    """
    Decide whether a command may run under a policy.

    Security flow:
    1. Blocked commands always deny
    2. With an allowlist, a match allows and anything else is sandboxed
    3. Without an allowlist, the security level decides
    """
    for blocked in policy.blocked_commands:
        if _matches(cmd, blocked):
            logger.debug(f"Command denied by blocklist entry: {blocked}")
            return CommandDecision.DENY

    if policy.allowed_commands:
        for allowed in policy.allowed_commands:
            if _matches(cmd, allowed):
                return CommandDecision.ALLOW
        return CommandDecision.SANDBOX

    if policy.level == SecurityLevel.NONE:
        return CommandDecision.ALLOW
    if policy.level == SecurityLevel.PARANOID:
        logger.debug("Command denied by paranoid security level")
        return CommandDecision.DENY
    return CommandDecision.SANDBOX


def check_domain(domain: str, policy: SandboxPolicy) -> bool:
    """Check if a domain may be reached under a policy."""
    if policy.network == NetworkAccess.FULL:
        return True
    if policy.network == NetworkAccess.NONE:
        return False

    # Limited: no domains configured means no restriction
    if not policy.allowed_domains:
        return True

    for allowed in policy.allowed_domains:
        if domain == allowed:
            return True
        # Subdomain match must fall on a label boundary
        if domain.endswith("." + allowed):
            return True
    return False


def policy_for_level(level: SecurityLevel) -> SandboxPolicy:
    """Get the preset policy for a security level."""
    if level == SecurityLevel.NONE:
        return SandboxPolicy(
            level=SecurityLevel.NONE,
            mount_mode=MountMode.RW,
            network=NetworkAccess.FULL,
        )
    if level == SecurityLevel.STRICT:
        return STRICT_POLICY
    if level == SecurityLevel.PARANOID:
        return PARANOID_POLICY
    return BASIC_POLICY


def serialize_policy(policy: SandboxPolicy) -> str:
    """Serialize the headline limits of a policy to compact JSON."""
    return json.dumps(
        {
            "level": policy.level.value,
            "mount": policy.mount_mode.value,
            "network": policy.network.value,
            "max_memory_mb": policy.max_memory_mb,
            "max_runtime_seconds": policy.max_runtime_seconds,
        },
        separators=(",", ":"),
    )
