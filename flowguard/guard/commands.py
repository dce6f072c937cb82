"""Command binary extraction and allowlist checks."""

from typing import AnyStr

from loguru import logger

from flowguard.guard.paths import _lit

# Binaries allowed in sandboxed execution. Adding a name here is a
# security decision, not configuration.
SAFE_BINARIES = frozenset([
    # Files and text
    "ls", "cat", "grep", "find", "head", "tail", "wc", "sort", "uniq",
    "cut", "sed", "awk", "tr", "echo", "printf", "diff", "patch", "file",
    "stat", "du", "df", "basename", "dirname",
    # Filesystem
    "mkdir", "cp", "mv", "touch", "chmod",
    # System info
    "date", "env", "pwd", "whoami", "hostname", "uname", "id",
    "test", "true", "false",
    # VCS and toolchains
    "git", "python", "python3", "node", "zig", "cargo", "go", "make",
    "cmake",
    # Package managers
    "npm", "yarn", "pnpm", "bun", "deno",
    # Network fetchers
    "curl", "wget", "jq",
])


def extract_binary_name(command: AnyStr) -> AnyStr:
    """
    Get the binary name from a command string.

    Leading spaces and tabs are skipped, the first token is taken, and
    any directory prefix is dropped (``/usr/bin/git status`` -> ``git``).
    Quoting is not interpreted.
    """
    trimmed = command.lstrip(_lit(command, " \t"))
    if not trimmed:
        return trimmed

    end = len(trimmed)
    for ws in (_lit(command, " "), _lit(command, "\t")):
        pos = trimmed.find(ws)
        if pos != -1 and pos < end:
            end = pos
    first_arg = trimmed[:end]

    slash = first_arg.rfind(_lit(command, "/"))
    if slash != -1:
        return first_arg[slash + 1:]
    return first_arg


def is_safe_binary(command: str | bytes) -> bool:
    """Check if a command runs an allowlisted binary (exact, case-sensitive)."""
    binary = extract_binary_name(command)
    if not binary:
        return False

    if isinstance(binary, bytes):
        try:
            binary = binary.decode("ascii")
        except UnicodeDecodeError:
            return False

    if binary not in SAFE_BINARIES:
        logger.debug(f"Binary not in allowlist: {binary}")
        return False
    return True
