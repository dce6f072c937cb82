"""Path traversal detection, normalization and containment checks.

These checks are byte-level and POSIX-only: backslash separators are
never canonicalized, and a Windows-style traversal is only caught
because it contains a literal ``..``.
"""

from typing import AnyStr

from loguru import logger

from flowguard.guard.types import PathCheck


def _lit(value: str | bytes, text: str) -> str | bytes:
    """Return ``text`` in the same type (str or bytes) as ``value``."""
    return text if isinstance(value, str) else text.encode("ascii")


def is_path_traversal(path: str | bytes) -> bool:
    """Check if a path contains a ``..`` sequence or a NUL byte.

    Detection is substring based: URL-encoded or otherwise obfuscated
    forms that avoid the literal bytes are not detected.
    """
    return _lit(path, "..") in path or _lit(path, "\0") in path


def normalize_path(path: AnyStr, capacity: int | None = None) -> AnyStr:
    """
    Collapse ``//`` and ``/./`` and strip a trailing slash.

    ``..`` segments are left alone; reject traversal with
    ``is_path_traversal`` before normalizing. ``capacity`` bounds the
    output length: once it is reached copying stops and the truncated
    result is returned.
    """
    sep = _lit(path, "/")
    dot = _lit(path, ".")
    limit = len(path) if capacity is None else capacity
    out: list = []
    n = len(path)
    i = 0

    while i < n:
        cur = path[i:i + 1]
        if cur == sep and path[i + 1:i + 2] == sep:
            # Skip double slashes
            i += 1
            continue
        if cur == sep and path[i + 1:i + 2] == dot and (i + 2 >= n or path[i + 2:i + 3] == sep):
            # Skip /./ and a trailing /.
            i += 2
            continue
        if len(out) >= limit:
            break
        out.append(cur)
        i += 1

    result = path[:0].join(out)
    # Remove trailing slash (unless root)
    if len(result) > 1 and result[-1:] == sep:
        result = result[:-1]
    return result


def is_within_base(path: str | bytes, base: str | bytes) -> bool:
    """Check if ``path`` is ``base`` itself or lies below it.

    ``/workspace2`` is not inside ``/workspace``: the byte after the
    prefix must be a separator.
    """
    if is_path_traversal(path):
        return False
    if len(path) < len(base):
        return False
    if not path.startswith(base):
        return False
    if len(path) == len(base):
        return True
    return path[len(base):len(base) + 1] == _lit(path, "/")


def check_path(path: AnyStr, base: AnyStr) -> PathCheck:
    """
    Run the full path gate: reject traversal, normalize, check containment.

    Returns a PathCheck carrying the normalized path when accepted.
    """
    if not path:
        return PathCheck(ok=False, reason="Empty path")

    if is_path_traversal(path):
        logger.debug("Rejected path with traversal sequence")
        return PathCheck(ok=False, reason="Path traversal not allowed")

    normalized = normalize_path(path)
    if not is_within_base(normalized, normalize_path(base)):
        logger.debug(f"Path outside workspace root: {normalized!r}")
        return PathCheck(
            ok=False,
            reason="Path is outside the workspace root",
            normalized=normalized,
        )

    return PathCheck(ok=True, normalized=normalized)
