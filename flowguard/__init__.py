"""flowguard - path, command and credential guards for sandboxed agents."""

__version__ = "0.1.0"
