"""Configuration module for flowguard."""

from flowguard.config.schema import CredentialPolicyConfig, GuardConfig, SandboxConfig

__all__ = ["GuardConfig", "CredentialPolicyConfig", "SandboxConfig"]
