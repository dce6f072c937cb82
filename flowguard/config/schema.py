"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flowguard.credentials.types import CredentialRequirements
from flowguard.guard.policy import policy_for_level
from flowguard.guard.types import SandboxPolicy, SecurityLevel


class CredentialPolicyConfig(BaseModel):
    """Credential strength and rotation policy."""
    min_length: int = 16
    max_length: int = 256
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_digit: bool = True
    require_special: bool = False
    reject_common: bool = True
    max_age_days: int = 90  # Rotation window
    min_entropy_bits: float = 3.0  # Bits per symbol

    def to_requirements(self) -> CredentialRequirements:
        """Build the immutable requirements record passed to validators."""
        return CredentialRequirements(
            min_length=self.min_length,
            max_length=self.max_length,
            require_uppercase=self.require_uppercase,
            require_lowercase=self.require_lowercase,
            require_digit=self.require_digit,
            require_special=self.require_special,
            reject_common=self.reject_common,
        )


class SandboxConfig(BaseModel):
    """Sandbox execution configuration."""
    level: SecurityLevel = SecurityLevel.BASIC
    workspace: str = "~/.flowguard/workspace"
    allowed_commands: list[str] = Field(default_factory=list)
    blocked_commands: list[str] = Field(default_factory=list)
    allowed_domains: list[str] = Field(default_factory=list)

    def to_policy(self) -> SandboxPolicy:
        """Build a policy from the level preset plus configured lists."""
        preset = policy_for_level(self.level)
        return SandboxPolicy(
            level=preset.level,
            mount_mode=preset.mount_mode,
            network=preset.network,
            max_memory_mb=preset.max_memory_mb,
            max_cpu_percent=preset.max_cpu_percent,
            max_runtime_seconds=preset.max_runtime_seconds,
            allowed_commands=tuple(self.allowed_commands),
            blocked_commands=tuple(self.blocked_commands),
            allowed_domains=tuple(self.allowed_domains),
        )


class GuardConfig(BaseSettings):
    """Root configuration for flowguard."""
    model_config = SettingsConfigDict(env_prefix="FLOWGUARD_", env_nested_delimiter="__")

    credentials: CredentialPolicyConfig = Field(default_factory=CredentialPolicyConfig)
    sandbox: SandboxConfig = Field(default_factory=SandboxConfig)

    @property
    def workspace_path(self) -> Path:
        """Get expanded workspace path."""
        return Path(self.sandbox.workspace).expanduser()
