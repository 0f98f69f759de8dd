"""Configuration profiles for the Tumblr API client.

This module provides read-only profile management: profiles are loaded
from a TOML file or from environment variables and turned into client
settings. Nothing is written back.
"""

import os
import tomllib
from pathlib import Path
from typing import Dict, List, Optional, Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .exceptions import ConfigError
from .methods import API_BASE_URL
from .utils.auth import Token

ENV_CONSUMER_KEY = "TUMBLR_CONSUMER_KEY"
ENV_CONSUMER_SECRET = "TUMBLR_CONSUMER_SECRET"
ENV_TOKEN = "TUMBLR_TOKEN"
ENV_TOKEN_SECRET = "TUMBLR_TOKEN_SECRET"


class Profile(BaseModel):
    """Configuration profile for a Tumblr application."""

    name: str = Field(..., description="Profile name")
    consumer_key: str = Field(..., description="OAuth consumer key")
    consumer_secret: str = Field(..., description="OAuth consumer secret")
    token_key: Optional[str] = Field(None, description="OAuth access token")
    token_secret: Optional[str] = Field(None, description="OAuth access token secret")
    base_url: str = Field(default=API_BASE_URL, description="Tumblr API base URL")
    timeout: int = Field(default=30, description="Request timeout in seconds")
    send_api_key: bool = Field(default=False, description="Send the consumer key as api_key")

    @field_validator("consumer_key", "consumer_secret")
    @classmethod
    def validate_consumer_credentials(cls, v: str) -> str:
        """Validate consumer credentials are not blank."""
        if not v or not v.strip():
            raise ValueError("Consumer key and secret cannot be empty")
        return v.strip()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout value."""
        if v <= 0:
            raise ValueError("Timeout must be greater than 0")
        if v > 300:  # 5 minutes max
            raise ValueError("Timeout cannot exceed 300 seconds")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL is absolute."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_token_pair(self) -> "Profile":
        """Validate the access token key and secret are given together."""
        if bool(self.token_key) != bool(self.token_secret):
            raise ValueError("token_key and token_secret must be provided together")
        return self

    @property
    def token(self) -> Optional[Token]:
        """Access token of this profile, if configured."""
        if self.token_key and self.token_secret:
            return Token(self.token_key, self.token_secret)
        return None


class ConfigManager:
    """Loads configuration profiles for Tumblr applications.

    The configuration file looks like::

        active_profile = "default"

        [profiles.default]
        consumer_key = "..."
        consumer_secret = "..."
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """Initialize configuration manager.

        Args:
            config_file: Configuration file path. If None, uses default.
        """
        self.config_file = config_file or Path.home() / ".tumblrclient" / "config.toml"

        self._profiles: Dict[str, Profile] = {}
        self._active_profile: Optional[str] = None
        self._load_config()

    def get_profile(self, name: str) -> Profile:
        """Get a specific profile by name.

        Args:
            name: Profile name

        Returns:
            Profile instance

        Raises:
            ConfigError: If profile doesn't exist
        """
        if name not in self._profiles:
            raise ConfigError(f"Profile '{name}' not found")

        return self._profiles[name]

    def get_default_profile(self) -> Profile:
        """Get the default (active) profile.

        Environment configuration takes precedence over the file.

        Returns:
            Default profile

        Raises:
            ConfigError: If no default profile is available
        """
        if self.has_environment_config():
            return self.get_environment_config()

        if not self._active_profile:
            raise ConfigError("No default profile set")

        return self.get_profile(self._active_profile)

    def get_active_profile(self) -> Optional[str]:
        """Get the name of the active profile."""
        return self._active_profile

    def list_profiles(self) -> List[Dict[str, Any]]:
        """List all available profiles, without their secrets.

        Returns:
            List of profile configurations
        """
        profiles = []
        for profile in self._profiles.values():
            profile_dict = profile.model_dump(exclude={"consumer_secret", "token_secret"})
            profile_dict["active"] = profile.name == self._active_profile
            profiles.append(profile_dict)

        return profiles

    def has_environment_config(self) -> bool:
        """Check if environment variables provide sufficient configuration."""
        return bool(os.getenv(ENV_CONSUMER_KEY) and os.getenv(ENV_CONSUMER_SECRET))

    def get_environment_config(self) -> Profile:
        """Get configuration from environment variables.

        Returns:
            Profile named ``environment``

        Raises:
            ConfigError: If insufficient environment configuration
        """
        consumer_key = os.getenv(ENV_CONSUMER_KEY)
        consumer_secret = os.getenv(ENV_CONSUMER_SECRET)

        if not (consumer_key and consumer_secret):
            raise ConfigError(
                f"{ENV_CONSUMER_KEY} and {ENV_CONSUMER_SECRET} environment variables are required"
            )

        try:
            return Profile(
                name="environment",
                consumer_key=consumer_key,
                consumer_secret=consumer_secret,
                token_key=os.getenv(ENV_TOKEN) or None,
                token_secret=os.getenv(ENV_TOKEN_SECRET) or None,
            )
        except ValueError as e:
            raise ConfigError(f"Invalid environment configuration: {e}")

    def _load_config(self) -> None:
        """Load configuration from file."""
        if not self.config_file.exists():
            return

        try:
            with open(self.config_file, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load configuration: {e}")

        for name, profile_data in (config_data.get("profiles") or {}).items():
            if not isinstance(profile_data, dict):
                raise ConfigError(f"Profile '{name}' must be a table")
            try:
                self._profiles[name] = Profile(**{**profile_data, "name": name})
            except ValueError as e:
                raise ConfigError(f"Invalid profile '{name}': {e}")

        active = config_data.get("active_profile")
        if active is not None and active not in self._profiles:
            raise ConfigError(f"Active profile '{active}' not found")
        self._active_profile = active
