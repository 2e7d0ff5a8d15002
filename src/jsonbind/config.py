# src/jsonbind/config.py
"""
Azure OpenAI settings for the sentiment analyzer.

Values come from the environment. A ``.env`` file in the working directory
(or at *env_file*) is loaded first without overriding variables that are
already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_API_VERSION = "2024-10-21"


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if not value:
        raise ConfigurationError(f"{name} is not defined")
    return value


@dataclass(frozen=True)
class AzureSettings:
    """
    Connection settings for an Azure OpenAI deployment.

    Attributes:
        api_key: ``AZURE_API_KEY``
        deployment: ``AZURE_DEPLOYMENT``, the deployment (model) name
        api_base: ``AZURE_API_BASE``, a resource name or full endpoint URL
        api_version: ``AZURE_API_VERSION``, optional
    """

    api_key: str
    deployment: str
    api_base: str
    api_version: str = DEFAULT_API_VERSION

    @property
    def endpoint(self) -> str:
        """Endpoint URL; bare resource names expand to the default Azure host."""
        if self.api_base.startswith(("http://", "https://")):
            return self.api_base
        return f"https://{self.api_base}.openai.azure.com"

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        env_file: Optional[Path] = None,
    ) -> "AzureSettings":
        """
        Build settings from *env* (defaults to ``os.environ``).

        Raises:
            ConfigurationError: If a required variable is missing or empty
        """
        if env is None:
            load_dotenv(env_file or Path.cwd() / ".env", override=False)
            env = os.environ

        return cls(
            api_key=_require(env, "AZURE_API_KEY"),
            deployment=_require(env, "AZURE_DEPLOYMENT"),
            api_base=_require(env, "AZURE_API_BASE"),
            api_version=env.get("AZURE_API_VERSION") or DEFAULT_API_VERSION,
        )
