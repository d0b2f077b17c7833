"""Configuration loading from YAML and environment.

Action inputs follow the GitHub Actions convention (``INPUT_<NAME>``
environment variables). Secrets (tokens) are taken from environment
variables or from files (Docker secrets). Never put real tokens in config
files committed to the repo.
"""

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from issue_adr.models import AdrStatus

DEFAULT_STATUS = AdrStatus.PROPOSED


class ConfigurationError(Exception):
    """Raised when action inputs are missing or invalid."""

    pass


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so secret lookups read the same mapping
_current_env: dict[str, str] = {}


class ActionInputs(BaseSettings):
    """Inputs declared by the action (INPUT_* env vars)."""

    model_config = SettingsConfigDict(env_prefix="INPUT_", extra="ignore")

    label_name: str = Field(default="", description="Label that marks an issue as an ADR request")
    destination_folder: str = Field(default="", description="Folder for ADR files, relative to the workspace")
    adr_status: str = Field(default="", description="accepted, proposed or rejected; empty means proposed")
    github_token: str | None = Field(default=None, description="Explicit token; falls back to GITHUB_TOKEN")

    @field_validator("label_name", "destination_folder", "adr_status", "github_token", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        """Inputs are trimmed, as the runner's input reader does."""
        return value.strip() if isinstance(value, str) else value


class GitHubConfig(BaseSettings):
    """GitHub API and runner settings (GITHUB_* env vars)."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    repository: str = Field(default="", description="Target repo e.g. octo-org/octo-repo")
    event_path: str | None = Field(default=None, description="Path to the webhook event payload (JSON)")
    workspace: str = Field(default=".", description="Checkout root the ADR folder is relative to")
    output: str | None = Field(default=None, description="Step output file (GITHUB_OUTPUT)")
    branch: str = Field(default="main", description="Branch the ADR commit is added to")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    runner_debug: bool = Field(default=False, description="Set from RUNNER_DEBUG=1 (debug re-run); forces DEBUG")


class AppConfig(BaseSettings):
    """Root config passed explicitly into the pipeline."""

    model_config = SettingsConfigDict(extra="ignore")

    inputs: ActionInputs = Field(default_factory=ActionInputs)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def token_resolved(self) -> str | None:
        """Explicit input token first, then the GitHub config token."""
        for candidate in (self.inputs.github_token, self.github.token):
            if candidate and not candidate.startswith("${"):
                return candidate
        return None


def resolve_status(value: str | None) -> AdrStatus:
    """Map the adr_status input to AdrStatus (empty -> proposed)."""
    if not value:
        return DEFAULT_STATUS
    try:
        return AdrStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AdrStatus)
        raise ConfigurationError(f"Invalid adr_status: {value}. Must be one of: {allowed}") from None


def require_inputs(inputs: ActionInputs) -> None:
    """Raise ConfigurationError for the first missing required input."""
    for name in ("label_name", "destination_folder"):
        if not getattr(inputs, name).strip():
            raise ConfigurationError(f"Input required and not supplied: {name}")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with the loaded environment."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def _env_section(model: type[BaseSettings], prefix: str) -> dict[str, Any]:
    """Collect PREFIX_FIELD values for the model's fields from the loaded env."""
    values: dict[str, Any] = {}
    for name in model.model_fields:
        key = f"{prefix}{name.upper()}"
        if _current_env.get(key):
            values[name] = _current_env[key]
    return values


def _defaults(model: type[BaseSettings]) -> dict[str, Any]:
    return {name: field.default for name, field in model.model_fields.items()}


def load_config(config_path: Path | None = None, env: Mapping[str, str] | None = None) -> AppConfig:
    """Load config from an optional YAML file overlaid by the environment.

    ``env`` defaults to ``os.environ``; pass a mapping to drive the action
    without touching the process environment.
    Secrets: INPUT_GITHUB_TOKEN, GITHUB_TOKEN or GITHUB_TOKEN_FILE.
    """
    global _current_env
    _current_env = dict(os.environ if env is None else env)

    raw: dict[str, Any] = {}
    if config_path is not None and config_path.is_file():
        raw = yaml.safe_load(config_path.read_text()) or {}
        raw = _substitute_env(raw)

    # Defaults are passed explicitly so BaseSettings never reads the process env here
    inputs_raw = {
        **_defaults(ActionInputs),
        **(raw.get("inputs") or {}),
        **_env_section(ActionInputs, "INPUT_"),
    }
    github_raw = {
        **_defaults(GitHubConfig),
        **(raw.get("github") or {}),
        **_env_section(GitHubConfig, "GITHUB_"),
    }
    logging_raw = {
        **_defaults(LoggingConfig),
        **(raw.get("logging") or {}),
        **_env_section(LoggingConfig, "LOGGING_"),
    }

    if not github_raw.get("token"):
        github_raw["token"] = _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")
    if _current_env.get("RUNNER_DEBUG") == "1":
        logging_raw["runner_debug"] = True

    return AppConfig(
        inputs=ActionInputs(**inputs_raw),
        github=GitHubConfig(**github_raw),
        logging=LoggingConfig(**logging_raw),
    )
