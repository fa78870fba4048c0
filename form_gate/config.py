"""Configuration for form-gate.

User-facing messages and credential-revocation signatures live in
`SubmissionSettings`. Machine-wide defaults are read from
`~/.config/form-gate/config.yaml` (home overridable by FORM_GATE_HOME).
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_REGISTRY_DIRNAME = "form-registry"


class SubmissionSettings(BaseModel):
    """Messages, routes and signatures used by the submission controller."""

    invalid_fields_message: str = "Please correct the invalid fields below"
    transport_error_message: str = "Something went wrong, please try again"
    success_message: str = "User settings updated"
    unauthorized_message: str = "You are not authorized to go there"
    relogin_message: str = "Please log in again."
    login_path: str = "/login"
    unauthorized_path: str = "/"
    revoked_codes: list[int] = Field(default_factory=lambda: [-32603])
    revoked_markers: list[str] = Field(
        default_factory=lambda: ["-32603", "User denied account access"]
    )


class GlobalConfig(BaseModel):
    """Contents of the global config file."""

    default_form_registry_path: str | None = None
    submission: SubmissionSettings = Field(default_factory=SubmissionSettings)


def get_form_gate_home() -> Path:
    """Directory holding the global config file."""
    env_home = os.environ.get("FORM_GATE_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "form-gate"


def get_config_path() -> Path:
    return get_form_gate_home() / "config.yaml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load the global config file, falling back to defaults if it is absent.

    Args:
        path: Explicit config path (default: the file under the form-gate home).

    Returns:
        The parsed GlobalConfig.
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return GlobalConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    return GlobalConfig.model_validate(data)


def get_form_registry_path(explicit: Path | None = None) -> Path:
    """Resolve the form definition registry directory.

    Order: explicit path, FORM_GATE_REGISTRY, global config, ./form-registry.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get("FORM_GATE_REGISTRY")
    if env_path:
        return Path(env_path)

    global_config = load_global_config()
    if global_config.default_form_registry_path:
        return Path(global_config.default_form_registry_path)

    return Path(DEFAULT_REGISTRY_DIRNAME)
