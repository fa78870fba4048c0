"""Execute interface for calling form-gate in process.

Checks a batch of payloads against a registered form definition and
returns plain dicts, so orchestrators need no form-gate types.
"""

from pathlib import Path
from typing import Any

from form_gate.callable.result import CallableResult
from form_gate.checking import PayloadChecker
from form_gate.config import get_form_registry_path
from form_gate.diagnostics import CheckStatus
from form_gate.definitions import FormDefinitionRegistry


def execute(params: dict[str, Any]) -> dict[str, Any]:
    """Check payloads against a form definition.

    Args:
        params: Dictionary containing:
            - form: str - The form definition ID (e.g., "kyc_address")
            - items: dict | list[dict] - One payload or a list of payloads,
              each mapping field id to raw string value
            - config: dict - Optional overrides:
                - version: str - Definition version (default: latest)
                - registry_path: str - Override the form registry path
                - schema_path: str - Validate the definition against this schema

    Returns:
        CallableResult dict with:
            - schema_version: "1.0"
            - items: list[dict] - Serialized FormDiagnostics, one per payload
            - stats: dict - input/valid/invalid counts

    Raises:
        ValueError: If required parameters are missing or malformed.
        DefinitionNotFoundError: If the form is not in the registry.
    """
    form_id = params.get("form")
    if not form_id:
        raise ValueError("'form' is required in params")

    items = params.get("items")
    if items is None:
        raise ValueError("'items' is required in params")
    if isinstance(items, dict):
        items = [items]
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise ValueError("'items' must be a payload dict or a list of payload dicts")

    config = params.get("config", {})
    registry_path = get_form_registry_path(
        Path(config["registry_path"]) if "registry_path" in config else None
    )
    registry = FormDefinitionRegistry(registry_path, schema_path=config.get("schema_path"))
    definition = registry.resolve(form_id, config.get("version"))

    diagnostics = PayloadChecker(definition, registry.validators).check_batch(items)

    valid_count = sum(1 for d in diagnostics if d.status == CheckStatus.VALID)
    result = CallableResult(
        items=[d.model_dump(mode="json") for d in diagnostics],
        stats={
            "input": len(items),
            "valid": valid_count,
            "invalid": len(diagnostics) - valid_count,
        },
    )
    return result.to_dict()
