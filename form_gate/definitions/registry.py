"""Registry for loading and caching form definitions."""

import json
import logging
from pathlib import Path

import jsonschema

from form_gate.catalog.validators import ValidatorRegistry, create_validator_registry
from form_gate.definitions.models import FormDefinition
from form_gate.errors import DefinitionNotFoundError, DefinitionValidationError

logger = logging.getLogger(__name__)


def _version_key(version: str) -> tuple[tuple[int, int | str], ...]:
    return tuple(
        (0, int(part)) if part.isdigit() else (1, part) for part in version.split(".")
    )


class FormDefinitionRegistry:
    """Registry for loading and caching form definitions.

    Loads definitions from a directory structure:
        <registry_path>/forms/<form_id>/<version>.json

    Where version uses dashes instead of dots (e.g., 1-0-0.json for 1.0.0).
    """

    def __init__(
        self,
        registry_path: Path | str,
        schema_path: Path | str | None = None,
        validators: ValidatorRegistry | None = None,
    ) -> None:
        """Initialize the form definition registry.

        Args:
            registry_path: Path to the form registry directory.
            schema_path: Optional path to the form_definition schema for validation.
            validators: Validator registry used to resolve names (default: stock validators).
        """
        self.registry_path = Path(registry_path)
        self.forms_path = self.registry_path / "forms"
        self.validators = validators if validators is not None else create_validator_registry()
        self._cache: dict[tuple[str, str], FormDefinition] = {}
        self._schema: dict | None = None

        if schema_path:
            with open(schema_path) as f:
                self._schema = json.load(f)

    def _version_to_filename(self, version: str) -> str:
        """Convert version string to filename (1.0.0 -> 1-0-0.json)."""
        return version.replace(".", "-") + ".json"

    def _get_definition_path(self, form_id: str, version: str) -> Path:
        return self.forms_path / form_id / self._version_to_filename(version)

    def get(self, form_id: str, version: str) -> FormDefinition:
        """Get a form definition by ID and version.

        Args:
            form_id: The form identifier (e.g., 'kyc_address').
            version: The version string (e.g., '1.0.0').

        Returns:
            The loaded FormDefinition.

        Raises:
            DefinitionNotFoundError: If the definition file doesn't exist.
            DefinitionValidationError: If it fails schema validation or names
                an unknown validator.
        """
        cache_key = (form_id, version)
        if cache_key in self._cache:
            return self._cache[cache_key]

        path = self._get_definition_path(form_id, version)
        if not path.exists():
            raise DefinitionNotFoundError(
                f"Form definition not found: {form_id}@{version} (expected at {path})"
            )

        with open(path) as f:
            data = json.load(f)

        if self._schema:
            try:
                jsonschema.validate(data, self._schema)
            except jsonschema.ValidationError as e:
                raise DefinitionValidationError(
                    f"Form definition validation failed for {form_id}@{version}: {e.message}"
                ) from e

        definition = FormDefinition.model_validate(data)
        for field in definition.fields:
            if not self.validators.has(field.validation):
                raise DefinitionValidationError(
                    f"Form definition {form_id}@{version}: field {field.field_id} "
                    f"uses unknown validator {field.validation!r}"
                )

        logger.debug("Loaded form definition %s@%s from %s", form_id, version, path)
        self._cache[cache_key] = definition
        return definition

    def list_forms(self) -> list[str]:
        """List all available form IDs."""
        if not self.forms_path.exists():
            return []
        return sorted(d.name for d in self.forms_path.iterdir() if d.is_dir())

    def list_versions(self, form_id: str) -> list[str]:
        """List all available versions for a form, oldest first."""
        form_path = self.forms_path / form_id
        if not form_path.exists():
            return []
        versions = [f.stem.replace("-", ".") for f in form_path.glob("*.json")]
        return sorted(versions, key=_version_key)

    def get_latest(self, form_id: str) -> FormDefinition:
        """Get the latest version of a form.

        Raises:
            DefinitionNotFoundError: If no versions exist.
        """
        versions = self.list_versions(form_id)
        if not versions:
            raise DefinitionNotFoundError(f"No versions found for form: {form_id}")
        return self.get(form_id, versions[-1])

    def resolve(self, form_id: str, version: str | None = None) -> FormDefinition:
        """Get a specific version, or the latest when version is None."""
        if version:
            return self.get(form_id, version)
        return self.get_latest(form_id)
