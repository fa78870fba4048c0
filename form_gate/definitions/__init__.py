"""Form definitions loaded from a registry directory."""

from form_gate.definitions.models import FieldSpec, FormDefinition, OptionSpec, RuleSpec
from form_gate.definitions.registry import FormDefinitionRegistry

__all__ = [
    "FormDefinitionRegistry",
    "FormDefinition",
    "FieldSpec",
    "OptionSpec",
    "RuleSpec",
]
