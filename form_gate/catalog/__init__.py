"""Stock validators and concrete field sets."""

from form_gate.catalog.forms import (
    ACKNOWLEDGE_EXPORT,
    ACKNOWLEDGED,
    CONFIRM_ADDRESS,
    PUBLIC_ADDRESS,
    PUBLIC_ADDRESS_LENGTH,
    build_kyc_address_form,
    build_settings_form,
    build_signup_form,
    kyc_address_rules,
    settings_fields,
    settings_values,
    signup_fields,
)
from form_gate.catalog.validators import (
    ValidatorRegistry,
    create_validator_registry,
    equals,
    exact_length,
    max_length,
    pattern,
    validate_email,
    validate_github,
    validate_graffiti,
)

__all__ = [
    # Validators
    "ValidatorRegistry",
    "create_validator_registry",
    "validate_email",
    "validate_graffiti",
    "validate_github",
    "equals",
    "exact_length",
    "max_length",
    "pattern",
    # KYC
    "PUBLIC_ADDRESS",
    "CONFIRM_ADDRESS",
    "ACKNOWLEDGE_EXPORT",
    "ACKNOWLEDGED",
    "PUBLIC_ADDRESS_LENGTH",
    "kyc_address_rules",
    "build_kyc_address_form",
    # Signup / settings
    "signup_fields",
    "build_signup_form",
    "settings_fields",
    "settings_values",
    "build_settings_form",
]
