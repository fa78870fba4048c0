"""Concrete field sets: KYC address entry and user settings.

These are instances of the descriptor model, not part of the engine.
Country lists are supplied by the caller as (code, name) pairs.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from form_gate.fields.descriptor import (
    DEFAULT_ERROR_TEXT,
    FieldDescriptor,
    FieldOption,
    FieldVariant,
    always_valid,
)
from form_gate.fields.unset import UNSET, FieldValue
from form_gate.fields.whitespace import WhitespacePolicy
from form_gate.form.aggregate import FormAggregate
from form_gate.form.rules import CrossFieldRule, matches
from form_gate.catalog.validators import (
    equals,
    exact_length,
    validate_email,
    validate_github,
    validate_graffiti,
)

PUBLIC_ADDRESS_LENGTH = 64
ACKNOWLEDGED = "true"

CountryList = Iterable[tuple[str, str]]


# KYC public address

PUBLIC_ADDRESS = FieldDescriptor(
    field_id="address",
    label="Public Address",
    placeholder="Your Iron Fish public address",
    validation=exact_length(PUBLIC_ADDRESS_LENGTH),
    default_error_text=f"A {PUBLIC_ADDRESS_LENGTH}-character string is required for public address",
    whitespace=WhitespacePolicy.BANNED,
)

CONFIRM_ADDRESS = FieldDescriptor(
    field_id="confirmAddress",
    label="Confirm Public Address",
    validation=always_valid,
    default_error_text="This field must match the public address above",
    whitespace=WhitespacePolicy.BANNED,
)

ACKNOWLEDGE_EXPORT = FieldDescriptor(
    field_id="acknowledged",
    label="I understand, and have exported my account.",
    validation=equals(ACKNOWLEDGED),
    default_error_text="Please confirm you have exported your account",
    explanation=(
        "You must have access to this address to receive your airdrop. "
        "Lost tokens sent to inaccessible accounts cannot be recovered."
    ),
    local_only=True,
)


def kyc_address_rules() -> tuple[CrossFieldRule, ...]:
    return (
        matches(
            CONFIRM_ADDRESS.field_id,
            PUBLIC_ADDRESS.field_id,
            CONFIRM_ADDRESS.default_error_text,
        ),
    )


def build_kyc_address_form() -> FormAggregate:
    """Public address, its confirmation and the export acknowledgment.

    The acknowledgment is set to ACKNOWLEDGED when the user ticks the box;
    it gates submission but is not part of the payload.
    """
    return FormAggregate(
        [PUBLIC_ADDRESS, CONFIRM_ADDRESS, ACKNOWLEDGE_EXPORT],
        rules=kyc_address_rules(),
    )


# Signup fields

def country_options(countries: CountryList) -> tuple[FieldOption, ...]:
    return tuple(FieldOption(name=name, value=code) for code, name in countries)


def signup_fields(countries: CountryList) -> dict[str, FieldDescriptor]:
    """Descriptors for a fresh signup form, keyed by field id."""
    return {
        "email": FieldDescriptor(
            field_id="email",
            label="Email",
            placeholder="Your email",
            validation=validate_email,
            default_error_text="Valid email address required",
            whitespace=WhitespacePolicy.BANNED,
        ),
        "graffiti": FieldDescriptor(
            field_id="graffiti",
            label="Graffiti",
            placeholder="Your tag",
            validation=validate_graffiti,
            default_error_text="Graffiti is too long",
            whitespace=WhitespacePolicy.TRIMMED,
            explanation="A graffiti tag is your Iron Fish username. It is case-sensitive.",
            server_normalized=True,
        ),
        "github": FieldDescriptor(
            field_id="github",
            label="Github",
            placeholder="Your github username",
            required=False,
            validation=validate_github,
            default_error_text="Github username is invalid",
            whitespace=WhitespacePolicy.BANNED,
        ),
        "social": FieldDescriptor(
            field_id="social",
            placeholder="Your username",
            required=False,
            variant=FieldVariant.RADIO_GROUP,
            options=(
                FieldOption(name="Discord", value="discord"),
                FieldOption(name="Telegram", value="telegram"),
            ),
            default_error_text=DEFAULT_ERROR_TEXT,
            whitespace=WhitespacePolicy.BANNED,
        ),
        "country_code": FieldDescriptor(
            field_id="country_code",
            label="Country",
            variant=FieldVariant.SINGLE_SELECT,
            options=country_options(countries),
            default_error_text=DEFAULT_ERROR_TEXT,
            show_placeholder_option=True,
            default_label="Select a country",
        ),
    }


def build_signup_form(countries: CountryList) -> FormAggregate:
    return FormAggregate(signup_fields(countries).values())


# Settings (editing an existing record)

SETTINGS_KEYS = ("email", "github", "graffiti", "discord", "telegram", "country_code")


def settings_fields(
    countries: CountryList,
    any_blocks_mined: bool = False,
) -> list[FieldDescriptor]:
    """Editable variants of the signup fields, in display order.

    Every field is controlled. Email is shown read-only and always starts
    touched; graffiti is locked once it has mined blocks. The radio group
    is split into one plain field per platform.
    """
    base = signup_fields(countries)
    social = base["social"]

    def _platform(option: FieldOption) -> FieldDescriptor:
        return social.derive(
            field_id=option.value,
            label=option.name,
            placeholder=f"Your {option.name} username",
            variant=FieldVariant.TEXT,
            options=(),
            controlled=True,
        )

    platforms = {option.value: _platform(option) for option in social.options}
    return [
        base["email"].derive(
            validation=always_valid,
            controlled=True,
            initially_touched=True,
            disabled=True,
        ),
        base["github"].derive(controlled=True),
        base["graffiti"].derive(controlled=True, disabled=any_blocks_mined),
        platforms["discord"],
        platforms["telegram"],
        base["country_code"].derive(controlled=True, show_placeholder_option=False),
    ]


def settings_values(record: Mapping[str, Any] | None) -> dict[str, FieldValue]:
    """Pre-populated values from an existing record; missing keys stay UNSET."""
    record = record or {}
    values: dict[str, FieldValue] = {}
    for key in SETTINGS_KEYS:
        value = record.get(key)
        values[key] = UNSET if value is None else str(value)
    return values


def build_settings_form(
    record: Mapping[str, Any] | None,
    countries: CountryList,
    any_blocks_mined: bool = False,
) -> FormAggregate:
    """Settings form pre-populated from the signed-in user's record."""
    return FormAggregate(
        settings_fields(countries, any_blocks_mined),
        values=settings_values(record),
    )
