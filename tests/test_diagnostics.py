"""Tests for the diagnostics collector."""

from form_gate.diagnostics import CheckStatus, DiagnosticsCollector
from form_gate.errors import FailureKind
from form_gate.fields import FieldDescriptor
from form_gate.form import FormAggregate, RuleViolation


class TestDiagnosticsCollector:
    """Tests for DiagnosticsCollector."""

    def test_empty_collector_is_valid(self) -> None:
        """Test a collector with nothing recorded reports VALID."""
        diagnostic = DiagnosticsCollector("kyc_address", "1.0.0", index=4).finalize()

        assert diagnostic.status == CheckStatus.VALID
        assert diagnostic.index == 4
        assert diagnostic.errors == []
        assert diagnostic.warnings == []

    def test_warnings_do_not_invalidate(self) -> None:
        collector = DiagnosticsCollector("kyc_address", "1.0.0")
        collector.add_warning("UNKNOWN_FIELD", "Payload key age is not a field", field_id="age")

        diagnostic = collector.finalize()

        assert diagnostic.status == CheckStatus.VALID
        assert diagnostic.warnings[0].field_id == "age"

    def test_errors_invalidate(self) -> None:
        collector = DiagnosticsCollector("kyc_address", "1.0.0")
        collector.add_error("FIELD_INVALID", "Bad", FailureKind.VALIDATION, field_id="address")

        assert collector.finalize().status == CheckStatus.INVALID

    def test_rule_violation_not_reported_twice(self) -> None:
        """Test a field already reported by a rule gets no FIELD_INVALID entry."""
        form = FormAggregate(
            [FieldDescriptor(field_id="primary"), FieldDescriptor(field_id="confirm")]
        )
        form["primary"].set_value("a")
        form["confirm"].set_value("b")
        form["confirm"].set_valid(False, "Mismatch")

        collector = DiagnosticsCollector("demo", "1.0.0")
        collector.collect_from_rules([RuleViolation(field_id="confirm", message="Mismatch")])
        collector.collect_from_form(form)
        diagnostic = collector.finalize()

        assert [e.code for e in diagnostic.errors] == ["CROSS_FIELD_MISMATCH"]
        assert diagnostic.errors[0].kind == FailureKind.CROSS_FIELD

    def test_field_states_recorded(self) -> None:
        """Test every field's final state and the payload are reported."""
        form = FormAggregate(
            [
                FieldDescriptor(field_id="email", validation=lambda v: "@" in v),
                FieldDescriptor(field_id="github", required=False),
            ]
        )
        form["email"].set_value("nope")

        collector = DiagnosticsCollector("demo", "1.0.0")
        collector.collect_from_form(form)
        diagnostic = collector.finalize()

        email, github = diagnostic.fields
        assert email.value == "nope"
        assert email.valid is False
        assert email.error_text == "This field is invalid"
        assert github.value is None
        assert github.error_text is None
        assert diagnostic.payload == {"email": "nope"}

    def test_serializes_to_json(self) -> None:
        """Test the report dumps with enum values as strings."""
        collector = DiagnosticsCollector("demo", "1.0.0", index=0)
        collector.add_error("FIELD_INVALID", "Bad", FailureKind.VALIDATION, field_id="a")

        data = collector.finalize().model_dump(mode="json")

        assert data["status"] == "invalid"
        assert data["errors"][0]["kind"] == "validation"
