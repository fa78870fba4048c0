"""Form aggregate and cross-field rules."""

from form_gate.form.aggregate import FormAggregate, SubmissionLock
from form_gate.form.rules import CrossFieldRule, RuleViolation, evaluate_rules, matches

__all__ = [
    "FormAggregate",
    "SubmissionLock",
    "CrossFieldRule",
    "RuleViolation",
    "evaluate_rules",
    "matches",
]
