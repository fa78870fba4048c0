"""Callable protocol for form-gate."""

from form_gate.callable.execute import execute
from form_gate.callable.result import CallableResult

__all__ = ["CallableResult", "execute"]
