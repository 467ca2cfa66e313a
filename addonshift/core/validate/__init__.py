from .report import ValidationIssue, ValidationReport

__all__ = ["ValidationIssue", "ValidationReport"]
