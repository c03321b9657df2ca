"""In-memory case registry."""

from core.cases.case_store import CaseStore

__all__ = ["CaseStore"]
