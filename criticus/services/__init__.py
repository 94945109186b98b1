"""Service layer modules."""

from criticus.services.errors import DuplicateKey, StorageUnavailable, SubmissionStoreError
from criticus.services.submission_store import SubmissionStore
from criticus.services.submission_validator import ValidationResult, validate_submission

__all__ = [
    "DuplicateKey",
    "StorageUnavailable",
    "SubmissionStore",
    "SubmissionStoreError",
    "ValidationResult",
    "validate_submission",
]
