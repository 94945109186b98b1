"""Typed failures raised by the submission store."""

from criticus.db.enums import FormKind


class SubmissionStoreError(Exception):
    """Base class for persistence failures."""

    def __init__(self, kind: FormKind, message: str):
        super().__init__(message)
        self.kind = kind


class DuplicateKey(SubmissionStoreError):
    """A uniqueness constraint rejected the insert (e.g. email already on the list)."""

    def __init__(self, kind: FormKind, field: str):
        super().__init__(kind, f"Duplicate {field} for {kind.value}")
        self.field = field


class StorageUnavailable(SubmissionStoreError):
    """Any other persistence failure: connection loss, IO error, schema mismatch."""

    def __init__(self, kind: FormKind, detail: str):
        super().__init__(kind, detail)
        self.detail = detail
