"""Service errors with a stable `code` the API layer maps to HTTP responses."""


class ConnexioError(Exception):
    """Base for store failures with a client-facing code."""
    def __init__(self, message: str, code: str = "connexio_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class SlotNotFound(ConnexioError):
    def __init__(self, slot_id: str):
        self.slot_id = slot_id
        super().__init__(f"Slot '{slot_id}' not found", code="slot_not_found")


class BlobNotFound(ConnexioError):
    def __init__(self, blob_id: str):
        self.blob_id = blob_id
        super().__init__(f"File '{blob_id}' not found", code="blob_not_found")


class BlobTooLarge(ConnexioError):
    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(
            f"File too large. Maximum {max_bytes // (1024 * 1024)} MB.",
            code="upload_too_large",
        )
