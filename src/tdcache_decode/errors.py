"""Decode failures.

Every failure raised while decoding a cache record derives from
CacheDecodeError and carries a stable code from ERRORS.
"""
from __future__ import annotations

ERRORS = {
    "E_TRUNCATED": "Buffer ends before the field it declares",
    "E_UNKNOWN_BLOCK": "Settings block identifier is not registered",
    "E_UNSUPPORTED": "Recognized encoding that is not implemented",
    "E_INVALID_LENGTH": "Element count is out of range",
}


class CacheDecodeError(ValueError):
    code = "E_DECODE"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def add_context(self, note: str) -> None:
        """Prefix a note to the message, keeping the exception type intact."""
        self.context.insert(0, note)

    def as_dict(self) -> dict:
        return {"code": self.code, "message": ERRORS.get(self.code, ""), "detail": str(self)}

    def __str__(self) -> str:
        return ": ".join([*self.context, self.message])


class TruncatedError(CacheDecodeError):
    code = "E_TRUNCATED"

    def __init__(self, offset: int, wanted: int, available: int):
        super().__init__(f"truncated at offset {offset} (wanted: {wanted}; got: {available})")
        self.offset = offset
        self.wanted = wanted
        self.available = available


class UnknownBlockIdentifierError(CacheDecodeError):
    code = "E_UNKNOWN_BLOCK"

    def __init__(self, block_id: int):
        super().__init__(f"unknown block identifier 0x{block_id:x}")
        self.block_id = block_id


class UnsupportedEncodingError(CacheDecodeError):
    code = "E_UNSUPPORTED"


class InvalidLengthError(CacheDecodeError):
    code = "E_INVALID_LENGTH"

    def __init__(self, offset: int, length: int):
        super().__init__(f"negative element count {length} at offset {offset}")
        self.offset = offset
        self.length = length
