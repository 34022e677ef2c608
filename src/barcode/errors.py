"""
Exceptions raised while encoding barcodes.
"""


class BarcodeError(ValueError):
    """Base class for input the encoder cannot turn into a symbol."""


class InvalidCharacterError(BarcodeError):
    """Input contains something other than ASCII decimal digits."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character {character!r} at position {position}")


class UnsupportedBarcodeError(BarcodeError):
    """No supported symbology accepts the digits."""

    def __init__(self, code: str, reason: str = "no supported symbology matches"):
        self.code = code
        self.reason = reason
        super().__init__(
            f"Unsupported barcode {code!r}: {reason}. "
            "Supported: EAN-13, UPC-A, EAN-8, UPC-E"
        )


class UnsupportedLengthError(UnsupportedBarcodeError):
    """No symbology has the input's digit count."""

    def __init__(self, code: str):
        super().__init__(code, f"unsupported length {len(code)}")


class ChecksumMismatchError(UnsupportedBarcodeError):
    """Length fits at least one symbology but every checksum rule fails."""

    def __init__(self, code: str, candidates: list[str]):
        self.candidates = candidates
        super().__init__(code, f"invalid {'/'.join(candidates)} checksum")
