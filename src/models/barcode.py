"""
Encoded barcode model handed to rendering collaborators.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.symbology import BarcodeSymbology


class EncodedBarcode(BaseModel):
    """
    Result of encoding a digit string.

    Holds the flat module sequence (1 = bar, 0 = space) together with the
    packed transport words a renderer consumes.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Digits that were encoded")
    symbology: BarcodeSymbology
    modules: tuple[int, ...] = Field(..., description="Module bits, leftmost first")
    width: int = Field(..., ge=0, description="Symbol width in modules")
    height: int = Field(32, ge=1, description="Symbol height in modules")
    word_width: int = Field(24, ge=1, description="Modules per packed word")
    words: tuple[int, ...] = Field(default_factory=tuple, description="Packed modules")
    normalized_code: str | None = Field(None, description="EAN-13 form of the code, if any")

    @model_validator(mode="after")
    def check_geometry(self) -> "EncodedBarcode":
        from src.barcode.packer import unpack_words

        if self.width != len(self.modules):
            raise ValueError(
                f"Width {self.width} does not match {len(self.modules)} modules"
            )
        expected = self.symbology.module_count
        if expected is not None and self.width != expected:
            raise ValueError(
                f"{self.symbology.value} symbols are {expected} modules wide, got {self.width}"
            )
        if self.words and unpack_words(self.words, self.width, self.word_width) != self.modules:
            raise ValueError("Packed words do not match modules")
        return self

    @property
    def bars(self) -> str:
        """Module sequence as a string of '1' and '0'."""
        return "".join(str(bit) for bit in self.modules)

    @property
    def packed(self):
        """Packed words as a PackedModules for renderers."""
        from src.barcode.packer import PackedModules

        return PackedModules(
            words=self.words,
            width=self.width,
            height=self.height,
            word_width=self.word_width,
        )

    def to_upca(self) -> str | None:
        """12-digit UPC-A form of a UPC-A or UPC-E code, otherwise None."""
        from src.barcode.parser import format_digits, parse_digits
        from src.barcode.upce import upce_to_upca

        if self.symbology == BarcodeSymbology.UPC_A:
            return self.code
        if self.symbology == BarcodeSymbology.UPC_E:
            return format_digits(upce_to_upca(parse_digits(self.code)))
        return None

    def to_ean13(self) -> str | None:
        """Valid EAN-13 form of the code, if it has one."""
        return self.normalized_code
