from dataclasses import dataclass


class InvalidBitString(ValueError):
    """Raised when text contains something other than '0' and '1'."""
    pass


class LengthMismatch(ValueError):
    """Raised when two bit-strings of different length are combined."""
    pass


@dataclass(frozen=True)
class BitString:
    bits: str

    def __post_init__(self):
        if isinstance(self.bits, BitString):
            object.__setattr__(self, "bits", self.bits.bits)
        if not isinstance(self.bits, str):
            raise InvalidBitString(f"Expected a bit-string, got {type(self.bits).__name__}")
        for i, bit in enumerate(self.bits):
            if bit not in "01":
                raise InvalidBitString(f"Invalid character {bit!r} at position {i}")

    def __len__(self):
        return len(self.bits)

    def __str__(self):
        return self.bits

    def __iter__(self):
        return iter(self.bits)

    def __getitem__(self, index):
        return BitString(self.bits[index])

    def __add__(self, other):
        return BitString(self.bits + BitString(other).bits)

    def __radd__(self, other):
        # "0" + m0
        return BitString(BitString(other).bits + self.bits)


def combine(a, b) -> BitString:
    # bits iguais -> 0, diferentes -> 1
    a, b = BitString(a), BitString(b)
    if len(a) != len(b):
        raise LengthMismatch(f"Cannot combine bit-strings of length {len(a)} and {len(b)}")
    return BitString("".join("0" if x == y else "1" for x, y in zip(a, b)))


def flip_bit(bits, index: int) -> BitString:
    bits = BitString(bits)
    if not -len(bits) <= index < len(bits):
        raise IndexError(f"Bit index {index} out of range for length {len(bits)}")
    chars = list(bits.bits)
    chars[index] = "1" if chars[index] == "0" else "0"
    return BitString("".join(chars))
