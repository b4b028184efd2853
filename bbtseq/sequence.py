"""Nucleotide and colour-space sequence helpers."""

from __future__ import annotations

__all__ = [
    "UnexpectedCharacterError",
    "complement_base_char",
    "reverse_complement",
    "base_to_code",
    "code_to_base",
    "colour_to_nucleotide",
    "colour_sequence_to_nucleotide",
    "nucleotide_to_colour_space",
    "ambiguity_to_bitmask",
    "bitmask_to_ambiguity",
]

_BASES = "ACGT"
_COLOURS = "0123"

# Colour-space transition table: _CSTONT[base][colour] -> next base.
_CSTONT = (
    (0, 1, 2, 3),
    (1, 0, 3, 2),
    (2, 3, 0, 1),
    (3, 2, 1, 0),
)

_COMPLEMENT = {
    "A": "T",
    "C": "G",
    "G": "C",
    "T": "A",
    "N": "N",
    ".": ".",
    "M": "K",  # A or C
    "R": "Y",  # A or G
    "W": "W",  # A or T
    "S": "S",  # C or G
    "Y": "R",  # C or T
    "K": "M",  # G or T
    "V": "B",  # A or C or G
    "H": "D",  # A or C or T
    "D": "H",  # A or G or T
    "B": "V",  # C or G or T
}

_BASE_CODES = {
    "0": 0, "1": 1, "2": 2, "3": 3,
    "A": 0, "C": 1, "G": 2, "T": 3,
}

_AMBIGUITY_TO_BITMASK = {
    "A": 0x1,
    "B": 0xE,
    "C": 0x2,
    "D": 0xD,
    "G": 0x4,
    "H": 0xB,
    "K": 0xC,
    "M": 0x3,
    "N": 0xF,
    "R": 0x5,
    "S": 0x6,
    "T": 0x8,
    "V": 0x7,
    "W": 0x9,
    "Y": 0xA,
}

_BITMASK_TO_AMBIGUITY = "NACMGRSVTWYHKDBN"


class UnexpectedCharacterError(ValueError):
    """Raised when a character is not a valid base, colour or ambiguity code."""

    def __init__(self, char: str) -> None:
        super().__init__(f"unexpected character: {char!r}")
        self.char = char


def complement_base_char(c: str) -> str:
    """Return the complement of a nucleotide or ambiguity code, keeping its case."""
    rc = _COMPLEMENT.get(c.upper())
    if rc is None or len(c) != 1:
        raise UnexpectedCharacterError(c)
    return rc.lower() if c.islower() else rc


def reverse_complement(s: str) -> str:
    """Return the reverse complement of a colour-space sequence (its reversal)."""
    return s[::-1]


def base_to_code(base: str) -> int:
    """Return the 2-bit code of an upper-case base or a colour digit."""
    try:
        return _BASE_CODES[base]
    except KeyError:
        raise UnexpectedCharacterError(base) from None


def code_to_base(code: int) -> str:
    """Return the base for a 2-bit code."""
    if not 0 <= code < 4:
        raise ValueError(f"base code out of range: {code}")
    return _BASES[code]


def colour_to_nucleotide(anchor: str, cs: str) -> str:
    """Return the base that follows ``anchor`` under colour ``cs``."""
    if cs == ".":
        return "N"
    return _BASES[_CSTONT[base_to_code(anchor)][base_to_code(cs)]]


def colour_sequence_to_nucleotide(anchor: str, seq: str) -> str:
    """Decode a colour-space sequence starting from ``anchor``."""
    seed = base_to_code(anchor)
    out = [anchor]
    for colour in seq:
        seed = _CSTONT[seed][base_to_code(colour)]
        out.append(code_to_base(seed))
    return "".join(out)


def nucleotide_to_colour_space(a: str, b: str) -> str:
    """Return the colour for the transition between bases ``a`` and ``b``."""
    if a.upper() == "N" or b.upper() == "N":
        return "n" if a.islower() or b.islower() else "N"
    return _COLOURS[_CSTONT[base_to_code(a)][base_to_code(b)]]


def ambiguity_to_bitmask(c: str) -> int:
    """Convert an ambiguity code (or colour digit) to a bitmask."""
    if c.isdigit():
        return 1 << base_to_code(c)
    mask = _AMBIGUITY_TO_BITMASK.get(c.upper())
    if mask is None or len(c) != 1:
        raise UnexpectedCharacterError(c)
    return mask


def bitmask_to_ambiguity(x: int) -> str:
    """Convert a 4-bit mask to its ambiguity code."""
    if not 0 <= x < 16:
        raise ValueError(f"bitmask out of range: {x}")
    return _BITMASK_TO_AMBIGUITY[x]