# bbtseq

Small, dependency-free helpers for single DNA bases and short sequences,
in nucleotide space and in SOLiD-style colour space.

## Installation

```
pip install bbtseq
```

## What it provides

Everything lives in `bbtseq.sequence`.

| Name | Purpose |
| --- | --- |
| `complement_base_char(c)` | Complement of one base, including IUPAC ambiguity codes, `N` and `.`; a lower-case input gives a lower-case result |
| `reverse_complement(s)` | Returns `s` reversed; the characters themselves are not complemented (in colour space a reversed read is its reverse complement) |
| `base_to_code(base)` | Upper-case `A`/`C`/`G`/`T`, or colour digits `0`–`3`, to a code 0–3 |
| `code_to_base(code)` | Code 0–3 back to `A`/`C`/`G`/`T` |
| `colour_to_nucleotide(anchor, cs)` | The base that follows `anchor` under colour `cs`; colour `.` gives `N` |
| `colour_sequence_to_nucleotide(anchor, seq)` | A whole colour-space read decoded to bases, prefixed by the anchor |
| `nucleotide_to_colour_space(a, b)` | The colour for a pair of adjacent bases; `N` on either side gives `N` (or `n` if either is lower case) |
| `ambiguity_to_bitmask(c)` | IUPAC code (either case) to a 4-bit `TGCA` mask; a colour digit gives `1 << digit` |
| `bitmask_to_ambiguity(x)` | 4-bit mask (0–15) back to an IUPAC code; `0` and `15` both give `N` |
| `UnexpectedCharacterError` | Subclass of `ValueError` raised for characters that cannot be handled; the offending character is in its `char` attribute |

`code_to_base` and `bitmask_to_ambiguity` raise a plain `ValueError` for
numbers out of range.

## Example

```python
from bbtseq.sequence import (
    complement_base_char,
    nucleotide_to_colour_space,
    colour_sequence_to_nucleotide,
    ambiguity_to_bitmask,
    bitmask_to_ambiguity,
)

complement_base_char("a")                  # 't'
nucleotide_to_colour_space("A", "G")       # '2'
colour_sequence_to_nucleotide("T", "0123") # 'TTGAT'
bitmask_to_ambiguity(ambiguity_to_bitmask("R"))  # 'R'
```

## What it does not do

This package only works on characters and strings held in memory. It does
not read or write FASTA/FASTQ files, hash k-mers, or build or query Bloom
filters, and it has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```