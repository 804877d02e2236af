"""String segmentation primitives used to carve report text into fields.

Offsets and lengths count characters (code points), never encoded bytes.
"""

from collections.abc import Collection, Iterator


def iter_chunks(s: str, length: int) -> Iterator[str]:
    """Yield consecutive, non-overlapping pieces of a string.

    Args:
        s: Text to split
        length: Number of characters per piece

    Yields:
        Pieces of ``length`` characters in original order; the last piece
        may be shorter

    Raises:
        ValueError: If length is less than 1
    """
    if length < 1:
        raise ValueError(f"Chunk length must be at least 1, got {length}")
    for start in range(0, len(s), length):
        yield s[start:start + length]


def chunk(s: str, length: int) -> list[str]:
    """Split a string into fixed-length pieces.

    ``chunk("ABCDEFG", 3)`` gives ``["ABC", "DEF", "G"]`` and an empty
    string gives an empty list.
    """
    return list(iter_chunks(s, length))


def split_on_separators(s: str, separators: Collection[str]) -> list[str]:
    """Split a string on runs of separator characters.

    A run of one or more separators counts as a single boundary. A leading
    run is skipped. Whatever follows the last boundary is always emitted,
    so trailing separators produce a final empty piece.

    Args:
        s: Text to split
        separators: Characters that act as separators

    Returns:
        Pieces between boundaries, in original order
    """
    pieces: list[str] = []
    piece_start = 0
    index = 0

    while index < len(s):
        if s[index] in separators:
            if index > 0:
                pieces.append(s[piece_start:index])
            while index < len(s) and s[index] in separators:
                index += 1
            piece_start = index
        else:
            index += 1

    pieces.append(s[piece_start:])
    return pieces


def range_substring(s: str, start: int, length: int) -> str:
    """Extract ``length`` characters beginning at offset ``start``.

    Args:
        s: Source text
        start: Character offset of the first character
        length: Number of characters to extract

    Returns:
        The requested substring

    Raises:
        IndexError: If the range falls outside the string
    """
    if start < 0 or length < 0 or start + length > len(s):
        raise IndexError(
            f"Range (start={start}, length={length}) outside string of "
            f"length {len(s)}"
        )
    return s[start:start + length]
