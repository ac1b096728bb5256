"""
normdist.formats — Turn text into token sequences.

Supported atoms:
    • BYTE  → the UTF-8 encoded bytes (tokens are ints 0..255)
    • CHAR  → the Unicode codepoints (a multi-byte character is ONE token)
    • WORD  → maximal runs of non-whitespace

Every function accepts either str or bytes.  Bytes are decoded as UTF-8
where codepoints or words are needed, and str is encoded as UTF-8 where
raw bytes are needed.
"""

from enum import Enum
from typing import Sequence, Union

Text = Union[str, bytes]


class Atom(str, Enum):
    """Tokenization granularity."""
    BYTE = "byte"
    CHAR = "char"
    WORD = "word"


# ═══════════════════════════════════════════════════════════════════
#  TOKENIZERS
# ═══════════════════════════════════════════════════════════════════

def to_bytes(text: Text) -> bytes:
    """Raw byte values of the UTF-8 encoded form."""
    if isinstance(text, bytes):
        return text
    return text.encode("utf-8")


def to_chars(text: Text) -> str:
    """
    Codepoint sequence of `text`.

    A str already indexes by codepoint, so it is returned as-is:

        len(to_chars("naïve")) == 5
        len(to_bytes("naïve")) == 6
    """
    if isinstance(text, bytes):
        return text.decode("utf-8")
    return text


def to_words(text: Text) -> list[str]:
    """
    Whitespace-delimited words.

    Any run of whitespace is one separator and leading/trailing
    whitespace yields no empty words:

        to_words("a  b") == to_words(" a b ") == ["a", "b"]
    """
    return to_chars(text).split()


_TOKENIZERS = {
    Atom.BYTE: to_bytes,
    Atom.CHAR: to_chars,
    Atom.WORD: to_words,
}


def tokenize(text: Text, atom: Union[Atom, str]) -> Sequence:
    """Split `text` into tokens according to `atom`."""
    return _TOKENIZERS[Atom(atom)](text)
