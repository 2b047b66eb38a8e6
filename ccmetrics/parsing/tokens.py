"""
Lexer for C and C++ source extents.

Only token spellings matter here: the graph counter uses them to find the
operator that follows a binary expression's left operand.
"""

from __future__ import annotations

import re
from typing import List

_TOKEN_RE = re.compile(
    r"""
    (?P<skip>
        \s+
      | //[^\n]*
      | /\*.*?\*/
    )
  | (?P<token>
        [A-Za-z_]\w*
      | (?:\d+\.?\d*|\.\d+)(?:[eEpP][+-]?\d+)?\w*
      | '(?:\\.|[^\\'\n])*'
      | "(?:\\.|[^\\"\n])*"
      | <<= | >>= | <=> | ->\* | \.\.\.
      | -> | \+\+ | -- | << | >> | <= | >= | == | != | && | \|\|
      | \+= | -= | \*= | /= | %= | &= | \^= | \|= | :: | \.\* | \#\#
      | \S
    )
    """,
    re.VERBOSE | re.DOTALL,
)


def tokenize(text: str) -> List[str]:
    """Split ``text`` into token spellings, dropping whitespace and comments."""
    return [match.group("token") for match in _TOKEN_RE.finditer(text) if match.group("token")]
