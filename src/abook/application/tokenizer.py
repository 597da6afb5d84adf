"""Split a command's argument tail into tokens.

Whitespace separates tokens. A double-quoted run is a single token with the
quotes removed, so names like "Mary Ann" survive. Inside quotes a backslash
escapes the next character: \\" is a literal quote and \\\\ a literal
backslash. A quote that is never closed has no special meaning.
"""

import re

_TOKEN = re.compile(r'"((?:\\.|[^"\\])*)"|(\S+)')
_ESCAPE = re.compile(r"\\(.)")


def tokenize(text: str) -> list[str]:
    tokens = []
    for match in _TOKEN.finditer(text):
        quoted, bare = match.groups()
        if quoted is not None:
            tokens.append(_ESCAPE.sub(r"\1", quoted))
        else:
            tokens.append(bare)
    return tokens
