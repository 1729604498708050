# corpus.py
# thin text adapter for the CLI: split lines into tokens, read a corpus file,
# and glue a walk back into readable text.

import re
from typing import Iterable, List

# words (keeps contractions) or a single punctuation mark
_token_re = re.compile(r"[\w']+|[^\w\s]")

# tokens that attach to the word before them when rendered
_CLOSING = set(".,!?;:)]}%")


def simple_tokenize(text: str, lowercase: bool = False) -> List[str]:
    """
    "a banana! and a banana?" -> ["a", "banana", "!", "and", "a", "banana", "?"]
    Simple, could swap in spacy/NLTK later.
    """
    if not text:
        return []
    toks = _token_re.findall(text)
    if lowercase:
        toks = [t.lower() for t in toks]
    return toks


def read_corpus(path: str, lowercase: bool = False) -> List[List[str]]:
    """One token sequence per non-blank line of a UTF-8 text file."""
    with open(path, "r", encoding="utf8") as f:
        lines = [ln.strip() for ln in f if ln.strip()]
    return [simple_tokenize(ln, lowercase) for ln in lines]


def join_tokens(tokens: Iterable[str]) -> str:
    out = ""
    for tok in tokens:
        if out and tok not in _CLOSING:
            out += " "
        out += tok
    return out
