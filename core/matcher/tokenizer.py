"""Split comma-separated free-text attributes into phrases and words."""

import re
from dataclasses import dataclass, field
from typing import List, Optional

_WHITESPACE = re.compile(r"\s+")

# Words of this length or shorter are too noisy to match on their own
MIN_WORD_LENGTH = 1


@dataclass
class TokenizedText:
    phrases: List[str] = field(default_factory=list)
    words: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.phrases or self.words)


def split_phrases(text: Optional[str]) -> List[str]:
    """Lower-case ``text``, split on commas and drop empty pieces.

    >>> split_phrases("Web Development, JavaScript,, React ")
    ['web development', 'javascript', 'react']
    """
    if not text:
        return []
    pieces = (piece.strip() for piece in text.lower().split(","))
    return [piece for piece in pieces if piece]


def split_words(phrases: List[str]) -> List[str]:
    words = []
    for phrase in phrases:
        words.extend(
            word for word in _WHITESPACE.split(phrase)
            if len(word) > MIN_WORD_LENGTH
        )
    return words


def tokenize(text: Optional[str]) -> TokenizedText:
    """Return the phrase list and word list of a free-text attribute."""
    phrases = split_phrases(text)
    return TokenizedText(phrases=phrases, words=split_words(phrases))
