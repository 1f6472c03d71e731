"""Capitalization and punctuation rules applied to generated text."""

from typing import List, Sequence


# The last entry is a curly closing quote as it appears after a bad
# UTF-8/cp1252 round trip in some training texts.
SENTENCE_ENDINGS = ('.', '!', '?', '"', 'â€')
TERMINAL_ENDINGS = ('.', '!', '?')
TRAILING_SUFFIX = '...'


def capitalize(token: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return token[:1].upper() + token[1:]


def ends_sentence(token: str) -> bool:
    return token.endswith(SENTENCE_ENDINGS)


def postprocess(tokens: Sequence[str]) -> List[str]:
    """Capitalize sentence starts and make sure the text ends like one."""
    words = list(tokens)
    if not words:
        return words

    for i, word in enumerate(words):
        if i == 0 or ends_sentence(words[i - 1]):
            words[i] = capitalize(word)

    if not words[-1].endswith(TERMINAL_ENDINGS):
        words[-1] += TRAILING_SUFFIX
    return words


def render(tokens: Sequence[str]) -> str:
    """Post-process tokens and join them into a single string."""
    return ' '.join(postprocess(tokens))
