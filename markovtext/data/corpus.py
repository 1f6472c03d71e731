"""Corpus loading and tokenization utilities."""

import logging
from pathlib import Path
from typing import Iterable, List, Union


logger = logging.getLogger(__name__)

# Characters removed from every token
BRACKETS = str.maketrans('', '', '()')


class TrainingDataEmpty(ValueError):
    """Raised when there is nothing to learn from."""


def tokenize(text: str) -> List[str]:
    """Split text on whitespace and strip parentheses from each fragment.

    Punctuation stays attached to its word. A fragment made only of
    brackets becomes an empty token and is kept.
    """
    return [word.translate(BRACKETS) for word in text.split()]


def discover_training_files(directory: Union[str, Path]) -> List[Path]:
    """List the training files in a directory.

    Files whose name starts with an underscore are skipped, so a text can
    be disabled by renaming it. Symlinks are not followed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise TrainingDataEmpty(f"No files to train on: {directory} is not a directory")

    files = sorted(
        p for p in directory.iterdir()
        if p.is_file() and not p.is_symlink() and not p.name.startswith('_')
    )
    if not files:
        raise TrainingDataEmpty(f"No files to train on in {directory}")
    return files


def load_corpus_text(paths: Iterable[Path]) -> str:
    """Concatenate the contents of the training files.

    A leading byte-order mark is dropped and undecodable bytes become
    U+FFFD instead of failing the whole run.
    """
    parts = []
    for path in paths:
        with open(path, 'r', encoding='utf-8-sig', errors='replace') as f:
            parts.append(f.read())
        logger.debug(f"Read {path}")
    return ''.join(parts)
