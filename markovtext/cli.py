"""Command-line interface for learning from texts and generating new ones."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from markovtext.data.corpus import (
    TrainingDataEmpty,
    discover_training_files,
    load_corpus_text,
)
from markovtext.models.ngram import NGramConfig
from markovtext.utils.sampling import TorchSampler
from markovtext.utils.trainer import Generator, Trainer


logger = logging.getLogger(__name__)

QUIT_KEY = 'q'


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_generator(args) -> Generator:
    """Read the training texts and learn a model from them."""
    config = NGramConfig(
        output_length=args.output_length,
        trigrams_enabled=args.trigrams,
    )

    logger.info("Reading files to train on...")
    files = discover_training_files(args.texts_dir)
    text = load_corpus_text(files)
    logger.info(f"Loaded {len(files)} file(s) from {args.texts_dir}")

    logger.info("Training on text...")
    model = Trainer(config).train(text)
    return Generator(
        model,
        output_length=config.output_length,
        sampler=TorchSampler(args.seed),
    )


def write_text(generator: Generator, write: Callable[[str], None] = print) -> None:
    write(generator.generate())
    write('')


def generate(args, generator: Generator) -> None:
    """Print a fixed number of texts."""
    for _ in range(args.count):
        write_text(generator)


def interactive(
    args,
    generator: Generator,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Print a text, then another one after each Enter until quit."""
    while True:
        write_text(generator, write)
        try:
            answer = read(f"Press Enter to generate another text or {QUIT_KEY} to quit ")
        except EOFError:
            break
        if answer.strip() == QUIT_KEY:
            break


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Markov chain text generator'
    )
    parser.add_argument(
        '--texts-dir',
        type=Path,
        default=Path('texts'),
        help='Directory with training texts (names starting with _ are skipped)'
    )
    parser.add_argument(
        '--output-length',
        type=int,
        default=60,
        help='Number of words generated after the first one'
    )
    parser.add_argument(
        '--trigrams',
        action='store_true',
        help='Also use three-word contexts'
    )
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument(
        '--log-level',
        type=str.upper,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    generate_parser = subparsers.add_parser('generate')
    generate_parser.add_argument('--count', type=int, default=1)

    subparsers.add_parser('interactive')

    args = parser.parse_args(argv)
    if args.output_length < 1:
        parser.error('--output-length must be positive')
    setup_logging(getattr(logging, args.log_level))
    logger.info("Markov chain text generator")

    try:
        generator = build_generator(args)
    except TrainingDataEmpty as e:
        logger.error(str(e))
        return 1

    if args.command == 'generate':
        generate(args, generator)
    else:
        interactive(args, generator)
    return 0


if __name__ == '__main__':
    sys.exit(main())
