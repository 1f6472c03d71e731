"""Utilities for learning and generation."""

import logging
from typing import List, Optional, Sequence

from markovtext.data.corpus import TrainingDataEmpty, tokenize
from markovtext.models.ngram import NGramConfig, NGramModel
from markovtext.utils.postprocess import render
from markovtext.utils.sampling import IndexSampler, TorchSampler


logger = logging.getLogger(__name__)


class Trainer:
    """Learning helper that turns corpus text into an NGramModel."""

    def __init__(self, config: NGramConfig):
        self.config = config

    def train(self, text: str) -> NGramModel:
        """Tokenize text and build the successor tables."""
        corpus = tokenize(text)
        if not corpus:
            raise TrainingDataEmpty("Training text contains no tokens")
        logger.info(f"Corpus has {len(corpus)} tokens")

        logger.info("Learning...")
        model = NGramModel.build(corpus, trigrams_enabled=self.config.trigrams_enabled)
        for order, contexts in sorted(model.stats().items()):
            logger.info(f"Order {order}: {contexts} contexts")
        return model


class Generator:
    """Text generation helper for NGramModel."""

    def __init__(
        self,
        model: NGramModel,
        output_length: int = 60,
        sampler: Optional[IndexSampler] = None,
    ):
        """
        Args:
            model: Trained n-gram model
            output_length: Number of tokens generated after the seed token
            sampler: Source of uniform indices (default: TorchSampler)
        """
        if not model.corpus:
            raise TrainingDataEmpty("Cannot generate from an empty corpus")
        self.model = model
        self.output_length = output_length
        self.sampler = TorchSampler() if sampler is None else sampler

    def _choice(self, options: Sequence[str]) -> str:
        return options[self.sampler.index(len(options))]

    def next_token(self, text: Sequence[str]) -> str:
        """Pick a successor using the longest context that was seen."""
        for order in self.model.orders:
            if len(text) < order:
                continue
            successors = self.model.successors(text[-order:])
            if successors:
                return self._choice(successors)
        # nothing matched, restart from a random corpus word
        return self._choice(self.model.corpus)

    def generate_tokens(self) -> List[str]:
        """Generate output_length + 1 raw tokens."""
        text = [self._choice(self.model.corpus)]
        for _ in range(self.output_length):
            text.append(self.next_token(text))
        return text

    def generate(self) -> str:
        """Generate a rendered piece of text."""
        logger.info("Generating text...")
        return render(self.generate_tokens())
