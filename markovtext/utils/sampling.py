"""Uniform index sampling used during generation."""

from typing import Optional, Protocol

import torch


class IndexSampler(Protocol):
    """Anything that can draw a uniform index in [0, n)."""

    def index(self, n: int) -> int:
        ...


class TorchSampler:
    """Index sampler backed by a torch random generator."""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Optional seed for reproducible output
        """
        self.generator = torch.Generator()
        if seed is None:
            self.generator.seed()
        else:
            self.generator.manual_seed(seed)

    def index(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Cannot sample an index from an empty range (n={n})")
        return int(torch.randint(n, (1,), generator=self.generator).item())
