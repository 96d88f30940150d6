"""
Character-Level Language Model

This module implements a fixed-order character Markov chain. The model maps
every window of ``window_length`` characters seen in the corpus to the
distribution of characters that followed it, then generates new text by
repeatedly sampling the distribution of the trailing window.

Usage:
    model = LanguageModel(window_length=3, seed=42)
    model.train(corpus)
    text = model.generate("The", 200)
"""

import logging
import random
from typing import Dict, Optional

from .distribution import Distribution

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Fixed-order character Markov chain.

    Each instance owns its window map and its random source. Passing an
    integer ``seed`` makes generation reproducible; omitting it gives a
    different text on every run.

    ``train`` resets the model before learning, so training twice replaces
    the first model rather than accumulating counts.
    """

    def __init__(self, window_length: int, seed: Optional[int] = None):
        """
        Initialize an empty model.

        Args:
            window_length: Number of characters used as context (must be >= 1)
            seed: Optional seed for the random source
        """
        if isinstance(window_length, bool) or not isinstance(window_length, int) or window_length <= 0:
            raise ValueError("window_length must be a positive integer")

        self._window_length = window_length
        self._seed = seed
        self.random_generator = random.Random(seed)
        self.model: Dict[str, Distribution] = {}

    @property
    def window_length(self) -> int:
        return self._window_length

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reset(self) -> None:
        """Forget everything learned so far."""
        self.model = {}

    def train(self, corpus: str) -> None:
        """
        Build the window map from a corpus.

        The corpus is expected to have carriage returns stripped already
        (see ``clean_corpus``). A corpus no longer than the window length
        leaves the model empty.

        Args:
            corpus: The training text
        """
        self.reset()

        if len(corpus) <= self._window_length:
            logger.debug(
                f"Corpus of {len(corpus)} chars is too short for window length {self._window_length}"
            )
            return

        for i in range(len(corpus) - self._window_length):
            window = corpus[i:i + self._window_length]
            next_char = corpus[i + self._window_length]
            distribution = self.model.get(window)
            if distribution is None:
                distribution = Distribution()
                self.model[window] = distribution
            distribution.record_observation(next_char)

        for distribution in self.model.values():
            distribution.normalize()

        logger.info(f"Learned {len(self.model)} windows from {len(corpus)} chars")

    def generate(self, seed_text: Optional[str], text_length: int) -> Optional[str]:
        """
        Generate text by extending ``seed_text`` one character at a time.

        Generation stops early when the trailing window was never seen
        during training.

        Args:
            seed_text: Initial text; its last ``window_length`` chars start the chain
            text_length: Maximum number of characters to append

        Returns:
            The seed followed by the generated characters, the seed unchanged
            when it is shorter than the window or ``text_length <= 0``, or
            None when ``seed_text`` is None
        """
        if seed_text is None:
            return None
        if text_length <= 0 or len(seed_text) < self._window_length:
            return seed_text

        out = list(seed_text)
        for _ in range(text_length):
            window = "".join(out[-self._window_length:])
            distribution = self.model.get(window)
            if distribution is None:
                logger.debug(f"Unseen window {window!r}, stopping after {len(out) - len(seed_text)} chars")
                break
            out.append(distribution.sample(self.random_generator.random()))

        return "".join(out)

    def __str__(self) -> str:
        lines = [f"{window} : {distribution}\n" for window, distribution in self.model.items()]
        return "".join(lines)
