"""Fixed-order character-level Markov chain text generator.

Train a ``LanguageModel`` on a corpus and generate text that resembles it.
"""

from .distribution import CharFrequency, Distribution
from .language_model import LanguageModel
from .text_cleaning import clean_corpus

__version__ = "1.0.0"

__all__ = ["CharFrequency", "Distribution", "LanguageModel", "clean_corpus"]
