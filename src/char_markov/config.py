"""
Configuration Module for char-markov

Run settings for the command-line generator: window length, corpus source,
seed text, number of characters to generate and the optional random seed.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class GeneratorConfig:
    """
    Configuration for one train-and-generate run.

    Attributes:
        window_length: Number of context characters (Markov order)
        corpus_path: Path to the training corpus
        seed_text: Text that generation starts from
        text_length: Maximum number of characters to generate
        random_seed: Seed for reproducible output (None for random output)
        csv_column: Read the corpus from this CSV column instead of plain text
        log_level: Logging level name
    """

    window_length: int = 3
    corpus_path: str = ""
    seed_text: str = ""
    text_length: int = 100
    random_seed: Optional[int] = None
    csv_column: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GeneratorConfig':
        """Create GeneratorConfig instance from dictionary."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def to_dict(self) -> Dict:
        """Convert GeneratorConfig to dictionary."""
        return {
            'window_length': self.window_length,
            'corpus_path': self.corpus_path,
            'seed_text': self.seed_text,
            'text_length': self.text_length,
            'random_seed': self.random_seed,
            'csv_column': self.csv_column,
            'log_level': self.log_level
        }
