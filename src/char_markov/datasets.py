from __future__ import annotations

from pathlib import Path

import pandas as pd

from .text_cleaning import CorpusCleaningConfig, clean_corpus


def load_corpus(
    path: str | Path,
    config: CorpusCleaningConfig | None = None,
    encoding: str = "utf-8",
) -> str:
    """Read a plain-text corpus and clean it for training."""

    text = Path(path).read_text(encoding=encoding)
    return clean_corpus(text, config)


def load_corpus_csv(
    path: str | Path,
    column: str = "text",
    config: CorpusCleaningConfig | None = None,
) -> str:
    """Read one column of a CSV file as a corpus, one row per line."""

    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"CSV must have a '{column}' column")
    rows = df[column].dropna().astype(str).tolist()
    return clean_corpus("\n".join(rows), config)
