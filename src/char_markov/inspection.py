from __future__ import annotations

import pandas as pd

from .language_model import LanguageModel


COLUMNS = ["window", "character", "count", "probability", "cumulative_probability"]


def model_to_frame(model: LanguageModel) -> pd.DataFrame:
    """One row per (window, next character) entry, windows in sorted order."""

    rows = [
        (window, entry.character, entry.count, entry.probability, entry.cumulative_probability)
        for window in sorted(model.model)
        for entry in model.model[window]
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize_model(model: LanguageModel) -> dict:
    distributions = list(model.model.values())
    return {
        "window_length": model.window_length,
        "windows": len(distributions),
        "transitions": sum(len(d) for d in distributions),
        "observations": sum(d.total for d in distributions),
        "deterministic_windows": sum(1 for d in distributions if len(d) == 1),
    }
