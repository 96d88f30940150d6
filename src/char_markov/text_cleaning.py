from __future__ import annotations

import re
from dataclasses import dataclass

import regex  # type: ignore


_HORIZONTAL_WS_RE = re.compile(r"[ \t]+")
# control characters except newline and tab
_CONTROL_RE = regex.compile(r"(?![\n\t])\p{Cc}")


@dataclass(frozen=True)
class CorpusCleaningConfig:
    strip_carriage_returns: bool = True
    remove_control_chars: bool = False
    lowercase: bool = False
    collapse_whitespace: bool = False


def clean_corpus(text: str, config: CorpusCleaningConfig | None = None) -> str:
    """Prepare raw text for training.

    With the default config only carriage returns are removed, so Windows and
    Unix line endings train the same model.
    """

    cfg = config or CorpusCleaningConfig()
    s = text

    if cfg.strip_carriage_returns:
        s = s.replace("\r", "")

    if cfg.remove_control_chars:
        s = _CONTROL_RE.sub("", s)

    if cfg.lowercase:
        s = s.lower()

    if cfg.collapse_whitespace:
        s = _HORIZONTAL_WS_RE.sub(" ", s)

    return s
