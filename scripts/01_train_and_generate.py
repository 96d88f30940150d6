from __future__ import annotations

from char_markov.language_model import LanguageModel
from char_markov.text_cleaning import clean_corpus


def main() -> None:
    text = clean_corpus(
        "natural language processing (nlp) is fun.\r\n"
        "start small, iterate, and learn by coding.\r\n"
        "small models learn small patterns, and larger windows copy more of the text.\r\n"
    )

    for window_length in (1, 3, 5):
        model = LanguageModel(window_length, seed=42)
        model.train(text)
        print(f"--- window {window_length} ---")
        print(model.generate("small"[:window_length], 120))


if __name__ == "__main__":
    main()
