from __future__ import annotations

import sys

from char_markov.datasets import load_corpus
from char_markov.inspection import model_to_frame, summarize_model
from char_markov.language_model import LanguageModel


def main() -> None:
    if len(sys.argv) < 2:
        print("usage: 02_inspect_model.py CORPUS [WINDOW_LENGTH]")
        return

    window_length = int(sys.argv[2]) if len(sys.argv) > 2 else 3
    model = LanguageModel(window_length)
    model.train(load_corpus(sys.argv[1]))

    print(summarize_model(model))

    df = model_to_frame(model)
    busiest = df.groupby("window")["count"].sum().sort_values(ascending=False).head(10)
    print("Most frequent windows:")
    print(busiest.to_string())


if __name__ == "__main__":
    main()
