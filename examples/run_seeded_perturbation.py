"""
Tiny helper script that relocates a bracketed passage and reports transitions.
Change the seed to move the passage somewhere else.
"""

from __future__ import annotations

import random

from lexical_transitions import analyze_text, perturb_text, render_report
from lexical_transitions.reporting import TyperStyler

SAMPLE = (
    "The harbor was quiet at dawn and the boats rested against the pier while "
    "gulls circled the harbor looking for scraps from the boats. "
    "[Interest rates rose sharply after the central bank announced new policy "
    "measures intended to curb inflation across several markets.] "
    "By noon the boats left the harbor and the pier was empty except for the "
    "gulls that still circled the quiet harbor."
)


def main() -> None:
    result = perturb_text(SAMPLE, "[", "]", random.Random(7))
    print(f"Moved sequence to word {result.insertion_word_idx}:")
    print(result.mobile_sequence)
    print(render_report(analyze_text(result.perturbed_text), TyperStyler()))


if __name__ == "__main__":
    main()
