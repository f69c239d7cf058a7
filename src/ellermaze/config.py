from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationDefaults:
    width: int = 8
    closed: bool = True
    # Chance of knocking down the wall between two differently-labelled neighbours.
    merge_probability: float = 0.5
    # The bottom row has nothing below it, so it must always fully merge.
    last_row_probability: float = 1.0


# Global defaults read by the generator
DEFAULTS = GenerationDefaults()
