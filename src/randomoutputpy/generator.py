"""Random number generation for the step output.

Draws an integer uniformly from 0 to 99 inclusive using Python's general purpose
(non-cryptographic) generator, and renders it as the string handed to the
runner.

"""

import math
import random

UPPER_BOUND = 100


def generate_random_number(rng: random.Random | None = None) -> int:
    """Return a random integer in the range [0, 100).

    Args:
        rng (random.Random, optional): The generator to draw from. Defaults to the
            random module's shared generator.

    Returns:
        int: The generated number
    """
    source = rng if rng is not None else random
    return math.floor(source.random() * UPPER_BOUND)


def format_value(number: int) -> str:
    """Render the number as a plain base-10 string.

    Args:
        number (int): A value previously returned by generate_random_number

    Raises:
        ValueError: Returned if the value is not an integer in [0, 100)

    Returns:
        str: The decimal representation, e.g. "0", "7" or "99"
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"Expected an integer, got {type(number).__name__}")
    if not 0 <= number < UPPER_BOUND:
        raise ValueError(f"Value {number} is outside the range [0, {UPPER_BOUND})")

    return str(number)

