from typing import List, NamedTuple

# Tokens are joined with a single space to form dictionary keys, so a token
# must never contain a space itself.
KEY_DELIMITER = ' '


class Pair(NamedTuple):
    """A state of one or more words and the word that followed it."""
    current: List[str]
    next: str


def clamp(value, minimum, maximum):
    if value > maximum:
        value = maximum
    elif value < minimum:
        value = minimum
    return value


def to_key(sequence):
    return KEY_DELIMITER.join(sequence)


def from_key(key):
    return key.split(KEY_DELIMITER)


def is_valid(sequence):
    """A sequence needs at least two words to produce a single pair."""
    return len(sequence) > 1


def pairs(sequence, size):
    """
    Slices a sequence into pairs whose current state is `size` words long.

    The size is clamped to what the sequence can support, so a 3 word
    sequence asked for pairs of 5 yields pairs of 2. Sequences with fewer
    than two words yield nothing.
    """
    sequence = list(sequence)
    if not is_valid(sequence):
        return []

    size = clamp(size, 1, len(sequence) - 1)
    return [
        Pair(current=sequence[idx:idx + size], next=sequence[idx + size])
        for idx in range(len(sequence) - size)
    ]
