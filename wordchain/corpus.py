"""
Turns raw text into word sequences for training.

Words are whatever lies between runs of whitespace, so no word ever
contains the space used to join states into keys.
"""


def tokenize(text):
    return text.split()


def read_sequences(stream, per_line=False):
    """
    Reads all of `stream` and returns a list of word sequences.

    By default the whole text is one sequence, so transitions run across
    line breaks. With `per_line`, every non-blank line is its own sequence.
    """
    if not per_line:
        tokens = tokenize(stream.read())
        return [tokens] if tokens else []

    return [tokens for tokens in (tokenize(line) for line in stream) if tokens]
