"""
Command-line entry point: trains a chain on text from a file or stdin and
prints a newly generated passage.
"""
import logging

import click

from wordchain import config
from wordchain.corpus import read_sequences, tokenize

from .errors import MarkovError
from .markov_chain import MarkovChain


def generate_text(chain, words, start=None):
    """Builds a passage of at most `words` words, seed included."""
    builder = chain.new_builder(start)
    builder.generate(max(words - len(builder), 0))
    return str(builder)


@click.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--words', '-w', type=int, default=config.MAX_WORDS, show_default=True,
              help="Max words to generate, seed words included.")
@click.option('--pairs', '-p', type=int, default=config.PAIR_SIZE, show_default=True,
              help="Size of a word pair (the chain's state length).")
@click.option('--per-line', is_flag=True,
              help="Train on every line separately instead of the whole text at once.")
@click.option('--seed', type=int, default=None, help="Seed for the random source.")
@click.option('--start', type=str, default=None,
              help="Words to start from. A random state is used if the chain never saw them.")
@click.option('--verbose', '-v', is_flag=True, help="Log debug output to stderr.")
def main(input_file, words, pairs, per_line, seed, start, verbose):
    """
    Reads INPUT_FILE (stdin by default), trains a Markov chain on its words
    and prints a generated sequence.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        sequences = read_sequences(input_file, per_line=per_line)
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Could not decode {input_file.name}: {e}")
    logging.info(f"Loaded {len(sequences)} sequences.")

    chain = MarkovChain(pair_size=pairs, rng=seed)
    chain.add_all(sequences, progress=verbose and per_line)
    logging.info(f"Trained Markov Chain with pair size {chain.pair_size}: {chain.get_stats()}")

    try:
        text = generate_text(chain, words, tokenize(start) if start else None)
    except MarkovError as e:
        raise click.ClickException(str(e))

    click.echo(text)


if __name__ == '__main__':
    main()
