from .markov_chain import Builder, Chain, InvalidPairSize, MarkovChain, Pair

__version__ = '0.1.0'
