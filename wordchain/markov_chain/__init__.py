from .builder import Builder
from .errors import EmptyChainError, InvalidPairSize, MarkovError
from .markov_chain import MarkovChain
from .sequence import Pair

Chain = MarkovChain

__all__ = [
    'Builder',
    'Chain',
    'EmptyChainError',
    'InvalidPairSize',
    'MarkovChain',
    'MarkovError',
    'Pair',
]
