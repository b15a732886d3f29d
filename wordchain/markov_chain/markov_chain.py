from collections import defaultdict, Counter
import logging
import math
import random

from tqdm import tqdm

from .builder import Builder
from .errors import EmptyChainError, InvalidPairSize
from .sequence import from_key, pairs, to_key

logger = logging.getLogger(__name__)


def _make_rng(rng):
    if rng is None:
        return random.Random()
    if isinstance(rng, int):
        return random.Random(rng)
    return rng


class MarkovChain:
    """
    A word level Markov chain built from pairs of `pair_size` words and the
    word that follows them.

    The chain keeps its own random source so that sampling never touches the
    module level `random` state. Pass a seeded `random.Random` (or an int
    seed) to get reproducible output.
    """

    def __init__(self, pair_size=1, rng=None):
        # bad sizes are corrected, never rejected
        self._pair_size = max(pair_size, 1)
        self._frequency_matrix = defaultdict(Counter)
        self.rng = _make_rng(rng)
        self._keys_cache = None
        self._full_size_cache = None

    @property
    def pair_size(self):
        return self._pair_size

    @property
    def frequency_matrix(self):
        """A copy of the transition counts, keyed by joined state."""
        return {key: Counter(counts) for key, counts in self._frequency_matrix.items()}

    def __len__(self):
        return len(self._frequency_matrix)

    def __contains__(self, state):
        key = state if isinstance(state, str) else to_key(state)
        return key in self._frequency_matrix

    def add(self, sequence):
        """Adds the transition counts of every pair found in `sequence`."""
        found = pairs(sequence, self._pair_size)
        if not found:
            return

        for pair in found:
            self._frequency_matrix[to_key(pair.current)][pair.next] += 1
        # Invalidate caches after training
        self._keys_cache = None
        self._full_size_cache = None

        logger.debug(
            "Added %d pairs of size %d, chain now has %d states",
            len(found), len(found[0].current), len(self._frequency_matrix),
        )

    def add_all(self, sequences, progress=False):
        for sequence in tqdm(sequences, desc="Training", unit="seq", disable=not progress):
            self.add(sequence)

    def transitions(self, state):
        """Returns a copy of the transition counts recorded for `state`."""
        return Counter(self._frequency_matrix.get(to_key(state), {}))

    def transition_probability(self, pair):
        """
        Probability of moving from `pair.current` to `pair.next`.

        Raises InvalidPairSize when the pair's current state is not exactly
        `pair_size` words. A state that was never seen has no transitions,
        giving 0/0, which is returned as NaN rather than raised.
        """
        if len(pair.current) != self._pair_size:
            raise InvalidPairSize(self._pair_size, len(pair.current))

        transitions = self._frequency_matrix.get(to_key(pair.current))
        if not transitions:
            return math.nan

        return transitions[pair.next] / sum(transitions.values())

    def next(self, seed):
        """
        Picks the word to follow `seed` by a weighted random draw.

        Returns None when the seed is the wrong size or was never seen, which
        means the sequence cannot be continued.
        """
        if len(seed) != self._pair_size:
            return None

        transitions = self._frequency_matrix.get(to_key(seed))
        if not transitions:
            return None

        luck = self.rng.randrange(sum(transitions.values()))

        # walk candidates in a fixed order so a given draw always maps to the same word
        for token in sorted(transitions):
            luck -= transitions[token]
            if luck <= 0:
                return token

        return None

    def states(self):
        if self._keys_cache is None:
            self._keys_cache = list(self._frequency_matrix.keys())
        return list(self._keys_cache)

    def random_state(self):
        """
        Returns a uniformly chosen trained state as a list of words.

        States of exactly `pair_size` words are preferred. Shorter states only
        exist when a sequence too short for the pair size was trained, and
        are used only if nothing else is available.
        """
        keys = self.states()
        if not keys:
            raise EmptyChainError()

        if self._full_size_cache is None:
            self._full_size_cache = [key for key in keys if len(from_key(key)) == self._pair_size]
        return from_key(self.rng.choice(self._full_size_cache or keys))

    def get_stats(self):
        if not self._frequency_matrix:
            return {"states": 0, "total_transitions": 0, "avg_transitions_per_state": 0.0}

        total_transitions = sum(sum(counter.values()) for counter in self._frequency_matrix.values())
        return {
            "states": len(self._frequency_matrix),
            "total_transitions": total_transitions,
            "avg_transitions_per_state": total_transitions / len(self._frequency_matrix),
        }

    def new_builder(self, seed=None):
        return Builder(self, seed)
