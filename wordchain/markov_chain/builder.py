import logging

logger = logging.getLogger(__name__)


class Builder:
    """
    Grows a sequence of words by repeatedly polling a trained chain.

    The builder reads from the chain but never trains it, so several
    builders can share one chain.
    """

    def __init__(self, chain, seed=None):
        if seed is not None:
            seed = list(seed)

        # no seed, a seed too short for a state, or a state the chain never saw
        if seed is None or len(seed) < chain.pair_size or seed not in chain:
            fallback = chain.random_state()
            logger.debug("Seed %r is not a known state, starting from %r", seed, fallback)
            seed = fallback

        self._chain = chain
        self._words = seed

    @property
    def chain(self):
        return self._chain

    @property
    def words(self):
        return list(self._words)

    def __len__(self):
        return len(self._words)

    def __str__(self):
        return ' '.join(self._words)

    def generate(self, count):
        """
        Appends at most `count` new words and returns how many were added.

        Stops early, without error, as soon as the chain has no continuation
        for the last `pair_size` words.
        """
        initial_count = count

        while count > 0:
            token = self._chain.next(self._words[-self._chain.pair_size:])
            if token is None:
                logger.debug("No continuation after %d words, stopping", len(self._words))
                break

            self._words.append(token)
            count -= 1

        return max(initial_count, 0) - max(count, 0)
