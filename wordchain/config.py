import logging
import os


def _int_from_env(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not an integer. Using a default of {default}.")
        return default


def _log_level_from_env(name, default):
    value = os.environ.get(name, default).upper()
    # getLevelName maps known names to their numeric level, anything else to a string
    if not isinstance(logging.getLevelName(value), int):
        print(f"Warning: {name}={value!r} is not a logging level. Using a default of {default}.")
        return default
    return value


# --- Generation Configuration ---
# Number of words that make up one state of the chain.
PAIR_SIZE = _int_from_env('WORDCHAIN_PAIR_SIZE', 2)
# Total length of the generated text, seed words included.
MAX_WORDS = _int_from_env('WORDCHAIN_MAX_WORDS', 100)

# --- Logging Configuration ---
LOG_LEVEL = _log_level_from_env('WORDCHAIN_LOG_LEVEL', 'WARNING')
LOG_FORMAT = '%(levelname)s: %(message)s'
