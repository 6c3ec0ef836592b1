"""
strictpass.pool
Character pool assembly. Step order matters and is fixed.
"""

import logging

from .errors import EmptyPool
from .options import Options, SIMILAR_CHARACTERS

logger = logging.getLogger(__name__)


def build_pool(options: Options) -> str:
    """
    1. Concatenate the enabled classes: lowercase, uppercase, numbers, symbols.
    2. Drop similar-looking characters if requested.
    3. Remove one occurrence per character of `exclude`, last character first.
    4. Raise EmptyPool if nothing is left.
    """
    pool = "".join(cls.chars for cls in options.character_classes())

    if options.exclude_similar_characters:
        pool = "".join(c for c in pool if c not in SIMILAR_CHARACTERS)

    for ch in reversed(options.exclude):
        pool = pool.replace(ch, "", 1)

    if not pool:
        raise EmptyPool("No characters left in the pool after exclusions")

    logger.debug("built pool of %d characters", len(pool))
    return pool
