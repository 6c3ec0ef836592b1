"""
strictpass.generator
Password generation over a character pool with optional strict mode.
"""

import logging
from typing import List, Optional

from .errors import InvalidOption, StrictLengthViolation, UnsatisfiableConstraints
from .options import Options
from .pool import build_pool
from .sampler import IndexSampler, default_sampler

logger = logging.getLogger(__name__)

MAX_STRICT_ATTEMPTS = 10_000


class PasswordGenerator:
    """
    Draws passwords from a pool using an IndexSampler.

    In strict mode a candidate missing any enabled class is thrown away and a
    new one is drawn, up to `max_attempts` candidates.
    """

    def __init__(self, sampler: Optional[IndexSampler] = None, max_attempts: int = MAX_STRICT_ATTEMPTS):
        if max_attempts <= 0:
            raise ValueError("max_attempts must be > 0")
        self.sampler = sampler or default_sampler()
        self.max_attempts = max_attempts

    def check_length(self, options: Options) -> None:
        """Strict-mode length check, run before the pool is built."""
        if options.strict and options.min_strict_length > options.length:
            raise StrictLengthViolation(
                f"Length {options.length} is too short for strict mode "
                f"(needs at least {options.min_strict_length})"
            )

    def check(self, options: Options, pool: str) -> None:
        """Static feasibility checks, run before any randomness is consumed."""
        self.check_length(options)
        if not options.strict:
            return
        for cls in options.character_classes():
            if not cls.matches(pool):
                raise UnsatisfiableConstraints(
                    f"Strict mode requires {cls.name} but none are left in the pool"
                )

    def draw(self, length: int, pool: str) -> str:
        return "".join(pool[i] for i in self.sampler.next_indices(len(pool), length))

    def generate_from_pool(self, options: Options, pool: str) -> str:
        self.check(options, pool)

        if not options.strict:
            return self.draw(options.length, pool)

        classes = options.character_classes()
        for attempt in range(1, self.max_attempts + 1):
            password = self.draw(options.length, pool)
            if all(cls.matches(password) for cls in classes):
                if attempt > 1:
                    logger.debug("strict password accepted after %d attempts", attempt)
                return password

        raise UnsatisfiableConstraints(
            f"No strict password found in {self.max_attempts} attempts"
        )

    def generate(self, options: Optional[Options] = None) -> str:
        options = options or Options()
        self.check_length(options)
        return self.generate_from_pool(options, build_pool(options))

    def generate_multiple(self, amount: int, options: Optional[Options] = None) -> List[str]:
        """Generate `amount` independent passwords with the same options."""
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidOption("amount must be a non-negative integer")
        options = options or Options()
        self.check_length(options)
        pool = build_pool(options)
        return [self.generate_from_pool(options, pool) for _ in range(amount)]


def _resolve(options: Optional[Options], fields: dict) -> Options:
    if options is not None and fields:
        raise TypeError("pass either an Options instance or keyword fields, not both")
    if options is None:
        return Options(**fields)
    return options


def generate(options: Optional[Options] = None, **fields) -> str:
    """
    Generate one password.

    >>> generate(length=16, numbers=True, strict=True)
    """
    return PasswordGenerator().generate(_resolve(options, fields))


def generate_multiple(amount: int, options: Optional[Options] = None, **fields) -> List[str]:
    """Generate `amount` passwords sharing the same options."""
    return PasswordGenerator().generate_multiple(amount, _resolve(options, fields))
