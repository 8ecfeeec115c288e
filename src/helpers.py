import os
import random
from typing import Optional

URL_SAFE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
BASE = len(URL_SAFE_CHARS)
DEFAULT_LENGTH = int(os.getenv("ID_LENGTH", 7))


def id_space_size(length: int = DEFAULT_LENGTH) -> int:
    """Number of distinct ids of the given length."""

    return BASE**length


class IdGenerator:
    """Source of random candidate ids.

    Ids are not guaranteed to be unique, the store decides that on insert.
    Draws from the process-wide `random` module unless an `rng` is given.
    """

    def __init__(
        self, length: int = DEFAULT_LENGTH, rng: Optional[random.Random] = None
    ):
        if length < 1:
            raise ValueError(f"Id length must be positive, got {length}")
        self.length = length
        self._rng = rng or random

    def generate(self) -> str:
        return "".join(self._rng.choices(URL_SAFE_CHARS, k=self.length))
