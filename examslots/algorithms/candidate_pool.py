import random
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class CandidatePool(Generic[T]):
    """Shrinking pool with uniform sampling.

    Every draw removes the drawn item, so repeated draws terminate after at
    most len(pool) rounds.
    """

    def __init__(self, items: Iterable[T], rng: Optional[random.Random] = None):
        self.items: List[T] = list(items)
        self.rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self.items)

    def draw(self) -> Optional[T]:
        if not self.items:
            return None
        i = self.rng.randrange(len(self.items))
        # swap-remove keeps draws O(1)
        self.items[i], self.items[-1] = self.items[-1], self.items[i]
        return self.items.pop()
