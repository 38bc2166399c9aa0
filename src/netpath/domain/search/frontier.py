# domain/search/frontier.py
import heapq
from collections.abc import Hashable


class Frontier:
    """
    Min-priority queue with decrease-key by lazy deletion.

    update() pushes a fresh entry; pop() skips entries whose key no longer matches
    the authoritative key map. Equal keys pop in ascending tie-break order, then FIFO.
    """

    def __init__(self):
        self._q: list[tuple[int, str, int, Hashable]] = []
        self._key: dict[Hashable, int] = {}
        self._seq = 0

    def __len__(self) -> int:
        return len(self._key)

    def __bool__(self) -> bool:
        return bool(self._key)

    def __contains__(self, item: object) -> bool:
        return item in self._key

    def key(self, item: Hashable) -> int:
        return self._key[item]

    def update(self, item: Hashable, key: int, tie: str = "") -> None:
        self._seq += 1
        self._key[item] = key
        heapq.heappush(self._q, (key, tie, self._seq, item))

    push = update

    def pop(self) -> tuple[int, Hashable]:
        while self._q:
            key, _, _, item = heapq.heappop(self._q)
            if self._key.get(item) == key:
                del self._key[item]
                return key, item
        raise IndexError("pop from an empty frontier")
