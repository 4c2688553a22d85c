from typing import Optional, Sequence


class SortCycle:
    """
    A sort toggle that rotates None -> first key -> ... -> last key -> None.
    """

    def __init__(self, keys: Sequence[str]):
        self.keys = tuple(keys)
        self.current: Optional[str] = None

    def toggle(self) -> Optional[str]:
        if self.current is None:
            self.current = self.keys[0]
        else:
            position = self.keys.index(self.current) + 1
            self.current = self.keys[position] if position < len(self.keys) else None
        return self.current

    def reset(self):
        self.current = None
