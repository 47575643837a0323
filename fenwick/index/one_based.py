from fenwick.lowbit import lowbit


def next_up(x: int) -> int:
    # same as x + lowbit(x)
    return (x | (x - 1)) + 1


def next_down(x: int) -> int:
    # clear the lowest set bit, same as x - lowbit(x)
    return x & (x - 1)


class Up:
    """
    Positions of the tree whose range covers `index`: index, index + lowbit(index), ...
    stopping once the position exceeds `length` (inclusive bound).
    Used by update, one entry per level of the implicit tree.
    """

    def __init__(self, index: int, length: int):
        index, length = int(index), int(length)
        assert 1 <= index <= length, f"index {index} out of bounds [1, {length}]"
        self.index = index
        self.length = length

    def __iter__(self):
        x = self.index
        while x <= self.length:
            yield x
            x = next_up(x)

    def __repr__(self) -> str:
        return f"Up(index={self.index}, length={self.length})"


class Down:
    """
    Positions whose ranges partition the prefix [1, index]: index, index - lowbit(index), ..., until 0.
    down(0) is the empty prefix.
    """

    def __init__(self, index: int):
        index = int(index)
        assert index >= 0, f"index {index} must be non-negative"
        self.index = index

    def __iter__(self):
        x = self.index
        while x != 0:
            yield x
            x = next_down(x)

    def __repr__(self) -> str:
        return f"Down(index={self.index})"


def up(index: int, length: int) -> Up:
    return Up(index, length)


def down(index: int) -> Down:
    return Down(index)


def coverage(index: int) -> range:
    # range of the original array summed into tree position `index`
    return range(index - lowbit(index) + 1, index + 1)
