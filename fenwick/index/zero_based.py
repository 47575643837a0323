from fenwick.lowbit import lowbit


def next_up(x: int) -> int:
    # one_based.next_up shifted by one: set the lowest unset bit
    return x | (x + 1)


def next_down(x: int) -> int:
    # one_based.next_down shifted by one, reaches -1 after the last position
    return (x & (x + 1)) - 1


class Up:
    """
    Zero-based positions to update for original index `index`, bounded by `length` (exclusive).

    With length 16 and index 0 the sequence is 0, 1, 3, 7, 15.
    """

    def __init__(self, index: int, length: int):
        index, length = int(index), int(length)
        assert 0 <= index < length, f"index {index} out of bounds [0, {length})"
        self.index = index
        self.length = length

    def __iter__(self):
        x = self.index
        while x < self.length:
            yield x
            x = next_up(x)

    def __repr__(self) -> str:
        return f"Up(index={self.index}, length={self.length})"


class Down:
    """
    Zero-based positions that add up to the prefix a[0] + ... + a[index].
    down(-1) is the empty prefix, down(0) yields only 0.
    """

    def __init__(self, index: int):
        index = int(index)
        assert index >= -1, f"index {index} must be at least -1"
        self.index = index

    def __iter__(self):
        x = self.index
        while x != -1:
            yield x
            x = next_down(x)

    def __repr__(self) -> str:
        return f"Down(index={self.index})"


def up(index: int, length: int) -> Up:
    return Up(index, length)


def down(index: int) -> Down:
    return Down(index)


def coverage(index: int) -> range:
    # original indices whose values are summed into fenwick[index]
    return range(index + 1 - lowbit(index + 1), index + 1)
