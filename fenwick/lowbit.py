def lowbit(x: int) -> int:
    """
    Keep only the least significant set bit of x, e.g. 0b1011000 -> 0b1000
    For x > 0 this equals 1 << (number of trailing zeros of x), lowbit(0) is 0
    """
    x = int(x)
    assert x >= 0, f"lowbit is only defined for non-negative integers, got {x}"
    return x & -x
