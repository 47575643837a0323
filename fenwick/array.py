"""
1D Fenwick tree stored in a caller-owned, zero-based array of the same length as the original array.

    fw = [0] * 10
    update(fw, 0, 3)     # a[0] += 3
    update(fw, 5, 9)     # a[5] += 9
    prefix_sum(fw, 4)    # a[0] + ... + a[4] == 3
    prefix_sum(fw, 5)    # 12

Any indexable container works (list, 1D np.ndarray) as long as its values support +.
"""
from fenwick.index.zero_based import up, down


def update(fenwick, i: int, delta):
    """
    Conceptually performs a[i] += delta on the original array a.
    Touches every tree node covering i, lowest level first.
    """
    n = len(fenwick)
    assert 0 <= i < n, f"index {i} out of bounds for length {n}"
    for ii in up(i, n):
        fenwick[ii] += delta


def prefix_sum(fenwick, i: int):
    """Returns a[0] + ... + a[i] of the original array a"""
    n = len(fenwick)
    assert 0 <= i < n, f"index {i} out of bounds for length {n}"
    ret = 0
    for ii in down(i):
        ret += fenwick[ii]
    return ret
