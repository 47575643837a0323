"""
N-dimensional Fenwick tree over a caller-owned np.ndarray of the same shape as the original array.

Each axis is traversed independently with the 1D sequences, the cells touched are the
Cartesian product of the per-axis positions. An ad-hoc 2D tree written by hand looks like:

    for ii in up(i, n):
        for jj in up(j, m):
            fenwick[ii, jj] += delta

which is what update() does for any number of axes.
"""
import itertools

import numpy as np

from fenwick.index import zero_based


def up_product(index: tuple, shape: tuple):
    assert len(index) == len(shape), f"index {index} does not match shape {shape}"
    return itertools.product(*[zero_based.up(i, n) for i, n in zip(index, shape)])


def down_product(index: tuple):
    return itertools.product(*[zero_based.down(i) for i in index])


def update(fenwick: np.ndarray, index: tuple, delta):
    """Conceptually a[index] += delta, touches O(log(n)^ndim) cells"""
    assert len(index) == fenwick.ndim, f"expected {fenwick.ndim} indices, got {len(index)}"
    for pos in up_product(index, fenwick.shape):
        fenwick[pos] += delta


def prefix_sum(fenwick: np.ndarray, index: tuple):
    """
    Sum of a[k_0, ..., k_d] over all k with k_axis <= index[axis] on every axis,
    e.g. in 2D: a[0:i+1, 0:j+1].sum()
    """
    assert len(index) == fenwick.ndim, f"expected {fenwick.ndim} indices, got {len(index)}"
    for i, n in zip(index, fenwick.shape):
        assert 0 <= i < n, f"index {index} out of bounds for shape {fenwick.shape}"
    ret = 0
    for pos in down_product(index):
        ret += fenwick[pos]
    return ret
