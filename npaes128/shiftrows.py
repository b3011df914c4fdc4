# -*- coding: utf-8 -*-

"""ShiftRows() and InvShiftRows().

Row r of the State is cyclically rotated left (right, for the inverse)
by r positions; row 0 never moves.  With the State held as
``state[row, column]`` this is a single fancy-indexing operation, and
the leading ``...`` lets the same indexers permute a whole stack of
States at once.
"""

from numpy import arange, array, uint8

__all__ = ("shift_rows", "inv_shift_rows")

# Cols is also
# np.atleast_2d(arange(4)) - array([0, 3, 2, 1])[:, None]
# ...but that doesn't seem any simpler now, does it?
colindexer = array([[0, 1, 2, 3],
                    [1, 2, 3, 0],
                    [2, 3, 0, 1],
                    [3, 0, 1, 2]], dtype=uint8)

invcolindexer = array([[0, 1, 2, 3],
                       [3, 0, 1, 2],
                       [2, 3, 0, 1],
                       [1, 2, 3, 0]], dtype=uint8)

_rowindexer = arange(4, dtype=uint8)[:, None]


def shift_rows(state, out=None, _rows=_rowindexer, _cols=colindexer):
    """Cyclically shift last 3 rows in the State."""
    # Fancy indexing always copies, so out may alias state
    if out is not None:
        out[...] = state[..., _rows, _cols]
        return out
    else:
        return state[..., _rows, _cols]


def inv_shift_rows(state, out=None, _rows=_rowindexer, _cols=invcolindexer):
    """Cyclically shift last 3 rows in the State, inverse."""
    if out is not None:
        out[...] = state[..., _rows, _cols]
        return out
    else:
        return state[..., _rows, _cols]
