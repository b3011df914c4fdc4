# -*- coding: utf-8 -*-

"""MixColumns() and InvMixColumns(): matrix multiplication in GF(2^8).

Each column of the State is treated as a four-term polynomial over
GF(2^8) and multiplied modulo x^4 + 1 by a fixed polynomial a(x)
(FIPS197 section 5.1.3), or by its inverse a^-1(x) (section 5.3.3).
Written as a matrix product, with ``s`` the State and ``M`` the
coefficient matrix::

    s'[i, c] = M[i, 0]•s[0, c] ⊕ M[i, 1]•s[1, c] ⊕ M[i, 2]•s[2, c] ⊕ M[i, 3]•s[3, c]

Here • is multiplication in GF(2^8) with the AES reduction polynomial
m(x) = x^8 + x^4 + x^3 + x + 1.  Every product is built from one
primitive, xtime() (multiply by {02}), plus XOR: {03} = {02} ⊕ {01},
{09} = {02}^3 ⊕ {01}, and so on.

Two equivalent evaluation strategies live here:

 - ``mix_columns`` / ``inv_mix_columns`` run the xtime() chain directly.
 - ``mix_columns_lookup`` / ``inv_mix_columns_lookup`` index into
   ``GF_TABLES``, every product for every coefficient up to 0x0f,
   computed once at import time from the same xtime() chain.  This is
   what the batch pipeline uses; the results are identical.
"""

import functools

import numpy as np
from numpy import arange, array, asarray, uint8

__all__ = (
    "REDUCTION",
    "xtime",
    "gf_multiply",
    "GF_TABLES",
    "gf_lookup",
    "mix_columns",
    "inv_mix_columns",
    "mix_columns_lookup",
    "inv_mix_columns_lookup",
)

# Low byte of m(x) = x^8 + x^4 + x^3 + x + 1 (0x11b)
REDUCTION = 0x1b


def xtime(x):
    """Multiply by {02} in GF(2^8).

    Left shift by one bit; if the bit shifted out was set, reduce
    by XORing with 0x1b.  Works on plain ints and uint8 arrays alike.
    """
    return ((x << 1) & 0xff) ^ ((x >> 7) * REDUCTION)


def gf_multiply(x, n):
    """Multiply `x` by the constant(s) `n` in GF(2^8).

    Both arguments may be arrays and broadcast against each other.
    Only doubling (xtime) and addition (XOR) are used: walk the bits
    of `n` from low to high, accumulating x•{02}^k for every set bit k.
    """
    x = asarray(x, dtype=uint8)
    n = asarray(n, dtype=uint8)
    res = np.zeros(np.broadcast(x, n).shape, dtype=uint8)
    while n.any():
        res ^= x * (n & 1)
        x = xtime(x)
        n = n >> 1
    return res


# GF_TABLES[n, x] == n • x, for 0 <= n < 16
GF_TABLES = gf_multiply(
    arange(256, dtype=uint8)[None, :],
    arange(16, dtype=uint8)[:, None],
)
GF_TABLES.setflags(write=False)


def gf_lookup(x, n, _tables=GF_TABLES):
    """Table-driven equivalent of `gf_multiply()` for n < 16."""
    return _tables[n, x]


def _mix_columns(state, out=None, pm0=None, pm1=None, pm2=None, pm3=None,
                 multiply=gf_multiply):
    # state[..., [j], :] is row j kept 2d, shape (..., 1, 4); pmj is
    # column j of the matrix, shape (4, 1).  Each product broadcasts
    # to (..., 4, 4).
    res = multiply(state[..., [0], :], pm0) ^ \
        multiply(state[..., [1], :], pm1) ^ \
        multiply(state[..., [2], :], pm2) ^ \
        multiply(state[..., [3], :], pm3)  # noqa
    if out is not None:
        out[...] = res
        return out
    else:
        return res


ax_polynomial = array(
    [
        [0x02, 0x03, 0x01, 0x01],
        [0x01, 0x02, 0x03, 0x01],
        [0x01, 0x01, 0x02, 0x03],
        [0x03, 0x01, 0x01, 0x02],
    ], dtype=uint8)

pm0, pm1, pm2, pm3 = (
    ax_polynomial[:, [0]],
    ax_polynomial[:, [1]],
    ax_polynomial[:, [2]],
    ax_polynomial[:, [3]],
)

inv_ax_polynomial = array(
    [
        [0x0e, 0x0b, 0x0d, 0x09],
        [0x09, 0x0e, 0x0b, 0x0d],
        [0x0d, 0x09, 0x0e, 0x0b],
        [0x0b, 0x0d, 0x09, 0x0e],
    ], dtype=uint8)

ipm0, ipm1, ipm2, ipm3 = (
    inv_ax_polynomial[:, [0]],
    inv_ax_polynomial[:, [1]],
    inv_ax_polynomial[:, [2]],
    inv_ax_polynomial[:, [3]],
)

mix_columns = functools.partial(
    _mix_columns,
    pm0=pm0, pm1=pm1, pm2=pm2, pm3=pm3
)
inv_mix_columns = functools.partial(
    _mix_columns,
    pm0=ipm0, pm1=ipm1, pm2=ipm2, pm3=ipm3
)
mix_columns_lookup = functools.partial(
    _mix_columns,
    pm0=pm0, pm1=pm1, pm2=pm2, pm3=pm3,
    multiply=gf_lookup,
)
inv_mix_columns_lookup = functools.partial(
    _mix_columns,
    pm0=ipm0, pm1=ipm1, pm2=ipm2, pm3=ipm3,
    multiply=gf_lookup,
)
