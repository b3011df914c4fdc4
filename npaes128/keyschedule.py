# -*- coding: utf-8 -*-

"""KeyExpansion() for AES-128.

The Cipher Key is expanded into NR + 1 = 11 round keys, each one a 4x4
State.  Round key i is derived from round key i - 1 alone:

    temp      = SubWord(RotWord(last column of rk[i-1])) ⊕ Rcon[i]
    rk[i][0]  = rk[i-1][0] ⊕ temp
    rk[i][j]  = rk[i-1][j] ⊕ rk[i][j-1]        for j = 1, 2, 3

where rk[i][j] is column (word) j.  Since the State is column-major,
"the last word" is column 3, i.e. flat key bytes 12..15, and RotWord on
it picks flat bytes [13, 14, 15, 12].
"""

import logging

import numpy as np
from numpy import uint8, bitwise_xor as xor

from .errors import InvalidLength
from .sbox import sub_word
from .utils import bytes_to_state

__all__ = ("NB", "NK", "NR", "RCON", "rot_word", "expand_key")

log = logging.getLogger(__name__)

# Number of columns (32-bit words) comprising the State
NB = 4

# Number of 32-bit words comprising the Cipher Key (AES-128 only)
NK = 4

# Number of rounds for NK = 4
NR = 10

# "The round constant word array, Rcon[i], contains the values
# given by [xi-1,{00},{00},{00}], with x i-1 being powers of
# x (x is denoted as {02}) in the field GF(2^8)"
#
# Only the first byte is nonzero, so only it is kept.  0-indexed:
# round key i uses RCON[i - 1].  Ten entries cover AES-128 exactly.
#
# Generated via:
#
# j = 1
# for _ in range(10):
#     yield j
#     j = xtime(j)
RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1b, 0x36)


def rot_word(word):
    """Takes a 4-byte word and performs cyclic permutation.

    Aka one-byte left circular shift.

    [b0, b1, b2, b3] -> [b1, b2, b3, b0]
    """
    return word[[1, 2, 3, 0]]


def expand_key(key):
    """Key expansion routine to generate a key schedule.

    Parameters
    ----------
    key: np.ndarray or bytes-like
        The Cipher Key, either as a 4x4 uint8 State (column-ordered)
        or as its 16 raw bytes (a flat uint8 array counts as bytes).

    Returns
    -------
    schedule: np.ndarray
        Read-only array of shape (NR + 1, 4, 4).  ``schedule[0]`` is
        the key itself; ``schedule[i]`` is the round key XORed in at
        the end of round i.
    """
    if isinstance(key, np.ndarray) and key.ndim == 2:
        if key.size != 4 * NK:
            raise InvalidLength("key", key.size, 4 * NK)
        if key.shape != (4, NK):
            raise ValueError(
                "key State must have shape (4, %d), got %r" % (NK, key.shape)
            )
        key = key.astype(uint8, copy=False)
    else:
        key = bytes_to_state(key, "key")

    schedule = np.empty((NR + 1, 4, NB), dtype=uint8)
    schedule[0] = key
    # The dreaded loop: every round key depends on the one before it
    for i in range(1, NR + 1):
        prev, cur = schedule[i - 1], schedule[i]
        temp = sub_word(rot_word(prev[:, NB - 1]))
        temp[0] ^= RCON[i - 1]
        xor(prev[:, 0], temp, out=cur[:, 0])
        for j in range(1, NB):
            xor(prev[:, j], cur[:, j - 1], out=cur[:, j])
    schedule.setflags(write=False)
    log.debug("expanded key into %d round keys", len(schedule))
    return schedule
