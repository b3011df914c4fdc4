# -*- coding: utf-8 -*-

"""One round of the Cipher, and one round of the Inverse Cipher.

A round is a pure function of (State, round key, position).  The
position only matters at the edges: the final encryption round has no
MixColumns(), and the decryption round that consumes round key 0 has
no InvMixColumns().

Note the asymmetric ordering of the inverse round used here: the round
key is added *before* InvMixColumns(), mirroring the forward round
rather than using the Equivalent Inverse Cipher of FIPS197 section 5.3.5.
"""

from numpy import bitwise_xor as xor

from .mixcolumns import inv_mix_columns, mix_columns
from .sbox import inv_sub_bytes, sub_bytes
from .shiftrows import inv_shift_rows, shift_rows

__all__ = ("add_round_key", "encrypt_round", "decrypt_round")


def add_round_key(state, round_key, out=None):
    """AddRoundKey() is just an XOR, and is its own inverse."""
    return xor(state, round_key, out=out)


def encrypt_round(state, round_key, is_final=False, out=None,
                  _mix=mix_columns):
    """SubBytes, ShiftRows, MixColumns (unless `is_final`), AddRoundKey.

    `state` may be a single 4x4 State or a stack of them.  Passing
    ``out=state`` runs the round in place.
    """
    state = sub_bytes(state, out=out)
    shift_rows(state, out=state)
    if not is_final:
        _mix(state, out=state)
    return add_round_key(state, round_key, out=state)


def decrypt_round(state, round_key, is_first=False, out=None,
                  _inv_mix=inv_mix_columns):
    """InvShiftRows, InvSubBytes, AddRoundKey, InvMixColumns (unless `is_first`).

    `is_first` marks the round that consumes round key 0, which comes
    last in decryption order.
    """
    state = inv_shift_rows(state, out=out)
    inv_sub_bytes(state, out=state)
    add_round_key(state, round_key, out=state)
    if not is_first:
        _inv_mix(state, out=state)
    return state
