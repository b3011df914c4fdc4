# -*- coding: utf-8 -*-

"""Conversions between bytes, hex strings and 4x4 States."""

import numpy as np
from numpy import array, uint8

from .errors import InvalidLength

__all__ = (
    "BLOCKSIZE_BYTES",
    "KEYSIZE_BYTES",
    "check_length",
    "bytes_to_state",
    "state_to_bytes",
    "hex_to_array",
    "array_to_hex",
)

# Rijndael processes data blocks of 128 bits
BLOCKSIZE_BYTES = 16

# AES-128 only: 128-bit Cipher Keys
KEYSIZE_BYTES = 16


def check_length(data, what="block", expected=BLOCKSIZE_BYTES):
    """Return `data` as immutable bytes, or raise InvalidLength.

    Anything supporting the buffer protocol with one-byte items is
    accepted.  Notably ``bytes(16)`` style surprises are ruled out: ints
    and strs raise TypeError rather than being coerced, and so do wider
    buffers such as an int32 array whose raw memory happens to be
    16 bytes long.
    """
    view = memoryview(data)
    if view.itemsize != 1:
        raise TypeError(
            "%s must be a buffer of single bytes, got item size %d"
            % (what, view.itemsize)
        )
    buf = view.tobytes()
    if len(buf) != expected:
        raise InvalidLength(what, len(buf), expected)
    return buf


def bytes_to_state(data, what="block"):
    """16 bytes -> 4x4 uint8 State, following FIPS197 column ordering.

    Input byte i lands at row i % 4, column i // 4.
    """
    buf = check_length(data, what)
    return array(bytearray(buf), dtype=uint8).reshape(4, 4).swapaxes(0, 1)


def state_to_bytes(state):
    """Inverse of `bytes_to_state()`; also flattens stacks of States."""
    return np.ascontiguousarray(np.swapaxes(state, -1, -2)).tobytes()


def hex_to_array(s, ndim=2):
    """Produce an array of uint8 bytes from a hex string.

    If ndim is 1, the result is 1d, length 16.
    If ndim is 2, the result is 4x4 and follows FIPS197's
    *column ordering*, with each column denoting a successive
    word from the input.

    Example
    -------
    >>> hex_to_array("00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f")
    array([[ 0,  4,  8, 12],
           [ 1,  5,  9, 13],
           [ 2,  6, 10, 14],
           [ 3,  7, 11, 15]], dtype=uint8)
    """
    res = array(bytearray.fromhex(s), dtype=uint8)
    if ndim == 2:
        size = len(res) // 4
        res = res.reshape(size, 4).swapaxes(0, 1)
    return res


def array_to_hex(arr, sep=" "):
    """Inverse of `hex_to_array()`."""
    if arr.ndim == 1:
        return sep.join(map("{:02x}".format, arr))
    return sep.join(map("{:02x}".format, arr.swapaxes(0, 1).flat))
