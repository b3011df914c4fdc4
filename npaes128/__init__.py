# -*- coding: utf-8 -*-

"""AES-128 single-block cipher, NumPy implementation.

Based strictly on:

    Federal Information Processing Standards Publication 197
    https://csrc.nist.gov/publications/detail/fips/197/final

Any reference to the paper in this source code is called just FIPS197.
---------------------------------------------

Public interface:

    >>> from npaes128 import encrypt, decrypt
    >>> key = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
    >>> ct = encrypt(bytes.fromhex("00112233445566778899aabbccddeeff"), key)
    >>> ct.hex()
    '69c4e0d86a7b0430d8cdb78070b4c55a'
    >>> decrypt(ct, key).hex()
    '00112233445566778899aabbccddeeff'

One 16-byte block in, one 16-byte block out.  There are no chaining
modes, no padding, and only 128-bit keys.  Anything else of the wrong
length raises `InvalidLength`.

Technical notes:

 - Internally, the AES algorithm's operations are performed on a
   two-dimensional array of bytes called the State: four rows, each
   containing Nb = 4 bytes.  Here the State is a 4x4 uint8 array
   indexed ``state[row, column]``.

 - FIPS197 depicts the state as an "array of columns," where each
   column represents a word.  Given the 16-byte input:

       {in0, in1, in2, in3, in4, in5, ..., in13, in14, in15}

   the State is:

       [[in0, in4, in8,  in12],
        [in1, in5, in9,  in13],
        [in2, in6, in10, in14],
        [in3, in7, in11, in15]], with word0 as {in0, in1, in2, in3}

   which is NumPy's C-ordered ``reshape(4, 4)`` followed by
   ``.swapaxes(0, 1)``.

 - The XOR (addition or "⊕" in FIPS paper) is the bitwise exclusive-or,
   NumPy's `np.bitwise_xor()`, *not* `np.logical_xor()`.

 - Every transform takes an optional ``out`` argument so that the
   State can be manipulated inplace, as FIPS197's C-like pseudocode
   does.  Without ``out`` a new array is returned.

 - Every transform also accepts a stack of States of shape
   (..., 4, 4).  The rounds themselves are sequential, so the Python
   loop over rounds stays, but within a round whole stacks are handled
   at once.

 - Lookup tables (S-boxes, GF(2^8) products, Rcon) are module-level
   constants, built at import time and marked read-only, so any number
   of threads may share them.
"""

import logging

__version__ = "0.2"

from .cipher import (  # noqa: E402
    Operation,
    ProcessingHint,
    decrypt,
    decrypt_raw,
    decrypt_states,
    encrypt,
    encrypt_raw,
    encrypt_states,
    process,
)
from .errors import Error, InvalidLength  # noqa: E402
from .keyschedule import NB, NK, NR, RCON, expand_key, rot_word  # noqa: E402
from .mixcolumns import (  # noqa: E402
    GF_TABLES,
    REDUCTION,
    gf_multiply,
    inv_mix_columns,
    mix_columns,
    xtime,
)
from .rounds import add_round_key, decrypt_round, encrypt_round  # noqa: E402
from .sbox import (  # noqa: E402
    INVSBOX,
    SBOX,
    inv_sub_bytes,
    inverse_substitute,
    sub_bytes,
    substitute,
)
from .shiftrows import inv_shift_rows, shift_rows  # noqa: E402
from .utils import (  # noqa: E402
    BLOCKSIZE_BYTES,
    KEYSIZE_BYTES,
    array_to_hex,
    bytes_to_state,
    hex_to_array,
    state_to_bytes,
)

__all__ = (
    "encrypt",
    "decrypt",
    "process",
    "Operation",
    "ProcessingHint",
    "Error",
    "InvalidLength",
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
