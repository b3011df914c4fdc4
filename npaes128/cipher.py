# -*- coding: utf-8 -*-

"""Cipher() and InvCipher(): whole-block AES-128 encryption/decryption.

Two interchangeable pipelines compute the same function:

 - The *standard* pipeline (`encrypt_raw()` / `decrypt_raw()`) follows
   FIPS197 pseudocode literally: one 4x4 State is modified in place,
   round after round, with MixColumns() evaluated as xtime() chains.
 - The *batch* pipeline (`encrypt_states()` / `decrypt_states()`) works
   on a stack of States of shape (..., 4, 4), never touches its input,
   and evaluates MixColumns() through precomputed GF(2^8) tables.  A
   single block is just a stack of one.

`ProcessingHint` picks between them and never changes the output.

Setting the ``npaes128`` logger to DEBUG traces the State at every
round boundary, in the format of FIPS197 Appendix C.
"""

import enum
import functools
import logging

from .keyschedule import NR, expand_key
from .mixcolumns import inv_mix_columns_lookup, mix_columns_lookup
from .rounds import add_round_key, decrypt_round, encrypt_round
from .utils import bytes_to_state, state_to_bytes

__all__ = (
    "Operation",
    "ProcessingHint",
    "encrypt_raw",
    "decrypt_raw",
    "encrypt_states",
    "decrypt_states",
    "process",
    "encrypt",
    "decrypt",
)

log = logging.getLogger(__name__)


class Operation(enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class ProcessingHint(enum.Enum):
    """How to compute a block.  Never affects the result."""

    STANDARD = "standard"
    BATCH_OPTIMIZED = "batch_optimized"


def _trace(rnd, step, state):
    if log.isEnabledFor(logging.DEBUG):
        log.debug("round[%2d].%-7s %s", rnd, step, state_to_bytes(state).hex())


def encrypt_raw(state, schedule):
    """Encrypt a single input data block, `state`, using `schedule`.

    Modifies `state` in-place!

    Parameters
    ----------
    state: np.ndarray
        4x4 uint8 State.
    schedule: np.ndarray
        Output of `expand_key()`.

    Returns
    -------
    state: np.ndarray
    """
    _trace(0, "input", state)

    # First XOR is with just input + key
    add_round_key(state, schedule[0], out=state)

    # Intermediate rounds
    for rnd in range(1, NR):
        _trace(rnd, "start", state)
        encrypt_round(state, schedule[rnd], out=state)

    # Final round.  No MixColumns here
    _trace(NR, "start", state)
    encrypt_round(state, schedule[NR], is_final=True, out=state)
    _trace(NR, "output", state)
    return state


def decrypt_raw(state, schedule):
    """Decrypt a single ciphertext data block, `state`, using `schedule`.

    Modifies `state` in-place!  Round keys are consumed in reverse.
    """
    _trace(0, "iinput", state)

    # First XOR is with the last round key
    add_round_key(state, schedule[NR], out=state)

    for rnd in range(NR - 1, 0, -1):
        _trace(NR - rnd, "istart", state)
        decrypt_round(state, schedule[rnd], out=state)

    # Round key 0 goes in last, without InvMixColumns
    _trace(NR, "istart", state)
    decrypt_round(state, schedule[0], is_first=True, out=state)
    _trace(NR, "ioutput", state)
    return state


_lookup_encrypt_round = functools.partial(
    encrypt_round, _mix=mix_columns_lookup
)
_lookup_decrypt_round = functools.partial(
    decrypt_round, _inv_mix=inv_mix_columns_lookup
)


def encrypt_states(states, schedule):
    """Encrypt a stack of States (shape (..., 4, 4)) under one schedule.

    Returns a new array; `states` is left untouched.
    """
    _trace(0, "input", states)
    states = add_round_key(states, schedule[0])
    for rnd in range(1, NR):
        _trace(rnd, "start", states)
        states = _lookup_encrypt_round(states, schedule[rnd])
    _trace(NR, "start", states)
    states = _lookup_encrypt_round(states, schedule[NR], is_final=True)
    _trace(NR, "output", states)
    return states


def decrypt_states(states, schedule):
    """Decrypt a stack of States (shape (..., 4, 4)) under one schedule.

    Returns a new array; `states` is left untouched.
    """
    _trace(0, "iinput", states)
    states = add_round_key(states, schedule[NR])
    for rnd in range(NR - 1, 0, -1):
        _trace(NR - rnd, "istart", states)
        states = _lookup_decrypt_round(states, schedule[rnd])
    _trace(NR, "istart", states)
    states = _lookup_decrypt_round(states, schedule[0], is_first=True)
    _trace(NR, "ioutput", states)
    return states


_pipelines = {
    (Operation.ENCRYPT, ProcessingHint.STANDARD): encrypt_raw,
    (Operation.DECRYPT, ProcessingHint.STANDARD): decrypt_raw,
    (Operation.ENCRYPT, ProcessingHint.BATCH_OPTIMIZED): encrypt_states,
    (Operation.DECRYPT, ProcessingHint.BATCH_OPTIMIZED): decrypt_states,
}


def process(block, key, operation=Operation.ENCRYPT,
            hint=ProcessingHint.STANDARD):
    """Encrypt or decrypt one 16-byte `block` under a 16-byte `key`.

    `operation` and `hint` also accept their enum values as strings
    ("encrypt", "batch_optimized", ...).

    Raises
    ------
    InvalidLength
        If `block` or `key` is not exactly 16 bytes.  Nothing is
        computed in that case.
    """
    operation = Operation(operation)
    hint = ProcessingHint(hint)
    what = "plaintext" if operation is Operation.ENCRYPT else "ciphertext"
    state = bytes_to_state(block, what)
    schedule = expand_key(bytes_to_state(key, "key"))

    log.debug("%s block, %s pipeline", operation.value, hint.value)
    state = _pipelines[operation, hint](state, schedule)
    return state_to_bytes(state)


def encrypt(plaintext, key, hint=ProcessingHint.STANDARD):
    """Encrypt one 16-byte block; returns the 16-byte ciphertext."""
    return process(plaintext, key, Operation.ENCRYPT, hint)


def decrypt(ciphertext, key, hint=ProcessingHint.STANDARD):
    """Decrypt one 16-byte block; returns the 16-byte plaintext."""
    return process(ciphertext, key, Operation.DECRYPT, hint)
