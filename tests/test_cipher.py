# /usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import pickle

import numpy as np
from numpy import array_equal, uint8
import pytest

import npaes128
from npaes128 import (
    InvalidLength,
    Operation,
    ProcessingHint,
    bytes_to_state,
    decrypt,
    decrypt_states,
    encrypt,
    encrypt_states,
    expand_key,
    process,
    state_to_bytes,
)

# FIPS197 Appendix C.1 and Appendix B: (plaintext, key, ciphertext)
vectors = [
    (
        "00112233445566778899aabbccddeeff",
        "000102030405060708090a0b0c0d0e0f",
        "69c4e0d86a7b0430d8cdb78070b4c55a",
    ),
    (
        "3243f6a8885a308d313198a2e0370734",
        "2b7e151628aed2a6abf7158809cf4f3c",
        "3925841d02dc09fbdc118597196a0b32",
    ),
    (
        "00000000000000000000000000000000",
        "00000000000000000000000000000000",
        "66e94bd4ef8a2c3b884cfa59ca342b2e",
    ),
    (
        "ffffffffffffffffffffffffffffffff",
        "ffffffffffffffffffffffffffffffff",
        "bcbf217cb280cf30b2517052193ab979",
    ),
]

hints = list(ProcessingHint)


@pytest.mark.parametrize("hint", hints)
@pytest.mark.parametrize("pt,key,ct", vectors)
def test_encrypt(pt, key, ct, hint):
    out = encrypt(bytes.fromhex(pt), bytes.fromhex(key), hint=hint)
    assert isinstance(out, bytes)
    assert out.hex() == ct


@pytest.mark.parametrize("hint", hints)
@pytest.mark.parametrize("pt,key,ct", vectors)
def test_decrypt(pt, key, ct, hint):
    out = decrypt(bytes.fromhex(ct), bytes.fromhex(key), hint=hint)
    assert out.hex() == pt


def test_round_trip():
    rng = np.random.RandomState(0)
    for _ in range(50):
        pt = rng.bytes(16)
        key = rng.bytes(16)
        assert decrypt(encrypt(pt, key), key) == pt


def test_hints_give_identical_output():
    rng = np.random.RandomState(1)
    for _ in range(25):
        pt, key = rng.bytes(16), rng.bytes(16)
        standard = encrypt(pt, key, hint=ProcessingHint.STANDARD)
        batched = encrypt(pt, key, hint=ProcessingHint.BATCH_OPTIMIZED)
        assert standard == batched
        assert decrypt(standard, key, ProcessingHint.STANDARD) == \
            decrypt(standard, key, ProcessingHint.BATCH_OPTIMIZED) == pt


@pytest.mark.parametrize("data", [
    bytearray.fromhex("00112233445566778899aabbccddeeff"),
    memoryview(bytes.fromhex("00112233445566778899aabbccddeeff")),
    np.frombuffer(bytes.fromhex("00112233445566778899aabbccddeeff"), dtype=uint8),
])
def test_bytes_like_inputs(data):
    key = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
    assert encrypt(data, key).hex() == "69c4e0d86a7b0430d8cdb78070b4c55a"


def test_inputs_not_modified():
    pt = bytearray.fromhex("00112233445566778899aabbccddeeff")
    key = bytearray.fromhex("000102030405060708090a0b0c0d0e0f")
    encrypt(pt, key)
    assert pt.hex() == "00112233445566778899aabbccddeeff"
    assert key.hex() == "000102030405060708090a0b0c0d0e0f"


@pytest.mark.parametrize("n", [0, 15, 17, 32])
def test_invalid_block_length(n):
    with pytest.raises(InvalidLength) as e:
        encrypt(b"\x00" * n, b"\x00" * 16)
    assert e.value.what == "plaintext"
    assert e.value.length == n
    assert e.value.expected == 16

    with pytest.raises(InvalidLength) as e:
        decrypt(b"\x00" * n, b"\x00" * 16)
    assert e.value.what == "ciphertext"


@pytest.mark.parametrize("hint", hints)
@pytest.mark.parametrize("n", [15, 17, 24, 32])
def test_invalid_key_length(n, hint):
    with pytest.raises(InvalidLength) as e:
        encrypt(b"\x00" * 16, b"\x00" * n, hint=hint)
    assert e.value.what == "key"
    assert e.value.length == n


def test_invalid_length_is_a_value_error():
    with pytest.raises(ValueError, match="exactly 16 bytes, got 15"):
        encrypt(b"\x00" * 15, b"\x00" * 16)
    assert issubclass(InvalidLength, npaes128.Error)


def test_invalid_length_pickles():
    err = InvalidLength("key", 15)
    copy = pickle.loads(pickle.dumps(err))
    assert type(copy) is InvalidLength
    assert (copy.what, copy.length, copy.expected) == ("key", 15, 16)
    assert str(copy) == str(err) == "key must be exactly 16 bytes, got 15"


@pytest.mark.parametrize("wide", [np.zeros(4, dtype=np.int32), np.zeros(2, dtype=np.uint64)])
def test_wide_buffers_rejected(wide):
    # 16 bytes of raw memory, but not 16 byte values
    with pytest.raises(TypeError):
        encrypt(wide, bytes(16))
    with pytest.raises(TypeError):
        encrypt(bytes(16), wide)


@pytest.mark.parametrize("bad", [16, "0" * 16, None])
def test_non_bytes_rejected(bad):
    with pytest.raises(TypeError):
        encrypt(bad, b"\x00" * 16)


def test_process():
    pt, key, ct = (bytes.fromhex(h) for h in vectors[0])
    assert process(pt, key) == ct
    assert process(ct, key, Operation.DECRYPT) == pt
    assert process(ct, key, "decrypt", "batch_optimized") == pt
    with pytest.raises(ValueError):
        process(pt, key, "scramble")
    with pytest.raises(ValueError):
        process(pt, key, hint="pipelined")


def test_bytes_to_state_layout():
    state = bytes_to_state(bytes(range(16)))
    # Byte i sits at row i % 4, column i // 4
    for i in range(16):
        assert state[i % 4, i // 4] == i
    assert state_to_bytes(state) == bytes(range(16))


def test_batch_pipeline_on_a_stack():
    rng = np.random.RandomState(2)
    key = rng.bytes(16)
    schedule = expand_key(bytes_to_state(key, "key"))
    blocks = [rng.bytes(16) for _ in range(8)]
    states = np.stack([bytes_to_state(b) for b in blocks])
    before = states.copy()

    out = encrypt_states(states, schedule)
    assert array_equal(states, before)
    assert out.shape == (8, 4, 4)
    for block, state in zip(blocks, out):
        assert state_to_bytes(state) == encrypt(block, key)
    assert state_to_bytes(out) == b"".join(encrypt(b, key) for b in blocks)
    assert array_equal(decrypt_states(out, schedule), states)


def test_debug_trace(caplog):
    pt, key, ct = (bytes.fromhex(h) for h in vectors[0])
    with caplog.at_level(logging.DEBUG, logger="npaes128"):
        encrypt(pt, key)
    messages = [r.getMessage() for r in caplog.records if r.name == "npaes128.cipher"]
    assert "round[ 0].input   00112233445566778899aabbccddeeff" in messages
    assert "round[ 1].start   00102030405060708090a0b0c0d0e0f0" in messages
    assert "round[10].output  69c4e0d86a7b0430d8cdb78070b4c55a" in messages


def test_no_trace_by_default(caplog):
    pt, key, _ = (bytes.fromhex(h) for h in vectors[0])
    with caplog.at_level(logging.WARNING, logger="npaes128"):
        encrypt(pt, key)
    assert not [r for r in caplog.records if r.name.startswith("npaes128")]
