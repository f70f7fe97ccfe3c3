# pylint: disable=missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import io

import pytest

from rsadigest import engine as tf
from rsadigest.errors import InvalidArgument
from rsadigest.errors import MalformedToken
from rsadigest.rsa import RSAPrivateKey
from rsadigest.rsa import RSAPublicKey

# The classic textbook pair, n = 61 * 53.
N, E, D = 3233, 17, 2753
SCENARIO = bytes([0, 1, 255, 65])


def test_transform_known():
    assert tf.transform(65, E, N) == 2790
    assert tf.transform(2790, D, N) == 65


def test_transform_edges():
    assert tf.transform(0, E, N) == 0
    assert tf.transform(1, E, N) == 1
    assert tf.transform(N - 1, 1, N) == N - 1


@pytest.mark.parametrize("unit,exponent,modulus", [
    (-1, E, N),
    (N, E, N),
    (None, E, N),
    (5, 0, N),
    (5, -3, N),
    (5, None, N),
    (0, E, 1),
    (0, E, None),
])
def test_transform_validates(unit, exponent, modulus):
    with pytest.raises(InvalidArgument):
        tf.transform(unit, exponent, modulus)


@pytest.mark.parametrize("value,token", [(0, "0x0"), (255, "0xff"), (2790, "0xae6"), (2**70, "0x4" + "0" * 17)])
def test_format_token(value, token):
    assert tf.format_token(value) == token


@pytest.mark.parametrize("token,value", [("0xff", 255), ("FF\n", 255), (" 0XaE6 ", 2790), ("0", 0), ("0x0\r\n", 0)])
def test_parse_token(token, value):
    assert tf.parse_token(token) == value


@pytest.mark.parametrize("token", ["", "\n", "0x", "zz", "-1", "0x1g", "1.5", "1_0", "0x 1"])
def test_parse_token_malformed(token):
    with pytest.raises(MalformedToken) as exc:
        tf.parse_token(token)
    assert isinstance(exc.value, IOError)


def test_units_round_trip():
    ciphertext = list(tf.encrypt_units(SCENARIO, E, N))
    assert ciphertext == [pow(m, E, N) for m in SCENARIO]
    assert bytes(tf.decrypt_units(ciphertext, D, N)) == SCENARIO


def test_decrypt_units_not_a_byte():
    with pytest.raises(InvalidArgument):
        list(tf.decrypt_units([1000], 1, N))


def test_encrypt_stream():
    dst = io.StringIO()
    assert tf.encrypt_stream(io.BytesIO(SCENARIO), dst, E, N) == len(SCENARIO)
    assert dst.getvalue().splitlines() == [tf.format_token(pow(m, E, N)) for m in SCENARIO]


def test_stream_round_trip():
    payload = bytes(range(256))
    tokens = io.StringIO()
    tf.encrypt_stream(io.BytesIO(payload), tokens, E, N)
    tokens.seek(0)
    dst = io.BytesIO()
    assert tf.decrypt_stream(tokens, dst, D, N) == 256
    assert dst.getvalue() == payload


def test_stream_empty():
    tokens = io.StringIO()
    assert tf.encrypt_stream(io.BytesIO(b""), tokens, E, N) == 0
    assert tokens.getvalue() == ""
    dst = io.BytesIO()
    assert tf.decrypt_stream(io.StringIO(""), dst, D, N) == 0
    assert dst.getvalue() == b""


def test_decrypt_stream_skips_blank_lines():
    dst = io.BytesIO()
    assert tf.decrypt_stream(io.StringIO("\n0xae6\n\n  \n0x0\n"), dst, D, N) == 2
    assert dst.getvalue() == bytes([65, 0])


def test_decrypt_stream_malformed():
    dst = io.BytesIO()
    with pytest.raises(MalformedToken):
        tf.decrypt_stream(io.StringIO("0xae6\nnot-a-token\n"), dst, D, N)
    assert dst.getvalue() == bytes([65])


def test_decrypt_stream_out_of_range():
    with pytest.raises(InvalidArgument):
        tf.decrypt_stream(io.StringIO(tf.format_token(N) + "\n"), io.BytesIO(), D, N)


def test_decrypt_stream_wrong_key():
    with pytest.raises(InvalidArgument):
        tf.decrypt_stream(io.StringIO("0x3e8\n"), io.BytesIO(), 1, N)


def test_file_round_trip(tmp_path):
    source, tokens, result = tmp_path / "in.bin", tmp_path / "out.txt", tmp_path / "back.bin"
    source.write_bytes(b"Hi there!\x00\xff")
    assert tf.encrypt_file(RSAPrivateKey(N, E, 12), source, tokens) == 11
    assert len(tokens.read_text(encoding="ascii").splitlines()) == 11
    assert tf.decrypt_file(RSAPublicKey(N, D, 12), tokens, result) == 11
    assert result.read_bytes() == source.read_bytes()


def test_encrypt_stream_uses_units(mocker):
    spy = mocker.spy(tf, "encrypt_units")
    assert tf.encrypt_stream(io.BytesIO(b"AB"), io.StringIO(), E, N) == 2
    assert spy.call_count == 1


def test_decrypt_stream_not_ascii():
    src = io.TextIOWrapper(io.BytesIO(b"0xae6\n0x\xff\n"), encoding="ascii")
    with pytest.raises(MalformedToken) as exc:
        tf.decrypt_stream(src, io.BytesIO(), D, N)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_decrypt_file_not_ascii(tmp_path):
    tokens, result = tmp_path / "in.txt", tmp_path / "back.bin"
    tokens.write_bytes(b"0xae6\n0x\xff\n")
    with pytest.raises(MalformedToken):
        tf.decrypt_file(RSAPublicKey(N, D, 12), tokens, result)
