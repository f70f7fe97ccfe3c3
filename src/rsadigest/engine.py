"""The transform engine: modular exponentiation of single bytes, and the drivers applying it to streams.

Each byte of the input is one unit, transformed on its own with no padding. Encrypted units are written as
hexadecimal integer tokens, one per line, and decryption reads the same format back.

Warning! This is "textbook" RSA on single bytes, every plaintext byte maps to the same token. Do not use it to keep
anything secret.

Typical usage example:

    c = transform(65, e, n)
    with open("in.bin", "rb") as src, open("out.txt", "w", encoding="ascii") as dst:
        encrypt_stream(src, dst, e, n)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pathlib
import typing

from rsadigest.errors import InvalidArgument
from rsadigest.errors import MalformedToken

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class SupportsTransform(typing.Protocol):
    """Anything carrying a modulus and a single exponent, such as a key projection."""

    @property
    def modulus(self) -> int:
        ...

    @property
    def exponent(self) -> int:
        ...


def transform(unit: int, exponent: int, modulus: int) -> int:
    """Performs the core RSA operation on a single unit.

    Args:
        unit: The value to transform. Must be in range `[0, modulus - 1]`.
        exponent: The exponent. Must be positive.
        modulus: The modulus. Must be greater than 1.

    Returns:
        `unit**exponent mod modulus`.

    Raises:
        InvalidArgument: If any argument is out of range.
    """
    if modulus is None or modulus <= 1:
        raise InvalidArgument("Modulus must be greater than 1.")
    if exponent is None or exponent <= 0:
        raise InvalidArgument("Exponent must be positive.")
    if unit is None or not 0 <= unit < modulus:
        raise InvalidArgument("Unit must be in range [0, modulus-1].")
    return pow(unit, exponent, modulus)


def format_token(value: int) -> str:
    """Formats an integer as a `0x` prefixed lowercase hexadecimal literal."""
    return f"{value:#x}"


def parse_token(token: str) -> int:
    """Parses a hexadecimal literal, with or without a `0x` prefix.

    Args:
        token: The token to parse. Surrounding whitespace is ignored.

    Returns:
        The parsed non-negative integer.

    Raises:
        MalformedToken: If the token is not a hexadecimal literal.
    """
    digits = token.strip()
    if digits[:2] in ("0x", "0X"):
        digits = digits[2:]
    if not digits or not _HEX_DIGITS.issuperset(digits):
        raise MalformedToken(f"Malformed token: {token.strip()!r}")
    return int(digits, 16)


def encrypt_units(data: typing.Iterable[int], exponent: int, modulus: int) -> typing.Iterator[int]:
    """Transforms every byte of `data`, one result per byte."""
    for unit in data:
        yield transform(unit, exponent, modulus)


def decrypt_units(values: typing.Iterable[int], exponent: int, modulus: int) -> typing.Iterator[int]:
    """Transforms every value back, one byte per value.

    Raises:
        InvalidArgument: If a value is out of range or does not recover a byte, usually a sign of the wrong key.
    """
    for value in values:
        unit = transform(value, exponent, modulus)
        if unit > 0xff:
            raise InvalidArgument(f"Recovered unit {unit:#x} does not fit a byte.")
        yield unit


def _read_units(src: typing.BinaryIO) -> typing.Iterator[int]:
    while True:
        chunk = src.read(1)
        if not chunk:
            return
        yield chunk[0]


def encrypt_stream(src: typing.BinaryIO, dst: typing.TextIO, exponent: int, modulus: int) -> int:
    """Encrypts a byte stream into a token stream.

    Reads `src` one byte at a time until it is exhausted, writing one token line per byte.

    Args:
        src: Binary stream to read.
        dst: Text stream to write the tokens to.
        exponent: The exponent to apply.
        modulus: The modulus to apply.

    Returns:
        The number of units written.
    """
    count = 0
    for value in encrypt_units(_read_units(src), exponent, modulus):
        dst.write(format_token(value) + "\n")
        count += 1
    return count


def decrypt_stream(src: typing.TextIO, dst: typing.BinaryIO, exponent: int, modulus: int) -> int:
    """Decrypts a token stream back into a byte stream.

    Reads `src` line by line, blank lines are skipped, writing one byte per token.

    Args:
        src: Text stream of tokens.
        dst: Binary stream to write the bytes to.
        exponent: The exponent to apply.
        modulus: The modulus to apply.

    Returns:
        The number of units written.

    Raises:
        MalformedToken: If a line is not a hexadecimal token or the stream is not ASCII text.
        InvalidArgument: If a token does not decrypt to a byte.
    """
    count = 0
    try:
        for line in src:
            if not line.strip():
                continue
            value = parse_token(line)
            for unit in decrypt_units((value,), exponent, modulus):
                dst.write(bytes((unit,)))
            count += 1
    except UnicodeDecodeError as err:
        raise MalformedToken(f"Token stream is not ASCII text: {err.reason}") from err
    return count


def encrypt_file(key: SupportsTransform, source: pathlib.Path, destination: pathlib.Path) -> int:
    """Encrypts the file at `source` into a token file at `destination` with the exponent/modulus of `key`."""
    with open(source, "rb") as src, open(destination, "w", encoding="ascii") as dst:
        return encrypt_stream(src, dst, key.exponent, key.modulus)


def decrypt_file(key: SupportsTransform, source: pathlib.Path, destination: pathlib.Path) -> int:
    """Decrypts the token file at `source` into `destination` with the exponent/modulus of `key`."""
    with open(source, "r", encoding="ascii") as src, open(destination, "wb") as dst:
        return decrypt_stream(src, dst, key.exponent, key.modulus)
