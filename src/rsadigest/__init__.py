"""Textbook RSA key generation and byte-wise RSA transforms in an Academic Sense.

Provides RSA key generation (Solovay-Strassen probable primes, fixed public exponent 65537), the public and private
projections of a key, PEM key files, and the encryption/decryption of byte streams one byte at a time into
hexadecimal token lines. No padding is applied, so none of this is secure.

Typical usage example:

    key = generate_key(1024)
    pub, priv = derive_public(key), derive_private(key)
    c = transform(65, priv.exponent, priv.modulus)
    m = transform(c, pub.exponent, pub.modulus)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsadigest.engine import decrypt_file
from rsadigest.engine import decrypt_stream
from rsadigest.engine import encrypt_file
from rsadigest.engine import encrypt_stream
from rsadigest.engine import transform
from rsadigest.errors import ArithmeticInvariantViolation
from rsadigest.errors import GenerationExhausted
from rsadigest.errors import GenerationFailure
from rsadigest.errors import InvalidArgument
from rsadigest.errors import MalformedToken
from rsadigest.errors import RSADigestError
from rsadigest.keygen import generate_e_d
from rsadigest.keygen import generate_n_p_q
from rsadigest.keygen import is_probable_prime
from rsadigest.rsa import derive_private
from rsadigest.rsa import derive_public
from rsadigest.rsa import generate_key
from rsadigest.rsa import RSAKey
from rsadigest.rsa import RSAPrivateKey
from rsadigest.rsa import RSAPublicKey

__version__ = "0.0.1"
__all__ = [
    "RSAKey",
    "RSAPublicKey",
    "RSAPrivateKey",
    "generate_key",
    "derive_public",
    "derive_private",
    "is_probable_prime",
    "generate_n_p_q",
    "generate_e_d",
    "transform",
    "encrypt_stream",
    "decrypt_stream",
    "encrypt_file",
    "decrypt_file",
    "RSADigestError",
    "InvalidArgument",
    "ArithmeticInvariantViolation",
    "GenerationFailure",
    "GenerationExhausted",
    "MalformedToken",
]
