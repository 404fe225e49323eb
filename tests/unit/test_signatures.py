"""
Ed25519 Signature Unit Tests
Tests for core/crypto/signatures.py
"""
import pytest
from nacl.bindings import crypto_core_ed25519_add
from nacl.signing import VerifyKey

from core.crypto.signatures import (
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    KeyLengthError,
    KeyMaterialError,
    Signature,
    is_valid_public_key,
    load_verify_key,
    verify,
)

from fixtures import flip_bit, make_signing_key, public_key_bytes


# Encodings rejected by the point validity check: the all-zero point and the
# identity have small order, all-0xff is not a canonical field element.
INVALID_POINTS = [
    bytes(32),
    b"\x01" + bytes(31),
    b"\xff" * 32,
]

# (0, -1), the point of order 2.
ORDER_TWO_POINT = b"\xec" + b"\xff" * 30 + b"\x7f"


class TestIsValidPublicKey:

    def test_generated_key_is_valid(self, alice_key):
        assert is_valid_public_key(public_key_bytes(alice_key))

    @pytest.mark.parametrize("raw", INVALID_POINTS)
    def test_invalid_points_rejected(self, raw):
        assert not is_valid_public_key(raw)

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_wrong_length_rejected(self, length):
        assert not is_valid_public_key(b"\x02" * length)


class TestLoadVerifyKey:

    def test_returns_verify_key(self, alice_key):
        vk = load_verify_key(public_key_bytes(alice_key))

        assert isinstance(vk, VerifyKey)
        assert bytes(vk) == public_key_bytes(alice_key)

    def test_wrong_length_raises(self):
        with pytest.raises(KeyLengthError) as exc_info:
            load_verify_key(b"\x02" * 31)

        assert exc_info.value.actual == 31
        assert str(PUBLIC_KEY_LENGTH) in str(exc_info.value)

    @pytest.mark.parametrize("raw", INVALID_POINTS)
    def test_invalid_point_raises(self, raw):
        with pytest.raises(KeyMaterialError):
            load_verify_key(raw)

    def test_torsion_component_raises(self, alice_key):
        mixed = crypto_core_ed25519_add(public_key_bytes(alice_key), ORDER_TWO_POINT)

        assert mixed != public_key_bytes(alice_key)
        with pytest.raises(KeyMaterialError):
            load_verify_key(mixed)


class TestSignature:

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError, match="signature length"):
            Signature(b"\x00" * (SIGNATURE_LENGTH - 1))

    def test_scheme_default(self):
        assert Signature(b"\x00" * SIGNATURE_LENGTH).scheme == "ed25519"


class TestVerify:

    def test_valid_signature(self, alice_key):
        sig = Signature(alice_key.sign(b"hello").signature)
        vk = load_verify_key(public_key_bytes(alice_key))

        assert verify(b"hello", sig, vk) is True

    def test_wrong_message(self, alice_key):
        sig = Signature(alice_key.sign(b"hello").signature)
        vk = load_verify_key(public_key_bytes(alice_key))

        assert verify(b"hellp", sig, vk) is False

    def test_wrong_key(self, alice_key, mallory_key):
        sig = Signature(mallory_key.sign(b"hello").signature)
        vk = load_verify_key(public_key_bytes(alice_key))

        assert verify(b"hello", sig, vk) is False

    @pytest.mark.parametrize("index", [0, 31, 32, 63])
    def test_flipped_signature_bit(self, alice_key, index):
        raw = alice_key.sign(b"hello").signature
        sig = Signature(flip_bit(raw, index, bit=7 if index == 63 else 0))
        vk = load_verify_key(public_key_bytes(alice_key))

        assert verify(b"hello", sig, vk) is False

    def test_deterministic_signing_seed(self):
        assert public_key_bytes(make_signing_key()) == public_key_bytes(make_signing_key())
