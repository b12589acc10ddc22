"""Tests for the key type registry."""

import pytest

from near_keys.key_type import KEY_LENGTHS, KeyType, key_type_to_str, str_to_key_type
from near_keys.types import UnknownCurveError, UnknownKeyTypeError


class TestKeyType:
    """Tests for the KeyType enum and its tags."""

    def test_ed25519_value(self) -> None:
        assert KeyType.ED25519 == 0

    def test_tag_is_lowercase(self) -> None:
        assert KeyType.ED25519.tag == "ed25519"
        assert key_type_to_str(KeyType.ED25519) == "ed25519"

    def test_numeric_value_accepted(self) -> None:
        assert key_type_to_str(0) == "ed25519"

    @pytest.mark.parametrize("value", [1, 2, -1, 255])
    def test_unknown_numeric_value_rejected(self, value: int) -> None:
        with pytest.raises(UnknownKeyTypeError) as excinfo:
            key_type_to_str(value)
        assert excinfo.value.key_type == value

    @pytest.mark.parametrize("tag", ["ed25519", "ED25519", "Ed25519", "eD25519"])
    def test_tag_lookup_ignores_case(self, tag: str) -> None:
        assert str_to_key_type(tag) is KeyType.ED25519
        assert KeyType.from_tag(tag) is KeyType.ED25519

    @pytest.mark.parametrize("tag", ["", "secp256k1", "ed448", "ed25519 ", "rsa"])
    def test_unknown_tag_rejected(self, tag: str) -> None:
        with pytest.raises(UnknownKeyTypeError, match="Unknown key type"):
            str_to_key_type(tag)

    def test_registry_is_bijective(self) -> None:
        tags = [key_type.tag for key_type in KeyType]
        assert len(set(tags)) == len(tags)
        for key_type in KeyType:
            assert str_to_key_type(key_type_to_str(key_type)) is key_type

    def test_every_key_type_has_a_length(self) -> None:
        assert set(KEY_LENGTHS) == set(KeyType)
        assert KEY_LENGTHS[KeyType.ED25519] == 32


class TestFromCurve:
    """Tests for curve name lookup used by the key pair factories."""

    def test_known_curve(self) -> None:
        assert KeyType.from_curve("ED25519") is KeyType.ED25519

    def test_unknown_curve(self) -> None:
        with pytest.raises(UnknownCurveError, match="Unknown curve secp256k1"):
            KeyType.from_curve("secp256k1")

    def test_unknown_curve_is_unknown_key_type(self) -> None:
        """Callers handling UnknownKeyTypeError also see unknown curves."""
        with pytest.raises(UnknownKeyTypeError):
            KeyType.from_curve("secp256k1")
