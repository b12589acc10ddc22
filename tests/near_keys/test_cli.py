"""Tests for the command line entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from near_keys.__main__ import ColoredFormatter, main
from near_keys.serialize import base_decode
from tests.near_keys.helpers import PUBLIC_A, PUBLIC_B, SECRET_A


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """main() installs a handler on the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _sign(capsys: pytest.CaptureFixture[str], message: str) -> str:
    assert main(["sign", f"ed25519:{SECRET_A}", message]) == 0
    return capsys.readouterr().out.strip()


class TestGenerate:
    """Tests for `generate`."""

    def test_prints_secret_and_public_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["generate"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("secret_key: ed25519:")
        assert lines[1].startswith("public_key: ed25519:")

    def test_curve_ignores_case(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["generate", "--curve", "ED25519"]) == 0
        assert "public_key: ed25519:" in capsys.readouterr().out

    def test_unknown_curve(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["--no-color", "generate", "--curve", "secp256k1"]) == 2
        assert "Unknown curve secp256k1" in caplog.text


class TestPublicKey:
    """Tests for `public-key`."""

    def test_prints_public_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["public-key", SECRET_A]) == 0
        assert capsys.readouterr().out.strip() == PUBLIC_A

    def test_malformed_key(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["public-key", "a:b:c"]) == 2
        assert "must be <curve>:<encoded key>" in caplog.text


class TestSignVerify:
    """Tests for `sign` and `verify`."""

    def test_signature_is_base58(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert len(base_decode(_sign(capsys, "hello"))) == 64

    def test_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        signature = _sign(capsys, "hello")

        assert main(["verify", PUBLIC_A, "hello", signature]) == 0
        assert capsys.readouterr().out.strip() == "valid"

    def test_invalid(self, capsys: pytest.CaptureFixture[str]) -> None:
        signature = _sign(capsys, "hello")

        assert main(["verify", PUBLIC_B, "hello", signature]) == 1
        assert capsys.readouterr().out.strip() == "invalid"

    def test_bad_signature_encoding(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["verify", PUBLIC_A, "hello", "0OIl"]) == 2
        assert "Invalid Base58 encoding" in caplog.text


def test_missing_command_exits() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


class TestColoredFormatter:
    """Tests for the stderr diagnostic format."""

    RECORD = logging.LogRecord("near_keys", logging.ERROR, __file__, 1, "boom %s", ("x",), None)

    def test_default_is_level_and_message(self) -> None:
        output = ColoredFormatter().format(self.RECORD)

        assert output == f"{ColoredFormatter.RED}error{ColoredFormatter.RESET}: boom x"

    def test_without_color(self) -> None:
        assert ColoredFormatter(use_color=False).format(self.RECORD) == "error: boom x"

    def test_details_add_logger_name(self) -> None:
        output = ColoredFormatter(show_details=True, use_color=False).format(self.RECORD)

        assert output.endswith(" near_keys error: boom x")
        assert "\x1b[" not in output

    def test_unstyled_level_is_plain(self) -> None:
        record = logging.LogRecord("near_keys", logging.INFO, __file__, 1, "note", None, None)
        assert ColoredFormatter().format(record) == "info: note"
