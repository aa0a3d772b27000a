"""Tests for the python -m handlergen entry point."""

import logging

import pytest

import handlergen.__main__ as entry
from handlergen.errors import DecodeError, WriteError


class TestMain:
    def test_success(self, monkeypatch):
        calls = []
        monkeypatch.setattr(entry, "generate", lambda ctx: calls.append(ctx))

        entry.main()

        assert len(calls) == 1
        assert calls[0]["handler_count"] == 40

    def test_decode_failure_exits_nonzero(self, monkeypatch, caplog):
        def fail(path=None):
            raise DecodeError("invalid discovery document: boom")

        monkeypatch.setattr(entry, "load_spec", fail)
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            entry.main()

        assert exc_info.value.code == 1
        assert "generation failed" in caplog.text
        assert "boom" in caplog.text

    def test_write_failure_exits_nonzero(self, monkeypatch):
        def fail(ctx):
            raise WriteError("cannot write server/handler_gen.py")

        monkeypatch.setattr(entry, "generate", fail)
        with pytest.raises(SystemExit) as exc_info:
            entry.main()
        assert exc_info.value.code == 1
