# tests/test_app.py
"""
Entry Point Tests - Unit Tests for the One-shot CLI and Logging Setup

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- coinquote.app (main)
- coinquote.shared.logging_conf (setup_logging)
- unittest.mock (patching the transport session)
"""
import logging

import requests

from requests import Session
from unittest.mock import Mock, patch

from coinquote import app
from coinquote.shared.logging_conf import setup_logging

from tests.conftest import make_error_body, make_requests_response, make_ticker_body


def fake_session(status_code=200, text=""):
    session = Mock(spec=Session)
    session.get.return_value = make_requests_response(status_code, text, "http://localhost/")
    return session


class TestMain:
    @patch('coinquote.app.setup_logging')
    @patch('coinquote.adapters.http.transport.requests.Session')
    def test_prints_rate(self, mock_session_cls, mock_setup_logging, capsys):
        mock_session_cls.return_value = fake_session(text=make_ticker_body("XMR", "EUR", 1.56))

        assert app.main(["XMR", "EUR"]) == 0

        assert "1 XMR = 1.56 EUR" in capsys.readouterr().out
        mock_setup_logging.assert_called_once()
        params = mock_session_cls.return_value.get.call_args.kwargs["params"]
        assert params == {"convert": "EUR"}

    @patch('coinquote.app.setup_logging')
    @patch('coinquote.adapters.http.transport.requests.Session')
    def test_service_error_exit_code(self, mock_session_cls, mock_setup_logging, capsys):
        mock_session_cls.return_value = fake_session(text=make_error_body())

        assert app.main(["XMR", "ABC"]) == 1
        assert capsys.readouterr().out == ""

    @patch('coinquote.app.setup_logging')
    @patch('coinquote.adapters.http.transport.requests.Session')
    def test_transport_error_exit_code(self, mock_session_cls, mock_setup_logging):
        session = Mock(spec=Session)
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        mock_session_cls.return_value = session

        assert app.main(["XMR", "EUR"]) == 1


class TestSetupLogging:
    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "coinquote.log"
        root = logging.getLogger()
        saved, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level="DEBUG", log_file=log_file, log_stdout=False)
            logging.getLogger("coinquote.test").info("hello")
            for handler in root.handlers:
                handler.flush()

            assert root.level == logging.DEBUG
            assert "INFO coinquote.test :: hello" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = saved
            root.setLevel(saved_level)
