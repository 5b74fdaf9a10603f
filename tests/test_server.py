import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from pydantic import ValidationError

from risk_engine import server
from risk_engine.config.settings import get_settings
from risk_engine.main import app


class ServerBootstrapTest(unittest.TestCase):
    def setUp(self):
        get_settings.cache_clear()

    def tearDown(self):
        get_settings.cache_clear()

    def test_main_binds_configured_address(self):
        out = io.StringIO()
        with patch.dict(os.environ, {"RISK_ADDR": "127.0.0.1:18081"}, clear=True):
            with patch("risk_engine.server.uvicorn.run") as run_mock, redirect_stdout(out):
                server.main()

        run_mock.assert_called_once_with(app, host="127.0.0.1", port=18081, log_level="info")
        self.assertIn("[SERVER][bind] host=127.0.0.1 port=18081", out.getvalue())

    def test_main_defaults_to_all_interfaces(self):
        with patch.dict(os.environ, {}, clear=True):
            with patch("risk_engine.server.uvicorn.run") as run_mock, redirect_stdout(io.StringIO()):
                server.main()

        _, kwargs = run_mock.call_args
        self.assertEqual(kwargs["host"], "0.0.0.0")
        self.assertEqual(kwargs["port"], 8081)

    def test_invalid_addr_aborts_before_serving(self):
        with patch.dict(os.environ, {"RISK_ADDR": "nowhere"}, clear=True):
            with patch("risk_engine.server.uvicorn.run") as run_mock:
                with self.assertRaises(ValidationError):
                    server.main()

        run_mock.assert_not_called()


if __name__ == "__main__":
    unittest.main()
