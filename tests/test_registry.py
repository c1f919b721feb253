import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from checkparams import registry
from checkparams.errors import CheckValidationError
from checkparams.models import DnsCheck, HttpCheck, PingCheck, TcpCheck

REGISTRY_YAML = """
defaults:
  resolution: 5
checks:
  - type: http
    name: web
    hostname: www.example.com
    url: /health
    request_headers:
      Z: "1"
      A: "2"
  - type: ping
    name: gw
    hostname: 192.0.2.1
    resolution: 1
  - type: tcp
    name: db
    hostname: db.example.com
    port: 5432
  - type: dns
    name: resolver
    hostname: example.com
    expected_ip: 203.0.113.10
    name_server: ns1.example.com
"""


class RegistryTests(unittest.TestCase):
    def _write(self, td: str, text: str) -> Path:
        path = Path(td) / "checks.yml"
        path.write_text(text)
        return path

    def test_load_registry_builds_typed_checks(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            reg = registry.load_registry(self._write(td, REGISTRY_YAML))

        self.assertEqual(
            [type(c) for c in reg.checks], [HttpCheck, PingCheck, TcpCheck, DnsCheck]
        )
        self.assertEqual(reg.defaults.resolution, 5)

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                registry.load_registry(Path(td) / "nope.yml")

    def test_path_defaults_to_settings(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = self._write(td, REGISTRY_YAML)
            with patch.object(registry.settings, "CHECKPARAMS_REGISTRY_PATH", str(path)):
                reg = registry.load_registry()
        self.assertEqual(len(reg.checks), 4)

    def test_duplicate_names_rejected(self) -> None:
        text = """
checks:
  - {type: ping, name: gw, hostname: a}
  - {type: tcp, name: gw, hostname: b, port: 1}
"""
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ValueError):
                registry.load_registry(self._write(td, text))

    def test_unknown_type_rejected(self) -> None:
        text = "checks:\n  - {type: smtp, name: mail, hostname: a}\n"
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ValidationError):
                registry.load_registry(self._write(td, text))

    def test_apply_defaults_fills_unset_resolution_only(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            reg = registry.load_registry(self._write(td, REGISTRY_YAML))

        checks = {c.name: c for c in registry.apply_defaults(reg)}
        self.assertEqual(checks["web"].resolution, 5)
        self.assertEqual(checks["gw"].resolution, 1)
        # input registry untouched
        self.assertEqual(reg.checks[0].resolution, 0)

    def test_apply_defaults_falls_back_to_settings(self) -> None:
        reg = registry.Registry(checks=[PingCheck(name="gw", hostname="a")])
        with patch.object(registry.settings, "CHECKPARAMS_DEFAULT_RESOLUTION", 15):
            checks = registry.apply_defaults(reg)
        self.assertEqual(checks[0].resolution, 15)

    def test_build_create_requests(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            reg = registry.load_registry(self._write(td, REGISTRY_YAML))

        requests = registry.build_create_requests(reg)

        self.assertEqual(set(requests), {"web", "gw", "db", "resolver"})
        self.assertEqual(requests["web"]["type"], "http")
        self.assertEqual(requests["web"]["resolution"], "5")
        self.assertEqual(requests["web"]["requestheader0"], "A:2")
        self.assertEqual(requests["db"]["port"], "5432")
        self.assertEqual(requests["resolver"]["nameserver"], "ns1.example.com")

    def test_build_update_requests_keep_empty_values(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            reg = registry.load_registry(self._write(td, REGISTRY_YAML))

        requests = registry.build_update_requests(reg)

        self.assertNotIn("type", requests["web"])
        self.assertEqual(requests["web"]["shouldnotcontain"], "")
        self.assertEqual(requests["gw"]["teamids"], "")

    def test_build_requests_raise_on_invalid_check(self) -> None:
        reg = registry.Registry(
            checks=[
                PingCheck(name="gw", hostname="a"),
                TcpCheck(name="db", hostname="b", port=70000),
            ]
        )
        with self.assertRaises(CheckValidationError) as ctx:
            registry.build_create_requests(reg)
        self.assertIn("'db'", str(ctx.exception))
        self.assertIn("`Port`", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
