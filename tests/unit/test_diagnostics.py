import json
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from oracle_core.config import load_config
from oracle_core.diagnostics import build_doctor_payload


class DiagnosticsTests(unittest.TestCase):
    def test_doctor_payload(self):
        cfg = load_config(Path("/tmp/nonexistent-oracle-config.json"))
        payload = build_doctor_payload(cfg)
        self.assertIn("platform", payload)
        self.assertIn("numpy", payload["libraries"])
        self.assertEqual(payload["config"]["display"]["width"], 240)
        json.dumps(payload)


if __name__ == "__main__":
    unittest.main()
