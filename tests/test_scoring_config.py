import unittest
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config.scoring import get_scoring_config, get_scoring_value, load_scoring_config


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("ats.weights.format"), 0.4)
        self.assertEqual(get_scoring_value("keywords.max_contexts"), 3)

    def test_missing_key_falls_back_to_default(self):
        self.assertEqual(get_scoring_value("ats.weights.unknown", 7), 7)
        self.assertIsNone(get_scoring_value("nothing.here"))
        self.assertEqual(get_scoring_value("ats.weights.format.deeper", "x"), "x")

    def test_weights_sum_to_one(self):
        weights = get_scoring_value("ats.weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0)
        format_weights = get_scoring_value("format.weights")
        self.assertAlmostEqual(sum(format_weights.values()), 1.0)

    def test_load_errors(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with self.assertRaises(RuntimeError):
                load_scoring_config(root / "missing.yaml")

            broken = root / "broken.yaml"
            broken.write_text("ats: [unclosed", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(broken)

            listing = root / "list.yaml"
            listing.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(listing)


if __name__ == "__main__":
    unittest.main()
