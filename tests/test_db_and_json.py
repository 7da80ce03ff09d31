import os
import json
import tempfile
import unittest

os.environ.setdefault("PRISMFLOW_DB", os.path.join(tempfile.gettempdir(), "prismflow-test.db"))

from app import json_to_tubes, tube_to_json, tubes_to_json, BadPayload  # noqa: E402
from game import (  # noqa: E402
    Settings,
    Tube,
    load_progress,
    save_progress,
)


class TestDbAndJson(unittest.TestCase):
    def test_given_tubes_when_roundtrip_json_then_equal(self):
        tubes = (Tube(0, ("rose", "cyan")), Tube(1, ()))
        as_json = tubes_to_json(tubes)
        self.assertEqual(as_json[0], {"id": 0, "layers": ["rose", "cyan"]})
        self.assertEqual(tube_to_json(tubes[1]), {"id": 1, "layers": []})
        back = json_to_tubes(json.loads(json.dumps(as_json)))
        self.assertEqual(back, tubes)

        # Bare layer lists get positional ids
        back2 = json_to_tubes([["rose"], []])
        self.assertEqual(back2, (Tube(0, ("rose",)), Tube(1, ())))

    def test_given_bad_tubes_when_decoding_then_bad_payload(self):
        with self.assertRaises(BadPayload):
            json_to_tubes({"not": "a list"})
        with self.assertRaises(BadPayload):
            json_to_tubes([{"id": 0, "layers": "rose"}])
        with self.assertRaises(BadPayload):
            json_to_tubes([["rose"] * 5])

    def test_given_bad_ids_or_non_string_layers_when_decoding_then_bad_payload(self):
        for bad_id in ("x", None, [1]):
            with self.assertRaises(BadPayload):
                json_to_tubes([{"id": bad_id, "layers": []}])
        with self.assertRaises(BadPayload):
            json_to_tubes([[None, None, None, None], []])
        with self.assertRaises(BadPayload):
            json_to_tubes([{"id": 0, "layers": ["rose", 3]}])

    def test_given_empty_db_when_loading_then_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            db_path = os.path.join(td, "prismflow.db")
            level, settings = load_progress(db_path)
            self.assertEqual(level, 1)
            self.assertEqual(settings, Settings())

    def test_given_saved_progress_when_loading_then_returns_saved_values(self):
        with tempfile.TemporaryDirectory() as td:
            db_path = os.path.join(td, "prismflow.db")
            saved = Settings(sound=False, vibration=True, theme="neon")
            save_progress(db_path, 17, saved)
            save_progress(db_path, 18, saved)
            level, settings = load_progress(db_path)
            self.assertEqual(level, 18)
            self.assertEqual(settings, saved)

    def test_given_nested_path_when_saving_then_directories_created(self):
        with tempfile.TemporaryDirectory() as td:
            nested = os.path.join(td, "deep", "nest", "file.db")
            save_progress(nested, 3, Settings())
            self.assertTrue(os.path.isfile(nested))
            self.assertEqual(load_progress(nested)[0], 3)

    def test_given_invalid_values_when_saving_or_building_settings_then_value_error(self):
        with self.assertRaises(ValueError):
            Settings(theme="sepia")
        with self.assertRaises(ValueError):
            Settings.from_json("neon")
        with self.assertRaises(ValueError):
            Settings.from_json({"sound": "false"})
        with self.assertRaises(ValueError):
            Settings.from_json({"vibration": 0})
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ValueError):
                save_progress(os.path.join(td, "p.db"), 0, Settings())

    def test_given_partial_json_when_building_settings_then_defaults_fill_in(self):
        s = Settings.from_json({"theme": "pastel", "sound": False})
        self.assertEqual(s, Settings(sound=False, vibration=True, theme="pastel"))
        self.assertEqual(Settings.from_json(None).to_json(), {"sound": True, "vibration": True, "theme": "vibrant"})


if __name__ == "__main__":
    unittest.main(verbosity=2)
