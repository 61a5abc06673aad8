"""Tests for loading DateTime values from JSON fixtures."""

from __future__ import annotations

import pytest

from conftest import DATETIMES_JSON, write_json


class TestLoadDatetimesJson:

    def test_load_fixture(self):
        from datetime_primitives.date import DateTime
        from datetime_primitives.loaders import load_datetimes_json

        values = load_datetimes_json(DATETIMES_JSON)
        assert set(values) == {"release", "followup", "midnight"}
        assert values["release"] == DateTime.parse("2020-09-24T13:21:00")
        assert str(values["midnight"]) == "2021-01-01T00:00:00"

    def test_bare_mapping(self, tmp_path):
        from datetime_primitives.loaders import load_datetimes_json

        path = write_json(tmp_path / "bare.json", {"x": "2020-01-02T03:04:05"})
        values = load_datetimes_json(str(path))
        assert int(values["x"].day) == 1

    def test_invalid_entries_listed(self, tmp_path):
        from datetime_primitives.loaders import load_datetimes_json

        path = write_json(tmp_path / "bad.json", {
            "datetimes": {
                "good": "2020-01-02T03:04:05",
                "bad_month": "2020-13-02T03:04:05",
                "bad_text": "2020-01-XXT03:04:05",
            }
        })
        with pytest.raises(ValueError) as exc_info:
            load_datetimes_json(path)
        message = str(exc_info.value)
        assert message.startswith("Validation errors in bad.json:")
        assert "bad_month: Month must be between 0-12" in message
        assert "bad_text:" in message
        assert "good" not in message

    def test_not_a_mapping(self, tmp_path):
        from datetime_primitives.loaders import load_datetimes_json

        path = write_json(tmp_path / "list.json", ["2020-01-02T03:04:05"])
        with pytest.raises(ValueError, match="expected a mapping"):
            load_datetimes_json(path)

    def test_load_is_logged(self, caplog):
        import logging

        from datetime_primitives.loaders import load_datetimes_json

        with caplog.at_level(logging.DEBUG, logger="datetime_primitives.loaders"):
            load_datetimes_json(DATETIMES_JSON)
        assert "Loaded 3 date-times" in caplog.text
