"""Tests for the persisted settings record."""

import orjson
import pytest

from envsettings.settings import DetailLevel, RecordFormatError, SettingsRecord, SettingsValidator


class TestSettingsRecord:
    """Test defaults and JSON encoding."""

    def test_defaults(self) -> None:
        record = SettingsRecord.default(full_screen=True)
        assert record.music_volume == 1.0
        assert record.sound_volume == 1.0
        assert record.resolution_level is DetailLevel.MAX
        assert record.full_screen is True
        assert record.post_processing is True

    def test_json_fields(self) -> None:
        record = SettingsRecord(0.5, 0.25, DetailLevel.MIDDLE, False, True)
        assert orjson.loads(record.to_json()) == {
            "musicVolume": 0.5,
            "soundVolume": 0.25,
            "resolutionLevel": 2,
            "fullScreen": False,
            "postProcessing": True,
        }

    def test_round_trip(self) -> None:
        record = SettingsRecord(0.3, 0.7, DetailLevel.LOW, True, False)
        assert SettingsRecord.from_json(record.to_json()) == record

    def test_integer_volume_accepted(self) -> None:
        raw = b'{"musicVolume": 1, "soundVolume": 0, "resolutionLevel": 1, "fullScreen": false, "postProcessing": true}'
        record = SettingsRecord.from_json(raw)
        assert record.music_volume == 1.0
        assert record.resolution_level is DetailLevel.HIGH

    def test_out_of_range_volume_loaded_verbatim(self) -> None:
        raw = b'{"musicVolume": 3.5, "soundVolume": -1, "resolutionLevel": 0, "fullScreen": true, "postProcessing": true}'
        record = SettingsRecord.from_json(raw)
        assert record.music_volume == 3.5
        assert record.sound_volume == -1.0

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"not json",
            b"[1, 2, 3]",
            b'{"musicVolume": 1.0}',
            b'{"musicVolume": 1.0, "soundVolume": 1.0, "resolutionLevel": 0, "fullScreen": true, "postProcessing": true, "extra": 1}',
            b'{"musicVolume": "loud", "soundVolume": 1.0, "resolutionLevel": 0, "fullScreen": true, "postProcessing": true}',
            b'{"musicVolume": 1.0, "soundVolume": 1.0, "resolutionLevel": 7, "fullScreen": true, "postProcessing": true}',
            b'{"musicVolume": 1.0, "soundVolume": 1.0, "resolutionLevel": 0, "fullScreen": 1, "postProcessing": true}',
        ],
    )
    def test_malformed_documents(self, raw: bytes) -> None:
        with pytest.raises(RecordFormatError):
            SettingsRecord.from_json(raw)


class TestSettingsValidator:
    """Test the value range report."""

    def test_valid_record(self) -> None:
        result = SettingsValidator().validate(SettingsRecord())
        assert result.is_valid
        assert result.warnings == []

    def test_zero_and_loud_volumes_warn(self) -> None:
        result = SettingsValidator().validate(SettingsRecord(music_volume=0.0, sound_volume=2.0))
        assert result.is_valid
        assert len(result.warnings) == 2

    def test_nan_volume_is_error(self) -> None:
        result = SettingsValidator().validate(SettingsRecord(music_volume=float("nan")))
        assert not result.is_valid
        assert result.errors == ["music_volume is not a number"]


class TestDetailLevel:
    """Test the detail level enumeration."""

    def test_ordinals(self) -> None:
        assert [int(level) for level in DetailLevel] == [0, 1, 2, 3]

    def test_labels(self) -> None:
        assert [level.label for level in DetailLevel] == ["Max", "High", "Middle", "Low"]
