import pytest

from sbrcs.observation import Observation, ObservationArray
from sbrcs.vector import Vec3


def _sample():
    return ObservationArray(
        [
            Observation(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0), 1.0e9, 10),
            Observation(Vec3(0.0, -1.0, 0.5), Vec3(0.25, 0.0, 0.0), 2048.0, 3),
        ]
    )


def test_round_trip_bytes():
    array = _sample()
    assert ObservationArray.from_bytes(array.to_bytes()) == array


def test_empty_array_bytes():
    assert ObservationArray().to_bytes() == b"\x00\x00\x00\x00"
    assert len(ObservationArray.from_bytes(b"\x00\x00\x00\x00")) == 0


def test_record_size_and_count():
    raw = _sample().to_bytes()
    assert raw[:4] == b"\x02\x00\x00\x00"
    assert len(raw) == 4 + 2 * 32


def test_len():
    assert len(_sample()) == 2


def test_trailing_bytes_are_ignored():
    array = _sample()
    assert ObservationArray.from_bytes(array.to_bytes() + b"xyz") == array


def test_truncated_data_is_rejected():
    with pytest.raises(ValueError):
        ObservationArray.from_bytes(_sample().to_bytes()[:-4])
    with pytest.raises(ValueError):
        ObservationArray.from_bytes(b"")


def test_save_and_load(tmp_path):
    path = tmp_path / "obs.obs"
    array = _sample()
    array.save(path)
    assert ObservationArray.load(path) == array