import pytest

from barstatus.components.temperature import temp
from barstatus.util import ComponentError


@pytest.mark.parametrize("content, expected", [("45000\n", "45"), ("45999\n", "45"), ("999", "0")])
def test_temp_truncates_millidegrees(tmp_path, content, expected):
    sensor = tmp_path / "temp"
    sensor.write_text(content)
    assert temp(str(sensor)) == expected


def test_temp_missing_file_raises(tmp_path):
    with pytest.raises(ComponentError):
        temp(str(tmp_path / "absent"))


def test_temp_garbage_raises(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("hot\n")
    with pytest.raises(ComponentError):
        temp(str(sensor))