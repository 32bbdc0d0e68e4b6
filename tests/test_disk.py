from types import SimpleNamespace
from unittest import mock

import pytest

from barstatus.components.disk import disk_free, disk_perc, disk_total, disk_used
from barstatus.util import ComponentError, fmt_human

FAKE_FS = SimpleNamespace(f_frsize=4096, f_blocks=1000, f_bfree=400, f_bavail=250)


@pytest.fixture
def fake_fs():
    with mock.patch("os.statvfs", return_value=FAKE_FS):
        yield


def test_disk_perc(fake_fs):
    assert disk_perc("/") == "75"


def test_disk_total(fake_fs):
    assert disk_total("/") == fmt_human(4096 * 1000, 1024)


def test_disk_free(fake_fs):
    assert disk_free("/") == fmt_human(4096 * 250, 1024)


def test_disk_used(fake_fs):
    assert disk_used("/") == fmt_human(4096 * 600, 1024)


def test_disk_perc_no_blocks():
    empty = SimpleNamespace(f_frsize=4096, f_blocks=0, f_bfree=0, f_bavail=0)
    with mock.patch("os.statvfs", return_value=empty):
        with pytest.raises(ComponentError):
            disk_perc("/")


def test_disk_perc_real_root_in_range():
    assert 0 <= int(disk_perc("/")) <= 100


@pytest.mark.parametrize("func", [disk_free, disk_perc, disk_total, disk_used])
def test_missing_path(tmp_path, func):
    with pytest.raises(ComponentError):
        func(str(tmp_path / "missing"))