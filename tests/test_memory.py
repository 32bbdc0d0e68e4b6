import pytest

from barstatus.components import memory
from barstatus.util import ComponentError, fmt_human

SAMPLE = """\
MemTotal:       16000000 kB
MemFree:         4000000 kB
MemAvailable:    9000000 kB
SwapCached:          999 kB
Buffers:         1000000 kB
Cached:          3000000 kB
SwapTotal:       2000000 kB
SwapFree:        1000000 kB
Shmem:                 0 kB
SReclaimable:          0 kB
"""


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    monkeypatch.setattr(memory, "MEMINFO", str(path))

    def write(text):
        path.write_text(text)
        return str(path)

    return write


def test_ram_free(meminfo):
    meminfo(SAMPLE)
    assert memory.ram_free() == fmt_human(4000000 * 1024, 1024)


def test_ram_total(meminfo):
    meminfo(SAMPLE)
    assert memory.ram_total() == fmt_human(16000000 * 1024, 1024)


def test_ram_total_requires_first_line(meminfo):
    meminfo("MemFree: 1 kB\n" + SAMPLE)
    with pytest.raises(ComponentError):
        memory.ram_total()


def test_ram_used_ignores_swap_cached(meminfo):
    meminfo(SAMPLE)
    assert memory.ram_used() == fmt_human(8000000 * 1024, 1024)


def test_ram_perc(meminfo):
    meminfo(SAMPLE)
    assert memory.ram_perc() == "50"


def test_ram_perc_is_bounded(meminfo):
    meminfo(SAMPLE.replace("MemFree:         4000000", "MemFree:         1234567"))
    assert 0 <= int(memory.ram_perc()) <= 100


def test_ram_perc_zero_total_raises(meminfo):
    meminfo(SAMPLE.replace("MemTotal:       16000000", "MemTotal:       0"))
    with pytest.raises(ComponentError):
        memory.ram_perc()


def test_ram_perc_missing_field_raises(meminfo):
    meminfo(SAMPLE.replace("Shmem:                 0 kB\n", ""))
    with pytest.raises(ComponentError):
        memory.ram_perc()


def test_missing_meminfo_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(memory, "MEMINFO", str(tmp_path / "absent"))
    with pytest.raises(ComponentError):
        memory.ram_free()


def test_read_swap_info(meminfo):
    path = meminfo(SAMPLE)
    info = memory.read_swap_info(path)
    assert info == (2000000, 1000000, 999)
    assert info.used == 2000000 - 1000000 - 999


def test_read_swap_info_missing_field_raises(meminfo):
    path = meminfo(SAMPLE.replace("SwapFree:        1000000 kB\n", ""))
    with pytest.raises(ComponentError):
        memory.read_swap_info(path)


def test_swap_free_and_total(meminfo):
    meminfo(SAMPLE)
    assert memory.swap_free() == fmt_human(1000000 * 1024, 1024)
    assert memory.swap_total() == fmt_human(2000000 * 1024, 1024)


def test_swap_used(meminfo):
    meminfo(SAMPLE)
    assert memory.swap_used() == fmt_human((2000000 - 1000000 - 999) * 1024, 1024)


def test_swap_perc(meminfo):
    meminfo(SAMPLE.replace("SwapCached:          999", "SwapCached:            0"))
    assert memory.swap_perc() == "50"


def test_swap_perc_without_swap_raises(meminfo):
    meminfo(
        SAMPLE.replace("SwapTotal:       2000000", "SwapTotal:       0").replace(
            "SwapFree:        1000000", "SwapFree:        0"
        )
    )
    with pytest.raises(ComponentError):
        memory.swap_perc()