import socket
from collections import namedtuple
from unittest.mock import patch

import psutil
import pytest

from barstatus.components import network
from barstatus.components.network import NetSpeed, ipv4, ipv6, netspeed_rx, up
from barstatus.util import ComponentError

Addr = namedtuple("Addr", "family address netmask broadcast ptp")
Stats = namedtuple("Stats", "isup duplex speed mtu")

ADDRS = {
    "eth0": [
        Addr(psutil.AF_LINK, "00:00:5e:00:53:01", None, None, None),
        Addr(socket.AF_INET, "192.0.2.10", "255.255.255.0", None, None),
        Addr(socket.AF_INET6, "2001:db8::1", None, None, None),
        Addr(socket.AF_INET, "192.0.2.11", "255.255.255.0", None, None),
    ],
    "wlan0": [Addr(socket.AF_INET6, "2001:db8::2", None, None, None)],
}


def test_ipv4_returns_first_inet_address():
    with patch("psutil.net_if_addrs", return_value=ADDRS):
        assert ipv4("eth0") == "192.0.2.10"


def test_ipv6_returns_inet6_address():
    with patch("psutil.net_if_addrs", return_value=ADDRS):
        assert ipv6("eth0") == "2001:db8::1"


def test_ipv4_missing_family_raises():
    with patch("psutil.net_if_addrs", return_value=ADDRS):
        with pytest.raises(ComponentError):
            ipv4("wlan0")


def test_ip_unknown_interface_raises():
    with patch("psutil.net_if_addrs", return_value=ADDRS):
        with pytest.raises(ComponentError):
            ipv6("nope0")


@pytest.mark.parametrize("isup, expected", [(True, "up"), (False, "down")])
def test_up_reports_link_state(isup, expected):
    stats = {"eth0": Stats(isup, 0, 0, 1500)}
    with patch("psutil.net_if_stats", return_value=stats):
        assert up("eth0") == expected


def test_up_unknown_interface_raises():
    with patch("psutil.net_if_stats", return_value={}):
        with pytest.raises(ComponentError):
            up("eth0")


@pytest.fixture
def counters(tmp_path, monkeypatch):
    template = str(tmp_path / "{interface}" / "{direction}_bytes")
    monkeypatch.setattr(network, "NET_BYTES", template)
    (tmp_path / "eth0").mkdir()

    def write(direction, value):
        (tmp_path / "eth0" / f"{direction}_bytes").write_text(f"{value}\n")

    return write


def test_first_sample_raises_then_rate_follows(counters):
    speed = NetSpeed("rx", 1000)
    counters("rx", 1000)
    with pytest.raises(ComponentError):
        speed.sample("eth0")
    counters("rx", 1000 + 2048)
    assert speed.sample("eth0") == "2.0 Ki"


def test_rate_uses_interval(counters):
    speed = NetSpeed("tx", 500)
    counters("tx", 5000)
    with pytest.raises(ComponentError):
        speed.sample("eth0")
    counters("tx", 5000 + 2048)
    assert speed.sample("eth0") == "4.0 Ki"


def test_unchanged_counter_gives_zero(counters):
    speed = NetSpeed("rx")
    counters("rx", 77)
    with pytest.raises(ComponentError):
        speed.sample("eth0")
    assert speed.sample("eth0") == "0.0 "


def test_counter_going_backwards_raises(counters):
    speed = NetSpeed("rx")
    counters("rx", 9000)
    with pytest.raises(ComponentError):
        speed.sample("eth0")
    counters("rx", 10)
    with pytest.raises(ComponentError):
        speed.sample("eth0")


def test_missing_counter_file_raises(counters):
    with pytest.raises(ComponentError):
        netspeed_rx("absent0")


@pytest.mark.parametrize("direction, interval", [("up", 1000), ("rx", 0)])
def test_invalid_construction(direction, interval):
    with pytest.raises(ValueError):
        NetSpeed(direction, interval)