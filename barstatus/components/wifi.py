"""WiFi components that query the nl80211 generic netlink family."""

from __future__ import annotations

import itertools
import socket
import struct

from barstatus.util import ComponentError

__all__ = ["rssi_to_perc", "find_attr", "wifi_essid", "wifi_perc"]

NETLINK_GENERIC = 16
NLM_F_REQUEST = 0x1
NLM_F_DUMP = 0x300
NLMSG_DONE = 3

GENL_ID_CTRL = 0x10
CTRL_CMD_GETFAMILY = 3
CTRL_ATTR_FAMILY_ID = 1
CTRL_ATTR_FAMILY_NAME = 2

NL80211_CMD_GET_INTERFACE = 5
NL80211_CMD_GET_STATION = 17
NL80211_ATTR_IFINDEX = 3
NL80211_ATTR_STA_INFO = 21
NL80211_ATTR_SSID = 52
NL80211_STA_INFO_SIGNAL_AVG = 13

_NLMSG_HDR = struct.Struct("=IHHII")
_GENL_HDR = struct.Struct("=BBH")
_NLA_HDR = struct.Struct("=HH")
NLA_HDRLEN = _NLA_HDR.size
_PAYLOAD_OFFSET = _NLMSG_HDR.size + _GENL_HDR.size

_RECV_SIZE = 4096
_TIMEOUT = 2.0


def _align(length: int) -> int:
    return (length + 3) & ~3


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def find_attr(attr: int, data: bytes) -> bytes | None:
    """Return the payload of the first netlink attribute of type ``attr`` in ``data``."""
    offset = 0
    while offset + NLA_HDRLEN <= len(data):
        length, kind = _NLA_HDR.unpack_from(data, offset)
        if length < NLA_HDRLEN:
            return None
        if kind == attr:
            return bytes(data[offset + NLA_HDRLEN : offset + length])
        offset += _align(length)
    return None


def _attr(kind: int, payload: bytes) -> bytes:
    length = NLA_HDRLEN + len(payload)
    return (_NLA_HDR.pack(length, kind) + payload).ljust(_align(length), b"\0")


def _message(msg_type: int, flags: int, seq: int, cmd: int, attrs: bytes) -> bytes:
    body = _GENL_HDR.pack(cmd, 1, 0) + attrs
    return _NLMSG_HDR.pack(_NLMSG_HDR.size + len(body), msg_type, flags, seq, 0) + body


class _Netlink:
    """A lazily opened generic netlink socket and the nl80211 family id."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self._seq = itertools.count(1)
        self._family = 0

    def next_seq(self) -> int:
        return next(self._seq)

    def socket(self) -> socket.socket:
        if self._sock is None:
            family = getattr(socket, "AF_NETLINK", None)
            if family is None:
                raise ComponentError("socket 'AF_NETLINK': not supported")
            try:
                sock = socket.socket(family, socket.SOCK_RAW, NETLINK_GENERIC)
            except OSError as exc:
                raise ComponentError(f"socket 'AF_NETLINK': {exc}") from exc
            sock.settimeout(_TIMEOUT)
            self._sock = sock
        return self._sock

    def send(self, data: bytes) -> None:
        try:
            sent = self.socket().send(data)
        except OSError as exc:
            raise ComponentError(f"send 'AF_NETLINK': {exc}") from exc
        if sent != len(data):
            raise ComponentError("send 'AF_NETLINK': short write")

    def recv(self) -> bytes:
        try:
            return self.socket().recv(_RECV_SIZE)
        except OSError as exc:
            raise ComponentError(f"recv 'AF_NETLINK': {exc}") from exc

    def family(self) -> int:
        if self._family:
            return self._family
        request = _message(
            GENL_ID_CTRL,
            NLM_F_REQUEST,
            self.next_seq(),
            CTRL_CMD_GETFAMILY,
            _attr(CTRL_ATTR_FAMILY_NAME, b"nl80211\0"),
        )
        self.send(request)
        response = self.recv()
        if len(response) > len(request):
            payload = find_attr(CTRL_ATTR_FAMILY_ID, response[len(request):])
            if payload is not None and len(payload) == 2:
                self._family = struct.unpack("=H", payload)[0]
        if not self._family:
            raise ComponentError("nl80211 family not found")
        return self._family


_netlink = _Netlink()


def _ifindex(interface: str) -> int:
    try:
        return socket.if_nametoindex(interface)
    except OSError as exc:
        raise ComponentError(f"interface {interface} not found") from exc


def _request(fam: int, flags: int, cmd: int, index: int) -> bytes:
    return _message(
        fam,
        flags,
        _netlink.next_seq(),
        cmd,
        _attr(NL80211_ATTR_IFINDEX, struct.pack("=i", index)),
    )


def _scan_station_dump(chunk: bytes, strength: str | None) -> tuple[str | None, bool]:
    """Walk the messages of one dump reply; return the strength and whether it ended."""
    offset = 0
    end = len(chunk)
    while end - offset >= _NLMSG_HDR.size:
        length, kind, _flags, _seq, _pid = _NLMSG_HDR.unpack_from(chunk, offset)
        stop = min(end, offset + length)

        if strength is None and length > _PAYLOAD_OFFSET:
            info = find_attr(NL80211_ATTR_STA_INFO, chunk[offset + _PAYLOAD_OFFSET : stop])
            signal = find_attr(NL80211_STA_INFO_SIGNAL_AVG, info) if info is not None else None
            if signal is not None and len(signal) == 1:
                strength = str(rssi_to_perc(struct.unpack("=b", signal)[0]))

        if kind == NLMSG_DONE:
            return strength, True
        if length < _NLMSG_HDR.size:
            break
        offset = stop
    return strength, False


def wifi_essid(interface: str) -> str:
    """Return the ESSID the interface is connected to."""
    fam = _netlink.family()
    index = _ifindex(interface)

    _netlink.send(_request(fam, NLM_F_REQUEST, NL80211_CMD_GET_INTERFACE, index))
    response = _netlink.recv()
    if len(response) <= _PAYLOAD_OFFSET:
        raise ComponentError(f"'{interface}': short nl80211 reply")

    ssid = find_attr(NL80211_ATTR_SSID, response[_PAYLOAD_OFFSET:])
    if ssid is None:
        raise ComponentError(f"'{interface}': no SSID")
    return ssid.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def wifi_perc(interface: str) -> str:
    """Return the averaged signal strength of the associated station, in percent."""
    fam = _netlink.family()
    index = _ifindex(interface)

    _netlink.send(
        _request(fam, NLM_F_REQUEST | NLM_F_DUMP, NL80211_CMD_GET_STATION, index)
    )

    strength: str | None = None
    while True:
        chunk = _netlink.recv()
        if len(chunk) < _NLMSG_HDR.size:
            raise ComponentError(f"'{interface}': short nl80211 reply")
        strength, done = _scan_station_dump(chunk, strength)
        if done:
            if strength is None:
                raise ComponentError(f"'{interface}': no signal strength")
            return strength