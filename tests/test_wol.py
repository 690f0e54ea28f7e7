"""Tests for magic packet construction and sending."""

import socket
from unittest.mock import MagicMock, call, patch

import pytest

from wol_cli.net import NetworkTarget
from wol_cli.wol import WOL_PORT, build_magic_packet, wake

HW = bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0x55])


@pytest.fixture
def mock_socket():
    with patch("wol_cli.wol.socket.socket") as sock_cls:
        sock = MagicMock()
        sock_cls.return_value.__enter__.return_value = sock
        yield sock_cls, sock


@pytest.mark.parametrize("hw", [HW, b"\xff" * 6, b"\x00" * 6, b"\xde\xad\xbe\xef\x00\x01"])
def test_packet_layout(hw):
    pkt = build_magic_packet(hw)
    assert len(pkt) == 102
    assert pkt[:6] == b"\xff" * 6
    for k in range(16):
        assert pkt[6 + 6 * k:12 + 6 * k] == hw


def test_packet_rejects_wrong_length():
    with pytest.raises(ValueError):
        build_magic_packet(b"\x00\x11\x22")


def test_wake_sends_to_each_broadcast(mock_socket):
    sock_cls, sock = mock_socket
    nets = [NetworkTarget.parse("192.168.1.0/24"), NetworkTarget.parse("10.1.2.3/16")]

    assert wake("00:11:22:33:44:55", HW, nets) is True

    sock_cls.assert_called_once_with(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind.assert_called_once_with(("0.0.0.0", 0))
    sock.setsockopt.assert_called_with(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
    pkt = build_magic_packet(HW)
    assert sock.sendto.call_args_list == [
        call(pkt, ("192.168.1.255", WOL_PORT)),
        call(pkt, ("10.1.255.255", WOL_PORT)),
    ]
    assert WOL_PORT == 9


def test_wake_verbose_logs_each_send(mock_socket, capsys):
    nets = [NetworkTarget.parse("192.168.1.0/24")]
    wake("AA:BB:CC:DD:EE:FF", HW, nets, verbose=True)
    out = capsys.readouterr().out
    assert "Sent magic packet to AA:BB:CC:DD:EE:FF, and broadcasted on 192.168.1.0/24" in out


def test_wake_quiet_by_default(mock_socket, capsys):
    wake("AA:BB:CC:DD:EE:FF", HW, [NetworkTarget.parse("192.168.1.0/24")])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_wake_stops_at_first_send_error(mock_socket, capsys):
    sock_cls, sock = mock_socket
    sock.sendto.side_effect = PermissionError(13, "Permission denied")
    nets = [NetworkTarget.parse("192.168.1.0/24"), NetworkTarget.parse("10.0.0.0/8")]

    assert wake("00:11:22:33:44:55", HW, nets) is False

    assert sock.sendto.call_count == 1
    sock_cls.return_value.__exit__.assert_called_once()
    err = capsys.readouterr().err
    assert "Permission denied" in err
    assert "original MAC address: 00:11:22:33:44:55" in err


def test_wake_reports_bind_error(mock_socket, capsys):
    _, sock = mock_socket
    sock.bind.side_effect = OSError("Address already in use")

    assert wake("00:11:22:33:44:55", HW, [NetworkTarget.parse("192.168.1.0/24")]) is False
    sock.sendto.assert_not_called()
    assert "Address already in use" in capsys.readouterr().err


def test_wake_without_networks_sends_nothing(mock_socket):
    _, sock = mock_socket
    assert wake("00:11:22:33:44:55", HW, []) is True
    sock.sendto.assert_not_called()
