from src.classroom_attendance.classroom_attendance.network import resolver
from src.classroom_attendance.classroom_attendance.network.resolver import resolve_lan_address, select_lan_address


def test_prefers_private_lan_address():
    interfaces = {
        "lo": ["127.0.0.1"],
        "tun0": ["100.64.0.2"],
        "wlan0": ["192.168.1.34"],
    }

    assert select_lan_address(interfaces) == "192.168.1.34"


def test_skips_self_assigned_addresses():
    interfaces = {
        "eth0": ["169.254.10.20"],
        "eth1": ["10.1.2.3"],
    }

    assert select_lan_address(interfaces) == "10.1.2.3"


def test_accepts_172_16_range_only_inside_the_private_block():
    assert select_lan_address({"eth0": ["172.32.0.1", "172.20.5.5"]}) == "172.20.5.5"


def test_falls_back_to_any_non_internal_address():
    assert select_lan_address({"lo": ["127.0.0.1"], "eth0": ["203.0.113.7"]}) == "203.0.113.7"


def test_falls_back_to_loopback_when_nothing_else_exists():
    assert select_lan_address({"lo": ["127.0.0.1", "::1"]}) == "127.0.0.1"
    assert select_lan_address({}) == "127.0.0.1"


def test_ignores_ipv6_and_garbage():
    assert select_lan_address({"eth0": ["fe80::1", "not-an-ip", "192.168.0.9"]}) == "192.168.0.9"


def test_override_skips_detection(monkeypatch):
    def boom():
        raise AssertionError("interfaces should not be listed")

    monkeypatch.setattr(resolver, "host_interfaces", boom)

    assert resolve_lan_address("10.9.8.7") == "10.9.8.7"


def test_interface_listing_errors_fall_back(monkeypatch):
    def broken():
        raise OSError("no interfaces")

    monkeypatch.setattr(resolver, "host_interfaces", broken)

    assert resolve_lan_address() == "127.0.0.1"


def test_self_assigned_address_is_last_resort():
    assert select_lan_address({"eth0": ["169.254.1.1"], "eth1": ["203.0.113.7"]}) == "203.0.113.7"
    assert select_lan_address({"lo": ["127.0.0.1"], "eth0": ["169.254.1.1"]}) == "169.254.1.1"
