import datetime

import pytest

from asn2palo import pipeline
from asn2palo.errors import (FetchError, InvalidInputError, InvalidPrefixError, NoPrefixesError,
                             NotFoundError, RunCancelled)

from conftest import FakeResponse, FakeSession, bgpview_routes

NOW = datetime.datetime(2025, 3, 14, 9, 26)


def run(tmp_path, session, asn="3462", **kwargs):
    return pipeline.run(asn, "test run", output_dir=tmp_path, session=session, now=NOW, **kwargs)


def test_full_run(tmp_path):
    session = FakeSession(bgpview_routes(3462, ["192.0.2.0/24", "198.51.100.0/22"], ["2001:db8::/32"], "Example Net"))
    result = run(tmp_path, session)

    assert result.asn == 3462
    assert result.count == 2
    assert result.group_name == "2025_ASN3462"
    assert result.commands_path == tmp_path / "example_net_as3462_ipv4_20250314-0926.commands.txt"
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "example_net_as3462_ipv4_20250314-0926.commands.txt",
        "example_net_as3462_ipv4_20250314-0926.txt",
        "example_net_as3462_ipv6_20250314-0926.txt",
    ]
    commands = result.commands_path.read_text()
    assert "set device-group External address 2025_ASN3462-192_0_2_0-24 ip-netmask 192.0.2.0/24\n" in commands
    assert 'description "test run"' in commands
    assert "2001:db8" not in commands


def test_every_stored_prefix_reaches_the_commands_in_order(tmp_path):
    ipv4 = ["203.0.113.0/24", "192.0.2.0/24", "198.51.100.0/22", "192.0.2.0/24"]
    session = FakeSession(bgpview_routes(3462, ipv4))
    result = run(tmp_path, session)

    stored = result.stored.ipv4_path.read_text().splitlines()
    netmask_lines = [line for line in result.commands_path.read_text().splitlines() if " ip-netmask " in line]
    assert [line.rsplit(" ", 1)[1] for line in netmask_lines] == stored == ipv4
    assert result.count == len(ipv4)


def test_run_options_reach_the_generator(tmp_path):
    session = FakeSession(bgpview_routes(3462, ["192.0.2.0/24"]))
    result = run(tmp_path, session, device_group="Edge", object_prefix="x_", tag="T", group_mode="consolidated")
    commands = result.commands_path.read_text()
    assert "set device-group Edge address x_ASN3462-192_0_2_0-24 tag T\n" in commands
    assert result.group_name == "x_ASN3462"


def test_declined_run_touches_nothing(tmp_path):
    session = FakeSession({})
    with pytest.raises(RunCancelled, match="No files have been created or changed."):
        pipeline.run("3462", "x", proceed=False, output_dir=tmp_path, session=session)
    assert session.calls == []
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("asn", ["0", "64496", "AS1", ""])
def test_invalid_asn_stops_before_fetch(tmp_path, asn):
    session = FakeSession({})
    with pytest.raises(InvalidInputError):
        run(tmp_path, session, asn=asn)
    assert session.calls == []
    assert list(tmp_path.iterdir()) == []


def test_unknown_asn_creates_no_files(tmp_path):
    session = FakeSession(bgpview_routes(3462, ["192.0.2.0/24"], status="error"))
    with pytest.raises(NotFoundError):
        run(tmp_path, session)
    assert list(tmp_path.iterdir()) == []


def test_fetch_failure_creates_no_files(tmp_path):
    session = FakeSession({"https://api.bgpview.io/asn/3462/prefixes": FakeResponse(status_code=503, body="")})
    with pytest.raises(FetchError):
        run(tmp_path, session)
    assert list(tmp_path.iterdir()) == []


def test_no_ipv4_prefixes_means_no_command_file(tmp_path):
    session = FakeSession(bgpview_routes(3462, [], ["2001:db8::/32"]))
    with pytest.raises(NoPrefixesError):
        run(tmp_path, session)
    assert list(tmp_path.iterdir()) == []


def test_summary_text(tmp_path):
    session = FakeSession(bgpview_routes(3462, ["192.0.2.0/24"], name="Example Net"))
    text = pipeline.summary(run(tmp_path, session))
    assert "ASN 3462 (Example Net)" in text
    assert "1 prefixes are included in object group 2025_ASN3462." in text


def test_strict_rejection_leaves_nothing_behind(tmp_path):
    session = FakeSession(bgpview_routes(3462, ["192.0.2.0/24", "bogus"], ["2001:db8::/32"]))
    with pytest.raises(InvalidPrefixError, match="bogus"):
        run(tmp_path, session, strict=True)
    assert list(tmp_path.iterdir()) == []


def test_strict_run_with_clean_prefixes(tmp_path):
    session = FakeSession(bgpview_routes(3462, ["192.0.2.0/24", "198.51.100.0/22"]))
    result = run(tmp_path, session, strict=True)
    assert result.count == 2
    assert result.commands_path.exists()
