"""
Write fetched prefixes to per-family text files, one prefix per line:

  <dir>/<slug>_as<ASN>_ipv4_<YYYYmmdd-HHMM>.txt
  <dir>/<slug>_as<ASN>_ipv6_<YYYYmmdd-HHMM>.txt

The IPv4 file is required downstream; the IPv6 file is dropped when empty.
"""

import datetime
from pathlib import Path
from typing import NamedTuple, Optional

from asn2palo.config import OUTPUT_DIR, TIMESTAMP_FORMAT
from asn2palo.errors import NoPrefixesError
from asn2palo.fetch import slugify_name
from asn2palo.log import debug


class StoredPrefixes(NamedTuple):
    ipv4_path: Path
    ipv6_path: Optional[Path]
    name: str
    slug: str
    timestamp: str


def make_timestamp(now=None):
    return (now or datetime.datetime.now()).strftime(TIMESTAMP_FORMAT)


def prefix_paths(asn, slug, timestamp, output_dir=OUTPUT_DIR):
    base = Path(output_dir)
    return (base / f"{slug}_as{asn}_ipv4_{timestamp}.txt",
            base / f"{slug}_as{asn}_ipv6_{timestamp}.txt")


def write_prefix_file(path, prefixes):
    """Write prefixes one per line. Returns False (and removes the file) if nothing was written."""
    with open(path, "w", encoding="utf-8") as fh:
        for prefix in prefixes:
            fh.write(f"{prefix}\n")
    if Path(path).stat().st_size == 0:
        Path(path).unlink()
        return False
    return True


def store_prefixes(asn, prefixes, output_dir=OUTPUT_DIR, now=None):
    """
    Persist an AsnPrefixes result. Raises NoPrefixesError, leaving no
    files behind, when there are no IPv4 prefixes.
    """
    slug = slugify_name(prefixes.name, asn)
    timestamp = make_timestamp(now)
    file_v4, file_v6 = prefix_paths(asn, slug, timestamp, output_dir)
    debug(f"ASN={asn}, TIMESTAMP={timestamp}, files {file_v4} / {file_v6}")

    if write_prefix_file(file_v4, prefixes.ipv4):
        debug(f"Saved IPv4 prefixes → {file_v4}")
    else:
        debug("No IPv4 prefixes found.")
        raise NoPrefixesError("No IPv4 prefixes found")

    if write_prefix_file(file_v6, prefixes.ipv6):
        debug(f"Saved IPv6 prefixes → {file_v6}")
    else:
        debug("No IPv6 prefixes found.")
        file_v6 = None

    return StoredPrefixes(file_v4, file_v6, prefixes.name, slug, timestamp)


def commands_path(ipv4_path):
    """foo_as1_ipv4_<ts>.txt -> foo_as1_ipv4_<ts>.commands.txt (first '.txt' in the file name)"""
    path = Path(ipv4_path)
    return path.with_name(path.name.replace(".txt", ".commands.txt", 1))


def read_prefix_file(path):
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read().splitlines()


def discard(stored):
    """Remove the prefix files of a run that will not produce a command file."""
    for path in (stored.ipv4_path, stored.ipv6_path):
        if path is not None and Path(path).exists():
            Path(path).unlink()
            debug(f"Removed {path}")
