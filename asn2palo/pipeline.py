"""
ASN -> BGPView -> prefix files -> Panorama command file, with no prompting.

collect() and build() are split so an interactive caller can ask for the
description after the prefixes are known; run() chains them for everyone else.
"""

from pathlib import Path
from typing import NamedTuple

from asn2palo import config
from asn2palo.errors import InvalidPrefixError, RunCancelled
from asn2palo.fetch import fetch_asn
from asn2palo.generate import generate, write_commands
from asn2palo.log import debug
from asn2palo.store import StoredPrefixes, commands_path, discard, read_prefix_file, store_prefixes
from asn2palo.validate import validate_asn


class RunResult(NamedTuple):
    asn: int
    commands_path: Path
    group_name: str
    count: int
    stored: StoredPrefixes


def collect(asn_text, output_dir=config.OUTPUT_DIR, session=None, now=None) -> StoredPrefixes:
    """Validate the ASN, download its prefixes and write the prefix files."""
    asn = validate_asn(asn_text)
    debug(f"Requested ASN = {asn}, fetching data")
    prefixes = fetch_asn(asn, session=session)
    stored = store_prefixes(asn, prefixes, output_dir=output_dir, now=now)
    debug("CIDR prefixes found and saved for further processing.")
    return stored


def build(stored, asn, description, device_group=config.DEVICE_GROUP,
          object_prefix=config.CUSTOM_OBJ_PREFIX, tag=config.TAG,
          group_mode=config.GROUP_MODE, strict=False) -> RunResult:
    """
    Generate the command file next to the stored IPv4 prefix file. If strict
    validation rejects a prefix the stored files are removed as well.
    """
    asn = int(asn)
    prefixes = read_prefix_file(stored.ipv4_path)
    try:
        generated = generate(prefixes, asn, device_group=device_group, object_prefix=object_prefix,
                             tag=tag, description=description, group_mode=group_mode, strict=strict)
    except InvalidPrefixError:
        discard(stored)
        raise
    output_file = commands_path(stored.ipv4_path)
    write_commands(output_file, generated.lines)
    debug(f"Commands written to {output_file}")
    return RunResult(asn, output_file, generated.group_name, generated.count, stored)


def run(asn_text, description, proceed=True, output_dir=config.OUTPUT_DIR, session=None,
        now=None, **options) -> RunResult:
    """
    One complete run. ``options`` are passed through to build() (device_group,
    object_prefix, tag, group_mode, strict).
    """
    if not proceed:
        raise RunCancelled("No files have been created or changed.")
    stored = collect(asn_text, output_dir=output_dir, session=session, now=now)
    return build(stored, int(asn_text), description, **options)


def summary(result: RunResult):
    return (f"Palo Alto command line script generated for ASN {result.asn} ({result.stored.name}).\n\n"
            f"{result.count} prefixes are included in object group {result.group_name}.")
