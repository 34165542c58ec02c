"""
Render a list of CIDR prefixes as Panorama CLI set-commands.

Each prefix becomes one address object named
    <object_prefix>ASN<asn>-<ip with . -> _>-<mask>
carrying the run's tag and description, and is added to the address group
    <object_prefix>ASN<asn>

The output is meant to be pasted into a Panorama CLI session, so it is
wrapped in the scripting-mode / configure / commit boilerplate.
"""

import ipaddress
from typing import List, NamedTuple

from asn2palo.config import CUSTOM_OBJ_PREFIX, DEVICE_GROUP, GROUP_MODE, TAG
from asn2palo.errors import InvalidPrefixError
from asn2palo.log import debug

GROUP_MODES = ("repeat", "consolidated")

# echo " " in the pasted script; Panorama ignores it
SPACER = " "


class Generated(NamedTuple):
    lines: List[str]
    members: List[str]
    group_name: str

    @property
    def count(self):
        return len(self.members)


def group_name_for(asn, object_prefix=CUSTOM_OBJ_PREFIX):
    return f"{object_prefix}ASN{asn}"


def object_name_for(cidr, asn, object_prefix=CUSTOM_OBJ_PREFIX):
    """
    2025_ + 64500 + "192.0.2.0/24" -> "2025_ASN64500-192_0_2_0-24"

    No validation: a line without "/" uses the whole line as both ip and mask.
    """
    ip = cidr.split("/", 1)[0]
    mask = cidr.rsplit("/", 1)[-1]
    name = f"{ip.replace('.', '_')}-{mask}"
    return f"{group_name_for(asn, object_prefix)}-{name}"


def check_prefix(cidr):
    if "/" not in cidr:
        raise InvalidPrefixError(f"Invalid prefix (no mask): {cidr!r}")
    try:
        ipaddress.ip_network(cidr, strict=False)
    except ValueError as e:
        raise InvalidPrefixError(f"Invalid prefix {cidr!r}: {e}") from e


def preamble(device_group):
    return [
        f"### CLI commands for device-group: {device_group} ###",
        SPACER,
        "### Preparing Panorama to accept scripting",
        "### commands to paste are below here",
        SPACER,
        "set cli config-output-format set",
        "set cli scripting-mode on",
        "configure",
        SPACER,
    ]


def postamble():
    return [
        SPACER,
        "### end of config commands.",
        SPACER,
        "commit",
        SPACER,
        "exit",
        "set cli config-output-format default",
        "set cli scripting-mode off",
        SPACER,
        "exit",
    ]


def address_statements(device_group, object_name, cidr, tag, description):
    base = f"set device-group {device_group} address {object_name}"
    return [
        f"{base} ip-netmask {cidr}",
        f"{base} tag {tag}",
        f'{base} description "{description}"',
        f"{base} disable-override no",
    ]


def group_statement(device_group, group_name, members):
    return f"set device-group {device_group} address-group {group_name} static [ {' '.join(members)} ]"


def generate(prefixes, asn, device_group=DEVICE_GROUP, object_prefix=CUSTOM_OBJ_PREFIX,
             tag=TAG, description="", group_mode=GROUP_MODE, strict=False) -> Generated:
    """
    Build the full command script for one ASN.

    group_mode "repeat" adds the group statement after every object, each
    listing only that object (Panorama merges repeated static [ ] lines for
    the same group). "consolidated" writes a single group statement listing
    every member after the last object.

    With strict=True every non-blank line must be a valid ip/mask, otherwise
    InvalidPrefixError is raised. By default lines pass through untouched.
    """
    if group_mode not in GROUP_MODES:
        raise ValueError(f"group_mode must be one of {GROUP_MODES}, got {group_mode!r}")

    group_name = group_name_for(asn, object_prefix)
    lines = preamble(device_group)
    members = []

    for line in prefixes:
        cidr = line.strip()
        if not cidr:
            continue
        if strict:
            check_prefix(cidr)

        object_name = object_name_for(cidr, asn, object_prefix)
        lines.extend(address_statements(device_group, object_name, cidr, tag, description))
        if group_mode == "repeat":
            lines.append(group_statement(device_group, group_name, [object_name]))
        members.append(object_name)

    if group_mode == "consolidated" and members:
        lines.append(group_statement(device_group, group_name, members))

    lines.extend(postamble())
    debug(f"{group_name} Object group generated for {len(members)} prefixes.")
    return Generated(lines, members, group_name)


def render(lines):
    return "".join(f"{line}\n" for line in lines)


def write_commands(path, lines):
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(render(lines))
