"""
Fetch the prefixes an ASN announces, and its registered name, from BGPView.

Both endpoints return {"status": "ok", "data": {...}} on success:
  /asn/<asn>/prefixes -> data.ipv4_prefixes[].prefix, data.ipv6_prefixes[].prefix
  /asn/<asn>          -> data.name
"""

import re
from typing import List, NamedTuple

import requests

from asn2palo.config import BGPVIEW_ASN_URL, BGPVIEW_PREFIXES_URL, REQUEST_TIMEOUT, USER_AGENT
from asn2palo.errors import FetchError, NotFoundError
from asn2palo.log import debug

UNKNOWN_NAME = "Unknown"
SLUG_STRIP = re.compile(r"[^a-z0-9_]")


class AsnPrefixes(NamedTuple):
    ipv4: List[str]
    ipv6: List[str]
    name: str


def make_session():
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch_json(url, session, timeout=REQUEST_TIMEOUT):
    """GET url and decode the body. Any transport, HTTP or decode failure is a FetchError."""
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Error: Failed to fetch {url}: {e}") from e

    if not resp.content or not resp.content.strip():
        raise FetchError(f"Error: Empty response from {url}")
    try:
        return resp.json()
    except ValueError as e:
        raise FetchError(f"Error: Response from {url} is not JSON: {e}") from e


def check_status(payload, asn):
    if not isinstance(payload, dict) or payload.get("status") != "ok":
        raise NotFoundError(f"Error: ASN{asn} not found in BGPView.")


def _data(payload):
    data = payload.get("data") or {}
    if not isinstance(data, dict):
        raise FetchError(f"Error: Unexpected BGPView data: {data!r}")
    return data


def _prefix_list(data, key):
    try:
        return [p["prefix"] for p in (data.get(key) or [])]
    except (KeyError, TypeError) as e:
        raise FetchError(f"Error: Malformed {key} entry in BGPView response: {e!r}") from e


def fetch_prefixes(asn, session=None, timeout=REQUEST_TIMEOUT):
    """Return (ipv4, ipv6) prefix lists in the order BGPView lists them."""
    if session is None:
        with make_session() as session:
            return fetch_prefixes(asn, session, timeout)
    try:
        payload = fetch_json(BGPVIEW_PREFIXES_URL.format(asn=asn), session, timeout)
    except FetchError as e:
        raise FetchError("Error: Failed to fetch prefix data from BGPView API.") from e
    check_status(payload, asn)
    data = _data(payload)
    debug(f"ASN {asn} found in BGPview, prefixes downloaded")
    return _prefix_list(data, "ipv4_prefixes"), _prefix_list(data, "ipv6_prefixes")


def fetch_asn_name(asn, session=None, timeout=REQUEST_TIMEOUT):
    """Registered name of the ASN, or "Unknown" when BGPView has none."""
    if session is None:
        with make_session() as session:
            return fetch_asn_name(asn, session, timeout)
    try:
        payload = fetch_json(BGPVIEW_ASN_URL.format(asn=asn), session, timeout)
    except FetchError as e:
        raise FetchError("Error: Failed to fetch ASN info.") from e
    check_status(payload, asn)
    name = _data(payload).get("name")
    if name is None or str(name) in ("", "null"):
        return UNKNOWN_NAME
    return str(name)


def slugify_name(name, asn):
    """
    Filesystem-safe form of an ASN name: lowercase, spaces to underscores,
    everything outside [a-z0-9_] removed. Falls back to "asn<ASN>".
    """
    slug = SLUG_STRIP.sub("", name.lower().replace(" ", "_"))
    return slug or f"asn{asn}"


def fetch_asn(asn, session=None, timeout=REQUEST_TIMEOUT) -> AsnPrefixes:
    if session is None:
        with make_session() as session:
            return fetch_asn(asn, session, timeout)
    ipv4, ipv6 = fetch_prefixes(asn, session, timeout)
    name = fetch_asn_name(asn, session, timeout)
    debug(f"Found ASN{asn} - {name}")
    return AsnPrefixes(ipv4, ipv6, name)
