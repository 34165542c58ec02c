"""
Every error here ends the run: the shell prints the message and exits 1.
"""


class Asn2PaloError(Exception):
    """Base class for errors that terminate a run."""


class InvalidInputError(Asn2PaloError):
    """ASN is not a number in the accepted range."""


class FetchError(Asn2PaloError):
    """BGPView could not be reached or returned nothing usable."""


class NotFoundError(Asn2PaloError):
    """BGPView answered but does not know the ASN."""


class NoPrefixesError(Asn2PaloError):
    """The ASN announces no IPv4 prefixes."""


class InvalidPrefixError(Asn2PaloError):
    """A prefix line is not valid CIDR (strict generation only)."""


class RunCancelled(Asn2PaloError):
    """Operator declined to continue."""
