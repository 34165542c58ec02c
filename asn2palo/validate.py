import re

from asn2palo.config import ASN_MIN, ASN_MAX
from asn2palo.errors import InvalidInputError
from asn2palo.log import debug

ASN_PATTERN = re.compile(r"[0-9]+")


def validate_asn(text, asn_min=ASN_MIN, asn_max=ASN_MAX):
    """
    Check a user-supplied ASN and return it as an int.

    Only plain digits are accepted (no sign, no whitespace, no "AS" prefix),
    and the value must lie in [asn_min, asn_max]. Anything else raises
    InvalidInputError.
    """
    if text is not None and ASN_PATTERN.fullmatch(text):
        asn = int(text)
        if asn_min <= asn <= asn_max:
            debug("Requested ASN appears to be valid")
            return asn
    debug("Requested ASN appears to be invalid - script will exit")
    raise InvalidInputError("Error, ASN input was invalid.")
