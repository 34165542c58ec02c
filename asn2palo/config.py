"""
Run-wide settings. Every function that needs one of these takes it as a
keyword argument defaulting to the value here.
"""

# --- Output ---
OUTPUT_DIR = "."             # default to current directory
TIMESTAMP_FORMAT = "%Y%m%d-%H%M"

# --- Panorama objects ---
DEVICE_GROUP = "External"    # device group used in the commands
TAG = "ASN_Blocks"           # tag added to every object
CUSTOM_OBJ_PREFIX = "2025_"  # prefix added to all object and group names
GROUP_MODE = "repeat"        # "repeat" or "consolidated"
DEFAULT_DESCRIPTION = "Requested By "

# --- ASN range accepted by the target platform ---
ASN_MIN = 1
ASN_MAX = 64495

# --- BGPView ---
BGPVIEW_PREFIXES_URL = "https://api.bgpview.io/asn/{asn}/prefixes"
BGPVIEW_ASN_URL = "https://api.bgpview.io/asn/{asn}"
REQUEST_TIMEOUT = 30
USER_AGENT = "asn2palo/1.0 (+https://api.bgpview.io/)"

# --- Debugging ---
DEBUG = False                # enable debug trace true|false
DEBUG_LOG = "./debug.log"    # debug filename/location
