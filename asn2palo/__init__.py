"""
asn2palo - turn the prefixes announced by an ASN into Panorama CLI commands.
"""

__version__ = "1.0.0"
