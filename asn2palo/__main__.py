import sys

from asn2palo.shell import main

if __name__ == "__main__":
    sys.exit(main())
