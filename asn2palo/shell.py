#!/usr/bin/env python3
"""
Interactive front end: confirm, ask for an ASN, fetch and save its prefixes,
ask for a description, then write the Panorama command file.

Usage:
  asn2palo            (or: python -m asn2palo)

The tool takes no parameters; settings live in asn2palo/config.py.
"""

import sys

from asn2palo import config, pipeline
from asn2palo.errors import Asn2PaloError, RunCancelled
from asn2palo.log import debug, log_message
from asn2palo.store import discard

TITLE = "ASN to Palo Objects."


def quit_script(message):
    """Report why the run stopped. Returns the exit status."""
    debug("script exit called")
    debug(message)
    print(" ")
    print(f"Terminated: {message}")
    print(" ")
    return 1


def ask(prompt, default=None):
    try:
        answer = input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        raise RunCancelled("No files have been created or changed.") from None
    if not answer and default is not None:
        return default
    return answer


def confirm():
    print(f"=== {TITLE} ===")
    print("This utility will generate the Palo Alto cli commands to add "
          "Network Objects for a specified ASN.")
    answer = ask("Do you wish to proceed? [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def interact():
    debug(" ")
    debug("Script Starting")
    if not confirm():
        debug("Script exiting after user cancellation")
        raise RunCancelled("No files have been created or changed.")
    debug("Script proceeding")

    asn_text = ask(f"Please provide the required ASN, (numeric value {config.ASN_MIN} - {config.ASN_MAX}): ")
    print(" ")
    print(f"Please wait, currently downloading information for ASN {asn_text}.")
    stored = pipeline.collect(asn_text)
    log_message(f"Saved IPv4 prefixes → {stored.ipv4_path}")
    if stored.ipv6_path:
        log_message(f"Saved IPv6 prefixes → {stored.ipv6_path}")

    try:
        description = ask("Please provide text for the description, who requested this, "
                          f"and ticket reference etc [{config.DEFAULT_DESCRIPTION.strip()}]: ",
                          default=config.DEFAULT_DESCRIPTION)
    except RunCancelled:
        discard(stored)
        raise
    result = pipeline.build(stored, int(asn_text), description)

    print(" ")
    print(pipeline.summary(result))
    print(" ")
    print(f"The Panorama config file has been saved as {result.commands_path}")
    print(" ")
    print("To view the file:")
    print(" ")
    print(f"  cat {result.commands_path}")
    print(" ")
    return result


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        return quit_script("Error, Script does not accept any parameters!")
    try:
        interact()
    except Asn2PaloError as e:
        return quit_script(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
