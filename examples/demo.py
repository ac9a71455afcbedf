#!/usr/bin/env python3
"""Humanize demo: the same entries in long and compact layouts"""

import sys

from humanize_module import Logger, HumanizeFormatter


def main():
    formatter = HumanizeFormatter()
    logger = Logger(formatter=formatter, out=sys.stdout)

    err = RuntimeError("oh heavens oh no an error eep")

    fields_logger = logger.with_fields(power_level=9000, dance="flhargunstow")

    print("\n// --- Long Format --- //")
    fields_logger.info("This is the very polite log message")

    fields_logger.with_error(err).error("Alas, error city!")

    formatter.compact = True

    print("\n\n// --- Compact Format --- //")
    fields_logger.info("Now, compact!")

    fields_logger.with_error(err).error("This is a very compact error message")


if __name__ == "__main__":
    main()
