import sys
import logging
import argparse
from porter2 import check_vocabulary, load_vocabulary

logger = logging.getLogger("porter2")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check the stemmer against a line aligned vocabulary"
    )
    parser.add_argument("voc", help="file with one input word per line")
    parser.add_argument("output", help="file with the expected stem per line")

    args = parser.parse_args(argv)

    mismatches = check_vocabulary(load_vocabulary(args.voc, args.output))

    for m in mismatches:
        logger.warning(f"{m.word}: expected {m.expected}, got {m.actual}")

    return 1 if mismatches else 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    sys.exit(main())
