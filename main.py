import argparse
import logging
import sys
from typing import List, Optional

from config import CONTEXT_WIDTH, DEFAULT_WILDCARD
from pdfreader import load_document
from logging_config import setup_logging
from text_matcher import Colors, find_in_pages, show_matches

logger = logging.getLogger("app")

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_LOAD_ERROR = 2


class KmpSearchApp:
    """
    Searches a text or PDF document for a pattern from the command line.
    """

    def __init__(self, args: argparse.Namespace):
        self.args = args

    def run(self) -> int:
        args = self.args
        logger.info(f"Searching {args.file} for {args.pattern!r}")

        pages = load_document(args.file)
        if pages is None:
            print(f"{Colors.RED}Error: could not load document '{args.file}'.{Colors.RESET}")
            return EXIT_LOAD_ERROR

        matches = find_in_pages(
            args.pattern,
            pages,
            ignore_case=args.ignore_case,
            wildcard=args.wildcard,
            overlapping=args.overlapping,
            context=args.context
        )

        if args.count:
            print(len(matches))
        elif matches:
            show_matches(matches)
            print(f"\n{Colors.GREEN}{len(matches)} match(es) in {len(pages)} page(s).{Colors.RESET}")
        else:
            print(f"{Colors.YELLOW}No matches for '{args.pattern}'.{Colors.RESET}")

        return EXIT_MATCH if matches else EXIT_NO_MATCH


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzy-kmp",
        description="Find a pattern in a text or PDF document with fuzzy KMP search."
    )
    parser.add_argument("pattern", help="text to search for")
    parser.add_argument("file", help="text or PDF document to search")
    parser.add_argument("-i", "--ignore-case", action="store_true",
                        help="match letters regardless of case")
    parser.add_argument("-w", "--wildcard", action="store_const", const=DEFAULT_WILDCARD, default=None,
                        help=f"treat '{DEFAULT_WILDCARD}' as matching any single character")
    parser.add_argument("--wildcard-char", dest="wildcard", metavar="CHAR",
                        help="use CHAR as the wildcard instead")
    parser.add_argument("-o", "--overlapping", action="store_true",
                        help="report occurrences that share characters")
    parser.add_argument("-C", "--context", type=int, default=CONTEXT_WIDTH,
                        help="characters of context shown around each match")
    parser.add_argument("-c", "--count", action="store_true",
                        help="only print the number of matches")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show progress messages")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    return KmpSearchApp(args).run()


if __name__ == "__main__":
    sys.exit(main())
