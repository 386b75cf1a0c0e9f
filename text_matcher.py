# Text search helpers built on the fuzzy KMP pattern

from typing import List, Dict, Any, Optional, Sequence, Tuple

from config import CONTEXT_WIDTH, logger
from elements import casefold_needle, wildcard_needle
from kmp import Pattern


class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    RESET = '\033[0m'


def build_pattern(
    pattern_text: str,
    ignore_case: bool = False,
    wildcard: Optional[str] = None
) -> Pattern:
    """
    Pick the needle elements for the requested kind of match.

    Args:
        pattern_text (str): The text to look for.
        ignore_case (bool): Match letters regardless of case.
        wildcard (Optional[str]): A single character matching any character.

    Returns:
        Pattern: The compiled pattern.
    """
    if wildcard:
        needle: Sequence[Any] = wildcard_needle(pattern_text, wildcard, ignore_case)
    elif ignore_case:
        needle = casefold_needle(pattern_text)
    else:
        needle = pattern_text
    return Pattern(needle)


def _context(text: str, position: int, length: int, width: int) -> Tuple[str, int]:
    """Return the surrounding text and where the match starts inside it."""
    start = max(0, position - width)
    end = min(len(text), position + length + width)
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(text) else ""
    return f"{prefix}{text[start:end]}{suffix}", len(prefix) + position - start


def _collect(pattern: Pattern, text: str, overlapping: bool, context: int) -> List[Dict[str, Any]]:
    length = len(pattern)
    search = pattern.find_overlapping(text) if overlapping else pattern.find(text)
    matches = []
    for position in search:
        surrounding, context_offset = _context(text, position, length, context)
        matches.append({
            'position': position,
            'length': length,
            'matched': text[position:position + length],
            'context': surrounding,
            'context_offset': context_offset
        })
    return matches


def find_text_matches(
    pattern_text: str,
    text: str,
    ignore_case: bool = False,
    wildcard: Optional[str] = None,
    overlapping: bool = False,
    context: int = CONTEXT_WIDTH
) -> List[Dict[str, Any]]:
    """
    Find every occurrence of `pattern_text` in `text`.

    Returns a list of dicts, one per occurrence, with:
    - position: offset of the occurrence in `text`
    - length: number of characters matched
    - matched: the text that was matched
    - context: the match with up to `context` characters either side
    - context_offset: where the match starts inside `context`
    """
    pattern = build_pattern(pattern_text, ignore_case, wildcard)
    return _collect(pattern, text, overlapping, context)


def find_in_pages(
    pattern_text: str,
    pages: List[str],
    ignore_case: bool = False,
    wildcard: Optional[str] = None,
    overlapping: bool = False,
    context: int = CONTEXT_WIDTH
) -> List[Dict[str, Any]]:
    """
    Search each page of a document, building the pattern only once.
    Every match carries the 1-based `page` it was found on.
    """
    pattern = build_pattern(pattern_text, ignore_case, wildcard)
    matches: List[Dict[str, Any]] = []
    for page_num, page_text in enumerate(pages, start=1):
        page_matches = _collect(pattern, page_text, overlapping, context)
        for match in page_matches:
            match['page'] = page_num
        matches.extend(page_matches)
    logger.info(f"Found {len(matches)} matches for {pattern_text!r} across {len(pages)} pages")
    return matches


def show_matches(matches: List[Dict[str, Any]]) -> None:
    """
    Print matches with the matched text highlighted.
    """
    print("\nMatches:")
    print("─" * 60)
    for match in matches:
        context = match['context']
        start = match['context_offset']
        end = start + match['length']
        location = f"page {match['page']}, " if 'page' in match else ""
        highlighted = f"{context[:start]}{Colors.GREEN}{context[start:end]}{Colors.RESET}{context[end:]}"
        print(f"{Colors.BLUE}[{location}offset {match['position']}]{Colors.RESET} {highlighted}")
