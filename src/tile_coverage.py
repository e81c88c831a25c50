from RkrGst import Match, rkr_gst
from typing import List, Sequence, Hashable
import Levenshtein


def tiled_length(matches: List[Match]) -> int:
    return sum(m.length for m in matches)


def longest_tile(matches: List[Match]) -> int:
    return max((m.length for m in matches), default=0)


# Share of both sequences covered by tiles
def coverage(matches: List[Match], pattern_len: int, text_len: int) -> float:
    total = pattern_len + text_len
    if total == 0:
        return 0.0
    return 2 * tiled_length(matches) / total


def matched_segments(matches: List[Match], pattern: Sequence[Hashable]) -> list:
    return [pattern[m.pattern_index : m.pattern_index + m.length] for m in matches]


def edit_similarity(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> float:
    if len(s1) == 0 and len(s2) == 0:
        return 1.0
    return 1 - (Levenshtein.distance(s1, s2) / max(len(s1), len(s2)))


def gst_similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    initial_search_length: int,
    minimum_match_length: int,
) -> float:
    matches = rkr_gst(s1, s2, initial_search_length, minimum_match_length)
    return coverage(matches, len(s1), len(s2))


def combined_similarity(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    initial_search_length: int,
    minimum_match_length: int,
) -> float:
    """
    The better of the edit similarity and the longest tile relative to the
    shorter input.
    """
    if len(s1) == 0 or len(s2) == 0:
        return edit_similarity(s1, s2)
    matches = rkr_gst(s1, s2, initial_search_length, minimum_match_length)
    return max(
        edit_similarity(s1, s2),
        longest_tile(matches) / min(len(s1), len(s2)),
    )
