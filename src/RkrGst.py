from typing import List, Tuple, NamedTuple, DefaultDict, Iterator, Sequence, Hashable
from collections import defaultdict
from RollingAdler32 import RollingAdler32
from gst_common import check_search_lengths, encode_tokens
import logging


class Match(NamedTuple):
    pattern_index: int
    text_index: int
    length: int


def unmarked_windows(
    seq: List[int], marks: List[bool], search_length: int
) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, checksum) for every window of `search_length` tokens that lies
    entirely inside an unmarked run of `seq`.
    The checksum is rolled by one position per step within a run.
    """
    i = 0
    n = len(seq)
    while i + search_length <= n:
        # jump past the last marked token inside the window
        j = i + search_length - 1
        while j >= i and not marks[j]:
            j -= 1
        if j >= i:
            i = j + 1
            continue

        rolling = RollingAdler32()
        rolling.update_all(seq[i : i + search_length])
        while True:
            yield i, rolling.hash()
            i += 1
            if i + search_length > n or marks[i + search_length - 1]:
                break
            rolling.remove(search_length, seq[i - 1])
            rolling.update(seq[i + search_length - 1])


class RkrGst:
    """
    State of one tiling run: both token sequences, their mark bitmaps,
    the candidates of the latest scan and the accepted tiles.
    """

    def __init__(self, pattern: List[int], text: List[int]):
        self.pattern: List[int] = pattern
        self.text: List[int] = text
        self.pattern_mark: List[bool] = [False] * len(pattern)
        self.text_mark: List[bool] = [False] * len(text)
        self.matches: List[Match] = []  # candidates of the current pass
        self.result: List[Match] = []  # accepted tiles, in acceptance order

    def _build_text_index(self, search_length: int) -> DefaultDict[int, List[int]]:
        text_index: DefaultDict[int, List[int]] = defaultdict(list)
        for i, checksum in unmarked_windows(self.text, self.text_mark, search_length):
            text_index[checksum].append(i)
        return text_index

    def _extend(self, pattern_index: int, text_index: int) -> int:
        pattern = self.pattern
        text = self.text
        pattern_mark = self.pattern_mark
        text_mark = self.text_mark
        k = 0
        while (
            text_index + k < len(text)
            and pattern_index + k < len(pattern)
            and text[text_index + k] == pattern[pattern_index + k]
            and not text_mark[text_index + k]
            and not pattern_mark[pattern_index + k]
        ):
            k += 1
        return k

    def scan_pattern(self, search_length: int) -> int:
        """
        Collect every common substring of at least `search_length` tokens starting
        at an unmarked pattern window, and return the longest length seen.
        A length above 2 * search_length aborts the pass and is returned right away;
        the candidates collected so far are not to be tiled.
        """
        self.matches.clear()
        text_index = self._build_text_index(search_length)
        max_match = 0
        for i, checksum in unmarked_windows(
            self.pattern, self.pattern_mark, search_length
        ):
            # checksum hits are only candidates: verify token by token
            for candidate in text_index.get(checksum, ()):
                k = self._extend(i, candidate)
                if k > 2 * search_length:
                    return k
                if k >= search_length:
                    self.matches.append(Match(i, candidate, k))
                    max_match = max(max_match, k)
        return max_match

    def mark_strings(self) -> int:
        """
        Greedily accept the candidates, longest first, whose spans are still
        unmarked on both sides. Returns the number of accepted tiles.
        """
        accepted = 0
        # sorted() is stable: equal lengths keep their discovery order
        for m in sorted(self.matches, key=lambda x: x.length, reverse=True):
            span = range(m.length)
            if any(
                self.text_mark[m.text_index + i] or self.pattern_mark[m.pattern_index + i]
                for i in span
            ):
                continue
            self.result.append(m)
            for i in span:
                self.text_mark[m.text_index + i] = True
                self.pattern_mark[m.pattern_index + i] = True
            accepted += 1
        self.matches.clear()
        return accepted

    def run(self, initial_search_length: int, minimum_match_length: int) -> List[Match]:
        s = initial_search_length
        while True:
            lmax = self.scan_pattern(s)
            if lmax > 2 * s:
                logging.debug(f"Search length {s}: found a tile of {lmax}, rescanning")
                s = lmax
                continue

            num_candidates = len(self.matches)
            accepted = self.mark_strings()
            logging.debug(
                f"Search length {s}: {num_candidates} candidates, "
                f"max {lmax}, {accepted} tiles accepted"
            )
            if s > 2 * minimum_match_length:
                s //= 2
            elif s > minimum_match_length:
                s = minimum_match_length
            else:
                break
        return self.result


def rkr_gst(
    pattern: Sequence[Hashable],
    text: Sequence[Hashable],
    initial_search_length: int,
    minimum_match_length: int,
) -> List[Match]:
    """
    Tile `pattern` and `text` with maximal non-overlapping common substrings of at
    least `minimum_match_length` tokens, using Running Karp-Rabin Greedy String Tiling.
    The tiles are returned in the order they were accepted.
    """
    check_search_lengths(initial_search_length, minimum_match_length)
    if minimum_match_length > initial_search_length:
        logging.warning(
            f"minimum_match_length {minimum_match_length} exceeds "
            f"initial_search_length {initial_search_length}; starting at the minimum"
        )
        initial_search_length = minimum_match_length

    encoded_pattern, encoded_text = encode_tokens(pattern, text)
    gst = RkrGst(encoded_pattern, encoded_text)
    result = gst.run(initial_search_length, minimum_match_length)
    for m in result:
        assert m.pattern_index + m.length <= len(encoded_pattern)
        assert m.text_index + m.length <= len(encoded_text)
    logging.debug(f"RKR-GST: {len(result)} tiles")
    return result
