from typing import Dict, Hashable, List, Sequence, Tuple
import os
import logging
import datetime

DEFAULT_INITIAL_SEARCH_LENGTH = 20
DEFAULT_MIN_MATCH_LENGTH = 5
TOKEN_MODES = ("bytes", "words", "lines")


# Configure the logger
def setup_logging(enabled=True):
    if enabled:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.Formatter.converter = lambda *args: datetime.datetime.now(
            tz=datetime.timezone.utc
        ).timetuple()
    else:
        logging.disable(logging.CRITICAL)  # Disables all logging


def check_search_lengths(initial_search_length: int, minimum_match_length: int):
    """
    Reject non-integer or non-positive search lengths before any work is done.
    """
    for name, value in (
        ("initial_search_length", initial_search_length),
        ("minimum_match_length", minimum_match_length),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def encode_tokens(
    pattern: Sequence[Hashable], text: Sequence[Hashable]
) -> Tuple[List[int], List[int]]:
    """
    Map pattern and text onto lists of non-negative ints so that two positions
    are equal iff their tokens are equal.
    bytes keep their values, str uses code points, anything else is interned
    into dense ids in first-seen order (pattern first, then text).
    """
    if pattern is None or text is None:
        raise TypeError("pattern and text must be sequences, not None")

    if isinstance(pattern, (bytes, bytearray)) and isinstance(
        text, (bytes, bytearray)
    ):
        return list(pattern), list(text)
    if isinstance(pattern, str) and isinstance(text, str):
        return [ord(c) for c in pattern], [ord(c) for c in text]

    token_ids: Dict[Hashable, int] = {}

    def _intern(seq: Sequence[Hashable]) -> List[int]:
        ids = []
        for token in seq:
            try:
                token_id = token_ids.setdefault(token, len(token_ids))
            except TypeError:
                raise TypeError(f"token {token!r} is not hashable") from None
            ids.append(token_id)
        return ids

    return _intern(pattern), _intern(text)


def _read_env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


# Default search lengths; env vars override
def read_env_configs() -> Tuple[int, int]:
    initial_search_length = _read_env_int(
        "GST_INITIAL_SEARCH_LENGTH", DEFAULT_INITIAL_SEARCH_LENGTH
    )
    minimum_match_length = _read_env_int(
        "GST_MIN_MATCH_LENGTH", DEFAULT_MIN_MATCH_LENGTH
    )
    check_search_lengths(initial_search_length, minimum_match_length)
    return initial_search_length, minimum_match_length


def load_tokens(path: str, mode: str = "bytes") -> Sequence[Hashable]:
    """
    Read a file as a token sequence.
      bytes: the raw file content
      words: whitespace-separated words of the UTF-8 decoded content
      lines: lines with trailing whitespace stripped
    """
    if mode not in TOKEN_MODES:
        raise ValueError(f"Unknown token mode '{mode}', expected one of {TOKEN_MODES}")
    with open(path, "rb") as f:
        data = f.read()
    if mode == "bytes":
        return data
    decoded = data.decode("utf-8", errors="replace")
    if mode == "words":
        return decoded.split()
    return [line.rstrip() for line in decoded.splitlines()]


def get_target_list(target_dir: str, select_text=None):
    target_list = [
        t for t in os.listdir(target_dir) if os.path.isfile(os.path.join(target_dir, t))
    ]
    # If there is "-s" option, read them by splitting with ","
    target_list = select_text.split(",") if select_text else target_list
    target_list.sort()
    return target_list
