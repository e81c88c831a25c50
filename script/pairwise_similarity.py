#!/usr/bin/python3
import argparse
import itertools
import logging
import os
import sys
import pandas as pd

# import RkrGst from "$PWD/../src/RkrGst.py"
pwd = os.path.dirname(os.path.realpath(__file__))
sys.path.append(os.path.join(pwd, "..", "src"))
import gst_common as gc  # noqa E402
import tile_coverage as tc  # noqa E402
from RkrGst import rkr_gst  # noqa E402


def compare_pair(left, right, initial_search_length, minimum_match_length):
    matches = rkr_gst(left, right, initial_search_length, minimum_match_length)
    return {
        "Tiles": len(matches),
        "Tiled": tc.tiled_length(matches),
        "Coverage": tc.coverage(matches, len(left), len(right)),
        "Longest": tc.longest_tile(matches),
        "Edit": tc.edit_similarity(left, right),
    }


def build_table(
    directory_path, mode, initial_search_length, minimum_match_length, select_text=None
):
    """
    Tiles every unordered pair of files in a directory and returns one row per pair.
    """
    targets = gc.get_target_list(directory_path, select_text)
    tokens = {}
    for target in targets:
        tokens[target] = gc.load_tokens(os.path.join(directory_path, target), mode)
        logging.info(f"Loaded {target}: {len(tokens[target])} tokens")

    rows = []
    for left, right in itertools.combinations(targets, 2):
        row = {"Left": left, "Right": right}
        row.update(
            compare_pair(
                tokens[left], tokens[right], initial_search_length, minimum_match_length
            )
        )
        logging.debug(f"{left} <-> {right}: coverage {row['Coverage']:.4f}")
        rows.append(row)
    return pd.DataFrame(
        rows, columns=["Left", "Right", "Tiles", "Tiled", "Coverage", "Longest", "Edit"]
    )


if __name__ == "__main__":
    env_initial, env_minimum = gc.read_env_configs()
    parser = argparse.ArgumentParser(
        description="Print pairwise RKR-GST similarity of the files in a directory as CSV."
    )
    parser.add_argument("directory", type=str, help="Directory of files to compare")
    parser.add_argument("-m", "--mode", choices=gc.TOKEN_MODES, default="bytes")
    parser.add_argument("-i", "--initial", type=int, default=env_initial)
    parser.add_argument("-n", "--minimum", type=int, default=env_minimum)
    parser.add_argument("-s", "--select", type=str, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    gc.setup_logging(args.verbose)
    if not os.path.isdir(args.directory):
        print(f"Error: {args.directory} is not a valid directory.", file=sys.stderr)
        sys.exit(1)
    try:
        gc.check_search_lengths(args.initial, args.minimum)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    df = build_table(args.directory, args.mode, args.initial, args.minimum, args.select)
    df.to_csv(sys.stdout, index=False, float_format="%.6f")
