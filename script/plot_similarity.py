import os
import argparse
import pandas as pd
import matplotlib.pyplot as plt
import numpy as np

# Font size configuration
TITLE_FONT_SIZE = 22
TICK_LABEL_FONT_SIZE = 12
CELL_FONT_SIZE = 10


def similarity_matrix(df: pd.DataFrame, column: str = "Coverage"):
    """
    Builds a symmetric matrix from the pairwise rows; the diagonal is 1.
    """
    names = sorted(set(df["Left"]) | set(df["Right"]))
    pos = {name: i for i, name in enumerate(names)}
    matrix = np.eye(len(names))
    for _, row in df.iterrows():
        i, j = pos[row["Left"]], pos[row["Right"]]
        matrix[i, j] = matrix[j, i] = row[column]
    return names, matrix


def plot_heatmap(csv_file, column="Coverage", output_filename="similarity.svg"):
    df = pd.read_csv(csv_file)
    if df.empty:
        raise ValueError(f"No pairs found in {csv_file}")
    names, matrix = similarity_matrix(df, column)

    size = max(6, len(names))
    fig, ax = plt.subplots(figsize=(size, size))
    image = ax.imshow(matrix, cmap="viridis", vmin=0.0, vmax=1.0)
    ax.set_xticks(np.arange(len(names)))
    ax.set_yticks(np.arange(len(names)))
    ax.set_xticklabels(names, rotation=90, fontsize=TICK_LABEL_FONT_SIZE)
    ax.set_yticklabels(names, fontsize=TICK_LABEL_FONT_SIZE)
    for i in range(len(names)):
        for j in range(len(names)):
            ax.text(
                j,
                i,
                f"{matrix[i, j]:.2f}",
                ha="center",
                va="center",
                color="white" if matrix[i, j] < 0.5 else "black",
                fontsize=CELL_FONT_SIZE,
            )
    title = os.path.splitext(os.path.basename(csv_file))[0]
    ax.set_title(f"{title} ({column})", fontsize=TITLE_FONT_SIZE)
    fig.colorbar(image, ax=ax)

    fig.tight_layout()
    plt.savefig(output_filename)
    plt.close(fig)
    print(f"Saved {output_filename}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Generate a similarity heatmap from a pairwise similarity CSV."
    )
    parser.add_argument("csv_file", type=str, help="Output of pairwise_similarity.py")
    parser.add_argument(
        "-c", "--column", choices=["Coverage", "Edit"], default="Coverage"
    )
    parser.add_argument("-o", "--output", type=str, default="similarity.svg")
    args = parser.parse_args()
    plot_heatmap(args.csv_file, args.column, args.output)
