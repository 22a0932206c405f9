"""
Lazy Search Tree Demo — soft vs hard size, height drift, resurrection and
min/max cost under lazy deletion, with a PDF report.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from lazy_search_tree import LazySearchTree

SEED = 42
rng = np.random.default_rng(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "orange": "#f39c12",
    "purple": "#9b59b6",
    "gray": "#7f8c8d",
}

all_figures = []


def save_fig(fig, name, title=None):
    fig.savefig(VIZ_DIR / name, dpi=150, bbox_inches="tight")
    all_figures.append({"fig_path": VIZ_DIR / name, "title": title or name})
    plt.close(fig)


def rebuilt(tree):
    """Fresh tree holding only the live values, inserted in random order."""
    values = np.array(tree.in_order())
    rng.shuffle(values)
    fresh = LazySearchTree()
    for value in values.tolist():
        fresh.insert(value)
    return fresh


# ─────────────────────────────────────────────────────────────
# Example 1: Soft vs hard size under random churn
# ─────────────────────────────────────────────────────────────


def example_1_size_under_churn():
    print("=" * 60)
    print("Example 1: Soft vs Hard Size Under Churn")
    print("=" * 60)

    steps = 4000
    key_space = 1000
    tree = LazySearchTree()
    soft_sizes, hard_sizes, deleted = [], [], []

    keys = rng.integers(0, key_space, size=steps)
    is_insert = rng.random(steps) < 0.55
    for key, insert in zip(keys.tolist(), is_insert.tolist()):
        if insert:
            tree.insert(key)
        elif key in tree:
            tree.remove(key)
        soft_sizes.append(tree.size())
        hard_sizes.append(tree.size_hard())
        deleted.append(tree.deleted_count())

    print(f"  After {steps} ops: size={tree.size()}, size_hard={tree.size_hard()}, "
          f"deleted={tree.deleted_count()}")
    print()

    fig, ax = plt.subplots(figsize=(10, 5))
    x = np.arange(steps)
    ax.plot(x, hard_sizes, color=COLORS["blue"], label="size_hard (all nodes)")
    ax.plot(x, soft_sizes, color=COLORS["green"], label="size (live)")
    ax.fill_between(x, soft_sizes, hard_sizes, color=COLORS["red"], alpha=0.2,
                    label="deleted nodes")
    ax.set_xlabel("Operation")
    ax.set_ylabel("Count")
    ax.set_title("Hard size never shrinks; deleted nodes fill the gap")
    ax.legend()
    ax.grid(True, alpha=0.3)
    save_fig(fig, "01_size_under_churn.png", "Soft vs Hard Size Under Churn")


# ─────────────────────────────────────────────────────────────
# Example 2: Height of the lazy tree vs a rebuilt tree
# ─────────────────────────────────────────────────────────────


def example_2_height_drift():
    print("=" * 60)
    print("Example 2: Height Drift — Lazy vs Rebuilt")
    print("=" * 60)

    tree = LazySearchTree()
    for key in rng.permutation(2000).tolist():
        tree.insert(key)

    fractions = np.linspace(0.0, 0.95, 20)
    order = rng.permutation(2000).tolist()
    lazy_heights, rebuilt_heights = [], []
    removed = 0
    for fraction in fractions:
        target = int(fraction * 2000)
        while removed < target:
            tree.remove(order[removed])
            removed += 1
        lazy_heights.append(tree.height())
        rebuilt_heights.append(rebuilt(tree).height() if tree.size() else -1)
        print(f"  deleted={fraction:5.2f}  lazy height={lazy_heights[-1]:3d}  "
              f"rebuilt height={rebuilt_heights[-1]:3d}")
    print()

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(fractions, lazy_heights, "o-", color=COLORS["blue"], label="lazy tree (all nodes)")
    ax.plot(fractions, rebuilt_heights, "s-", color=COLORS["orange"], label="rebuilt from live values")
    ax.plot(fractions, np.log2(np.maximum(2000 * (1 - fractions), 1)), "--",
            color=COLORS["gray"], label="log2(live)")
    ax.set_xlabel("Fraction of keys deleted")
    ax.set_ylabel("Height")
    ax.set_title("Deleted nodes keep the tree tall")
    ax.legend()
    ax.grid(True, alpha=0.3)
    save_fig(fig, "02_height_drift.png", "Height Drift: Lazy vs Rebuilt")


# ─────────────────────────────────────────────────────────────
# Example 3: Resurrection keeps hard size flat
# ─────────────────────────────────────────────────────────────


def example_3_resurrection():
    print("=" * 60)
    print("Example 3: Resurrection of Deleted Keys")
    print("=" * 60)

    working_set = rng.permutation(500).tolist()
    tree = LazySearchTree()
    for key in working_set:
        tree.insert(key)

    cycles = 30
    soft_sizes, hard_sizes = [], []
    for _ in range(cycles):
        evicted = rng.choice(working_set, size=200, replace=False).tolist()
        for key in evicted:
            tree.remove(key)
        soft_sizes.append(tree.size())
        hard_sizes.append(tree.size_hard())
        for key in evicted:
            tree.insert(key)
        soft_sizes.append(tree.size())
        hard_sizes.append(tree.size_hard())

    print(f"  {cycles} evict/reinsert cycles: size_hard stayed at {max(hard_sizes)}")
    print()

    fig, ax = plt.subplots(figsize=(10, 5))
    x = np.arange(len(soft_sizes))
    ax.step(x, hard_sizes, where="post", color=COLORS["blue"], label="size_hard")
    ax.step(x, soft_sizes, where="post", color=COLORS["green"], label="size")
    ax.set_xlabel("Half-cycle (evict, reinsert)")
    ax.set_ylabel("Count")
    ax.set_ylim(0, 550)
    ax.set_title("Reinserting a deleted key un-flags its node instead of allocating")
    ax.legend()
    ax.grid(True, alpha=0.3)
    save_fig(fig, "03_resurrection.png", "Resurrection Keeps Hard Size Flat")


# ─────────────────────────────────────────────────────────────
# Example 4: find_min cost with a deleted prefix
# ─────────────────────────────────────────────────────────────


def example_4_min_cost():
    print("=" * 60)
    print("Example 4: find_min With Deleted Smallest Keys")
    print("=" * 60)

    n = 3000
    tree = LazySearchTree()
    for key in rng.permutation(n).tolist():
        tree.insert(key)

    prefixes = np.linspace(0, n - 1, 15).astype(int)
    timings = []
    removed = 0
    for prefix in prefixes.tolist():
        while removed < prefix:
            tree.remove(removed)
            removed += 1
        start = time.perf_counter()
        for _ in range(20):
            smallest = tree.find_min()
        timings.append((time.perf_counter() - start) / 20 * 1e6)
        assert smallest == prefix
        print(f"  deleted prefix={prefix:5d}  find_min={smallest:5d}  {timings[-1]:9.1f} us")
    print()

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(prefixes, timings, "o-", color=COLORS["purple"])
    ax.set_xlabel("Number of smallest keys deleted")
    ax.set_ylabel("find_min time (us)")
    ax.set_title("find_min walks past every deleted node before the first live one")
    ax.grid(True, alpha=0.3)
    save_fig(fig, "04_min_cost.png", "find_min Cost With a Deleted Prefix")


# ─────────────────────────────────────────────────────────────
# PDF Report
# ─────────────────────────────────────────────────────────────


def generate_pdf_report():
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig = plt.figure(figsize=(10, 7.5))
        fig.text(0.5, 0.65, "Lazy Search Tree", ha="center", va="center",
                 fontsize=32, fontweight="bold")
        fig.text(0.5, 0.55, "BST with Lazy Deletion", ha="center", va="center",
                 fontsize=22, color="gray")
        fig.text(0.5, 0.30, f"Seed: {SEED}", ha="center", va="center",
                 fontsize=12, color="gray")

        summary_lines = [
            "1. remove() flags a node as deleted; the node stays in the shape",
            "2. size() counts live values, size_hard() counts every node",
            "3. Height is measured over all nodes, deleted or not",
            "4. Reinserting a deleted key resurrects the existing node",
            "5. find_min/find_max skip deleted extremes",
        ]
        y_start = 0.22
        for i, line in enumerate(summary_lines):
            fig.text(0.1, y_start - i * 0.03, line, ha="left", va="center", fontsize=9)

        fig.patch.set_facecolor("white")
        pdf.savefig(fig)
        plt.close(fig)

        for entry in all_figures:
            fig = plt.figure(figsize=(10, 7.5))
            img = plt.imread(str(entry["fig_path"]))
            ax = fig.add_axes([0.02, 0.05, 0.96, 0.88])
            ax.imshow(img)
            ax.axis("off")
            if entry["title"]:
                fig.text(0.5, 0.97, entry["title"], ha="center", va="top",
                         fontsize=14, fontweight="bold")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


# ─────────────────────────────────────────────────────────────
# Main
# ─────────────────────────────────────────────────────────────


def main():
    print()
    print("*" * 60)
    print("  LAZY SEARCH TREE DEMO")
    print("*" * 60)
    print()

    example_1_size_under_churn()
    example_2_height_drift()
    example_3_resurrection()
    example_4_min_cost()
    generate_pdf_report()

    print("=" * 60)
    print("All examples complete!")
    print(f"  Visualizations: {VIZ_DIR}/")
    print(f"  PDF Report:     {REPORT_PATH}")
    print("=" * 60)


if __name__ == "__main__":
    main()
