"""Minimal pixelcompare example.

Run with:
    python examples/compare_files.py before.png after.png
"""

import sys

import pixelcompare
from pixelcompare.compositor import CompositeSpec, SplitAxis


def main(path_a: str, path_b: str) -> None:
    before = pixelcompare.load_buffer(path_a)
    after = pixelcompare.load_buffer(path_b)

    score = pixelcompare.similarity_of(before, after)
    print(f"similarity: {score:.4f}")

    overlay = pixelcompare.render_comparison(before, after, CompositeSpec.overlay(0.5))
    print(f"overlay:    {overlay.path}")

    split = pixelcompare.render_comparison(
        before, after, CompositeSpec.split(SplitAxis.VERTICAL, divider=True)
    )
    print(f"split view: {split.path}")


if __name__ == "__main__":
    main(sys.argv[1], sys.argv[2])
