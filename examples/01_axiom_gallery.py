"""
Example 01: Axiom Gallery

Demonstrates:
1. Building the default sheet on a 500 x 500 canvas.
2. Folding it with each of the seven Huzita–Hatori axioms.
3. Serializing the results the way a UI would consume them.
4. Previewing every fold: both halves plus the flap folded over the crease.

Canvas coordinates grow rightwards and downwards, as in the browser.
"""

import logging

import matplotlib.pyplot as plt

from pga_axioms.axioms import Axiom
from pga_axioms.folding import Paper, fold, result_to_json
from pga_axioms.utils import SolverConfig

# =============================================================================
# 1. Inputs for every axiom (points first, then lines)
# =============================================================================

INPUTS = {
    Axiom.ONE: ([(150, 100), (350, 400)], []),
    Axiom.TWO: ([(100, 150), (380, 300)], []),
    Axiom.THREE: ([], [(1, 0, -120), (0, 1, -380)]),
    Axiom.FOUR: ([(300, 200)], [(1, 1, -500)]),
    Axiom.FIVE: ([(250, 100), (250, 250)], [(0, 1, -375)]),
    Axiom.SIX: ([(200, 150), (300, 400)], [(0, 1, -420), (1, 0, -80)]),
    Axiom.SEVEN: ([(300, 300)], [(0, 1, -250), (1, 1, -600)]),
}


# =============================================================================
# 2. Preview
# =============================================================================

def _draw_polygon(ax, polygon, **kwargs):
    if not polygon:
        return
    xs = [p.x for p in polygon] + [polygon[0].x]
    ys = [p.y for p in polygon] + [polygon[0].y]
    ax.fill(xs, ys, **kwargs)


def plot_result(ax, paper, result, title):
    """Draw the sheet halves and the folded flap of one result."""
    ax.set_title(title)
    ax.set_xlim(0, 500)
    ax.set_ylim(500, 0)
    ax.set_aspect('equal')

    if result is None:
        _draw_polygon(ax, paper.corners(), facecolor='#dddddd', edgecolor='black')
        ax.text(250, 250, "no fold", ha='center')
        return

    _draw_polygon(ax, result.positive, facecolor='#4ECDC4', edgecolor='black', alpha=0.8)
    _draw_polygon(ax, result.negative, facecolor='#FF6B6B', edgecolor='black', alpha=0.8)
    _draw_polygon(ax, result.folded(), facecolor='none', edgecolor='#1a1a2e', linestyle='--')


# =============================================================================
# 3. Main
# =============================================================================

def main():
    logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    paper = Paper.centered(500, 500)
    config = SolverConfig()

    fig, axes = plt.subplots(2, 4, figsize=(16, 8))
    for ax, (axiom, (points, lines)) in zip(axes.flat, INPUTS.items()):
        result = fold(paper, axiom, points, lines, config)
        print(f"Axiom {int(axiom)}: {result_to_json(result)}")
        plot_result(ax, paper, result, f"Axiom {int(axiom)}")
    axes.flat[-1].axis('off')

    plt.tight_layout()
    plt.savefig("01_axiom_gallery.png", dpi=150, bbox_inches='tight')
    plt.close(fig)
    print("Saved 01_axiom_gallery.png")


if __name__ == "__main__":
    main()
