from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from grill_pairing.domain.geometry import Vec3
from grill_pairing.domain.model import Connector, Frame, PairingResult, SplitAxis
from grill_pairing.domain.services import normalize_frame


def _project(positions: Sequence[Vec3], frame: Frame) -> np.ndarray:
    """Coordinates of `positions` in the frame's (X, Y) basis."""
    pts = np.asarray(positions, dtype=np.float64).reshape(-1, 3) - np.asarray(frame.origin)
    basis = np.column_stack([np.asarray(frame.basis_x), np.asarray(frame.basis_y)])
    return pts @ basis


def save_pairing_plot(
    pairing: PairingResult,
    frame: Frame,
    out_path: str,
    title: str = "Outlet / grill pairing",
    dpi: int = 150,
    annotate: bool = True,
) -> None:
    """Save a plan view (frame X/Y) of outlets, grills and the chosen pairs."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    unit = normalize_frame(frame)

    outlets: List[Connector] = [p.outlet for p in pairing.pairs] + list(pairing.unmatched_outlets)
    targets: List[Connector] = [p.target for p in pairing.pairs] + list(pairing.unmatched_targets)

    fig, ax = plt.subplots(figsize=(7, 6))
    try:
        ax.scatter([0.0], [0.0], s=80, c="k", marker="s", label="inlet")

        if outlets:
            xy = _project([c.position for c in outlets], unit)
            ax.scatter(xy[:, 0], xy[:, 1], s=30, c="tab:blue", label="outlets")
        if targets:
            xy = _project([c.position for c in targets], unit)
            ax.scatter(xy[:, 0], xy[:, 1], s=30, c="tab:red", marker="^", label="grills")

        for i, pair in enumerate(pairing.pairs):
            seg = _project([pair.outlet.position, pair.target.position], unit)
            ax.plot(seg[:, 0], seg[:, 1], "-", c="tab:gray", lw=1)
            if annotate:
                ax.annotate(str(i + 1), tuple(seg.mean(axis=0)), fontsize=7)

        # Trace of the splitting plane through the inlet.
        if pairing.split_axis is SplitAxis.ZX:
            ax.axhline(0.0, c="tab:green", lw=0.8, ls="--")
        else:
            ax.axvline(0.0, c="tab:green", lw=0.8, ls="--")

        ax.set_aspect("equal", adjustable="datalim")
        ax.set_title(f"{title} (split {pairing.split_axis.value})")
        ax.set_xlabel("frame X")
        ax.set_ylabel("frame Y")
        ax.legend(loc="best")
        fig.tight_layout()
        fig.savefig(out_path, dpi=dpi)
        logging.info("Wrote pairing plot: %s", out_path)
    finally:
        plt.close(fig)
