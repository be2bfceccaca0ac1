from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.colors import ListedColormap
import pandas as pd

from pilot_eligibility.domain.pilot import PilotProfile
from pilot_eligibility.reference.tables import DEFAULT_TABLES, EligibilityTables
from pilot_eligibility.rules.eligibility import AuthorizationResult
from pilot_eligibility.rules.fleet_filter import compute_eligibility


AUTHORIZED = 0
RANK_MISSING = 1
RATING_MISSING = 2
BOTH_MISSING = 3

cmap = ListedColormap([
    "#2ca02c",  # 0 = authorized (green)
    "#ff7f0e",  # 1 = rank too low (orange)
    "#9467bd",  # 2 = type rating missing (purple)
    "#d62728",  # 3 = both missing (red)
])

STATUS_LABELS = {
    AUTHORIZED: "Authorized",
    RANK_MISSING: "Rank too low",
    RATING_MISSING: "Type rating missing",
    BOTH_MISSING: "Rank and rating missing",
}


@dataclass(frozen=True)
class ReportFrames:
    status_matrix: pd.DataFrame
    authorized_counts: pd.DataFrame
    type_coverage: pd.DataFrame
    rank_distribution: pd.DataFrame


def status_code(result: AuthorizationResult) -> int:
    if result.authorized:
        return AUTHORIZED
    if not result.rank_ok and not result.rating_ok:
        return BOTH_MISSING
    if not result.rank_ok:
        return RANK_MISSING
    return RATING_MISSING


def build_report_frames(
    pilots: Sequence[PilotProfile],
    aircraft_types: Sequence[str],
    tables: EligibilityTables = DEFAULT_TABLES,
) -> ReportFrames:
    pilot_ids = [p.pilot_id for p in pilots]
    types = list(dict.fromkeys(aircraft_types))
    eligible = compute_eligibility(pilots, types, tables=tables)

    # --- Status matrix (pilot x aircraft type) ---
    status_data = {
        t: [status_code(eligible[(p_id, t)]) for p_id in pilot_ids]
        for t in types
    }
    status_matrix = pd.DataFrame(status_data, index=pilot_ids, columns=types, dtype=int)
    status_matrix.index.name = "pilot_id"

    # --- Authorized types per pilot ---
    authorized = status_matrix == AUTHORIZED
    authorized_counts = pd.DataFrame(
        {
            "pilot_id": pilot_ids,
            "rank": [p.rank for p in pilots],
            "n_type_ratings": [len(p.type_ratings) for p in pilots],
            "authorized_types": [int(n) for n in authorized.sum(axis=1)],
        }
    )
    if types:
        authorized_counts["authorized_share"] = authorized_counts["authorized_types"] / len(types)
    else:
        authorized_counts["authorized_share"] = 0.0
    authorized_counts = authorized_counts.sort_values(["authorized_types", "pilot_id"], ascending=[False, True])

    # --- Coverage per aircraft type ---
    rows = []
    for t in types:
        column = status_matrix[t]
        rows.append(
            {
                "aircraft_type": t,
                "required_rank": tables.min_ranks.get(t),
                "required_family": tables.families.get(t),
                "authorized_pilots": int((column == AUTHORIZED).sum()),
                "blocked_by_rank": int(column.isin([RANK_MISSING, BOTH_MISSING]).sum()),
                "blocked_by_rating": int(column.isin([RATING_MISSING, BOTH_MISSING]).sum()),
            }
        )
    type_coverage = pd.DataFrame(
        rows,
        columns=[
            "aircraft_type", "required_rank", "required_family",
            "authorized_pilots", "blocked_by_rank", "blocked_by_rating",
        ],
    )

    # --- Rank distribution (known ranks in rung order, then anything else) ---
    known = [r for r, _ in sorted(tables.rank_order.items(), key=lambda kv: kv[1])]
    counts = pd.Series([p.rank for p in pilots], dtype=object).value_counts()
    order: List[str] = known + sorted(r for r in counts.index if r not in tables.rank_order)
    rank_distribution = pd.DataFrame(
        {
            "rank": order,
            "pilots": [int(counts.get(r, 0)) for r in order],
        }
    )

    return ReportFrames(
        status_matrix=status_matrix,
        authorized_counts=authorized_counts.reset_index(drop=True),
        type_coverage=type_coverage,
        rank_distribution=rank_distribution,
    )


def status_counts(frames: ReportFrames) -> pd.DataFrame:
    """Pilots per aircraft type and status code (one column per code, 0..3)."""
    sm = frames.status_matrix
    return pd.DataFrame(
        {code: (sm == code).sum(axis=0).astype(int) for code in STATUS_LABELS},
        index=sm.columns,
    )


def plot_type_coverage(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    counts = status_counts(frames)
    x = np.arange(len(counts))

    fig, ax = plt.subplots(figsize=(12, 6))
    bottom = np.zeros(len(counts))
    for code, label in STATUS_LABELS.items():
        ax.bar(x, counts[code], bottom=bottom, label=label, color=cmap.colors[code])
        bottom += counts[code].to_numpy()

    ax.set_xticks(x)
    ax.set_xticklabels(counts.index, rotation=45, ha="right", fontsize=11)
    ax.set_ylabel("Pilots", fontsize=12)
    ax.set_title("Pilot Coverage per Aircraft Type", fontsize=16, fontweight="bold")

    ax.yaxis.grid(True, linestyle="--", linewidth=0.6, alpha=0.4)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.legend(fontsize=11, loc="upper left", bbox_to_anchor=(1.02, 1), borderaxespad=0)

    plt.tight_layout()
    plt.savefig(out_dir / "type_coverage.png", dpi=200, bbox_inches="tight")
    plt.close()


def plot_rank_distribution(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    plt.figure()
    plt.bar(frames.rank_distribution["rank"], frames.rank_distribution["pilots"])
    plt.xlabel("Rank")
    plt.ylabel("Pilots")
    plt.title("Pilots per Rank")
    plt.tight_layout()
    plt.savefig(out_dir / "rank_distribution.png", dpi=160)
    plt.close()


def save_plots(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    # 1) Eligibility "heatmap" (pilot x aircraft type)
    sm = frames.status_matrix
    fig, ax = plt.subplots(figsize=(12, 6))

    ax.imshow(
        sm.values,
        aspect="auto",
        cmap=cmap,
        vmin=0,
        vmax=3,
    )

    ax.set_yticks(range(len(sm.index)))
    ax.set_yticklabels(sm.index, fontsize=11)

    ax.set_xticks(range(len(sm.columns)))
    ax.set_xticklabels(sm.columns, rotation=45, ha="right", fontsize=11)

    ax.set_xlabel("Aircraft type", fontsize=12)
    ax.set_ylabel("Pilot", fontsize=12)
    ax.set_title("Aircraft Eligibility", fontsize=16, fontweight="bold")

    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    legend_patches = [mpatches.Patch(color=cmap.colors[code], label=label) for code, label in STATUS_LABELS.items()]
    ax.legend(
        handles=legend_patches,
        fontsize=11,
        loc="upper left",
        bbox_to_anchor=(1.02, 1),
        borderaxespad=0,
    )

    plt.tight_layout()
    plt.savefig(out_dir / "eligibility_matrix.png", dpi=200, bbox_inches="tight")
    plt.close()

    plot_type_coverage(frames, out_dir)
    plot_rank_distribution(frames, out_dir)


def save_tables(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    frames.status_matrix.to_csv(out_dir / "status_matrix.csv")
    frames.authorized_counts.to_csv(out_dir / "authorized_counts.csv", index=False)
    frames.type_coverage.to_csv(out_dir / "type_coverage.csv", index=False)
    frames.rank_distribution.to_csv(out_dir / "rank_distribution.csv", index=False)
