#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, List, Tuple

import argparse

import jalcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "jalcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "jalcal[diagnostics]"') from e


def day_of_march(d: date) -> int:
    """1 March = 1; February leap days do not shift it."""
    return (d - date(d.year, 3, 1)).days + 1


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 16.0
    hollow: bool = False


STYLES = {
    "common": Style("Common year (Esfand 29)", "tab:blue", "o", size=12),
    "leap": Style("Leap year (Esfand 30)", "tab:red", "o", size=22, hollow=True),
}


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    leap = np.zeros_like(years, dtype=bool)

    for i, Y in enumerate(years):
        d = jalcal.new_year_day(int(Y))
        y[i] = float(day_of_march(d))
        leap[i] = jalcal.is_leap_year(int(Y))

    return years, y, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Nowruz dates (day of March) across Jalali years.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Jalali year")
    ax.set_ylabel("Nowruz, day of March")
    ax.set_title("Nowruz (1 Farvardin) under the arithmetic calendar")

    x, y, leap = build_series(np, args.start_year, args.end_year)

    # Leap status is that of the year starting on the plotted Nowruz
    for key, mask in (("common", ~leap), ("leap", leap)):
        st = STYLES[key]
        if st.hollow:
            ax.scatter(
                x[mask], y[mask],
                s=st.size,
                marker=st.marker,
                facecolors="none",
                edgecolors=st.color,
                linewidths=1.2,
                alpha=0.8,
                label=st.label,
            )
        else:
            ax.scatter(
                x[mask], y[mask],
                s=st.size,
                marker=st.marker,
                c=st.color,
                linewidths=0.0,
                alpha=0.6,
                label=st.label,
            )

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
