"""Command-line front end: corrected level and coverage interval from observations."""

from __future__ import annotations

import argparse
import logging

import numpy as np

from .analysis import correct_observations
from .noise.error import noise_error
from .schema import DEFAULT_CONFIDENCE, DEFAULT_METHOD, StatsMethod

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description=(
            "Noise-corrected sound level with a coverage interval, from repeated "
            "signal-plus-noise and noise level observations."
        )
    )
    parser.add_argument(
        "--signal-noise",
        type=float,
        nargs="+",
        required=True,
        metavar="DB",
        help="Signal-plus-noise level observations [dB].",
    )
    parser.add_argument(
        "--noise",
        type=float,
        nargs="+",
        required=True,
        metavar="DB",
        help="Noise level observations [dB].",
    )
    parser.add_argument(
        "--method",
        type=str.lower,
        choices=[m.value for m in StatsMethod],
        default=DEFAULT_METHOD.value,
        help=f"Statistics method (default: {DEFAULT_METHOD.value}).",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=DEFAULT_CONFIDENCE,
        help=f"Confidence level of the expanded uncertainties in %% (default: {DEFAULT_CONFIDENCE}).",
    )
    return parser


def _format_level(value: float) -> str:
    return f"{value:0.3f} dB" if np.isfinite(value) else f"{value} dB"


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for the noise-correction workflow."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logger.info(
        "Correcting %d signal-plus-noise and %d noise observations (method=%s, confidence=%.3f%%)",
        len(args.signal_noise),
        len(args.noise),
        args.method,
        args.confidence,
    )
    corrected, sn_stats, n_stats = correct_observations(
        args.signal_noise, args.noise, confidence=args.confidence, method=args.method
    )

    snnr = float(sn_stats.mean[0] - n_stats.mean[0])
    print(
        f"Signal+Noise Level = {_format_level(sn_stats.mean[0])} "
        f"± {sn_stats.u_mean[0]:0.3f} dB (n={sn_stats.n_observations})"
    )
    print(
        f"Noise Level = {_format_level(n_stats.mean[0])} "
        f"± {n_stats.u_mean[0]:0.3f} dB (n={n_stats.n_observations})"
    )
    print(f"SNNR = {snnr:0.3f} dB, noise error = {noise_error(snnr, True):0.3f} dB")
    print(f"Signal Level (Corrected) = {_format_level(corrected.level[0])}")
    print(f"Signal Level (Corrected, Bottom) = {_format_level(corrected.lower[0])}")
    print(f"Signal Level (Corrected, Top) = {_format_level(corrected.upper[0])}")
    print(
        f"Coverage factor k = {sn_stats.coverage_factor:0.4f} "
        f"at {sn_stats.confidence:g}% confidence ({sn_stats.method.value})"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
