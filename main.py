#!/usr/bin/env python3
"""
Main script for computing a noise-corrected level with its coverage interval.
"""

# Workflow overview:
# 1) Take repeated level observations of signal-plus-noise (SN) and of noise (N).
# 2) Compute the mean level and the expanded uncertainty of the mean for each
#    set (energy2 method by default, 68.269 % confidence, i.e. k = 1).
# 3) Correct the central value on an energy scale: S = 10*log10(10^(SN/10) - 10^(N/10)).
# 4) Bound it with corrections of (SN + U_SN, N - U_N) and (SN - U_SN, N + U_N).
#
# Example:
#   python main.py --signal-noise 10.2 9.8 10.1 10.0 9.9 --noise 0.3 -0.2 0.1 0.0 -0.1

import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logging.captureWarnings(True)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from soundstats.cli import main as cli_main


def main(argv=None):
    """Main execution function with timing information."""

    start_time = time.time()
    logging.info("Initializing noise-correction workflow")

    status = cli_main(argv)

    total_duration = time.time() - start_time
    logging.info("Total execution time: %.3f seconds", total_duration)
    return status


if __name__ == "__main__":
    sys.exit(main())
