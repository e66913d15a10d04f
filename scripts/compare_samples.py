#!/usr/bin/env python3
"""
Print the side-by-side comparison of every built-in sample pair.

Usage:
    python scripts/compare_samples.py [--no-headers]
"""

import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from objcompare.main import main as compare_main
from objcompare.domain.samples import sample_names

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run every sample, stopping at the first failure."""
    extra_args = sys.argv[1:]
    for name in sample_names():
        print("\n" + "=" * 80)
        print(f"SAMPLE: {name}")
        print("=" * 80)
        exit_code = compare_main([name, *extra_args])
        if exit_code != 0:
            logger.error(f"Sample {name} failed with exit code {exit_code}")
            return exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
