"""
Demonstration: Metropolis sampling of a 1-d Normal distribution.

Runs a chain on N(mean, stddev^2) with heavy thinning and prints one sample
per line.
"""

import argparse
import logging
import sys

from mhsampler.core.config import SamplerConfig
from mhsampler.core.errors import InvalidConfiguration
from mhsampler.densities.normal import Normal1dDensity
from mhsampler.samplers.single_chain import MetropolisSampler
from mhsampler.utils.logging import MetropolisLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mhsampler",
        description="Draw Metropolis samples from a 1-d Normal distribution.",
    )
    parser.add_argument("--mean", type=float, default=0.0, help="mean of the target (default: 0)")
    parser.add_argument("--stddev", type=float, default=10.0, help="standard deviation of the target (default: 10)")
    parser.add_argument("--step-size", type=float, default=1.0, help="half-width of the uniform proposal (default: 1)")
    parser.add_argument("--thinning", type=int, default=10000, help="discarded transitions per sample (default: 10000)")
    parser.add_argument("--samples", type=int, default=10, help="number of samples to print (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write log records to this file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger = MetropolisLogger.get_logger(
        "mhsampler", level=getattr(logging, args.log_level), log_file=args.log_file
    )

    try:
        config = SamplerConfig(thinning=args.thinning, seed=args.seed)
        # Independent streams for proposals and accept/reject draws
        proposal_seed = None if args.seed is None else args.seed + 1
        density = Normal1dDensity(args.mean, args.stddev, step_size=args.step_size, rng=proposal_seed)
        if args.samples < 0:
            raise InvalidConfiguration(f"Number of samples must be non-negative, got {args.samples}.")
    except InvalidConfiguration as exc:
        print(f"mhsampler: error: {exc}", file=sys.stderr)
        return 2

    sampler = MetropolisSampler.from_config(density, config)
    logger.info("Sampling %d values from %r with thinning %d", args.samples, density, config.thinning)

    for _ in range(args.samples):
        print("%f" % sampler.next_sample())

    logger.info("Acceptance rate: %.3f", sampler.acceptance_rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
