"""Command line driver.

    python -m shopsimulator --servers 2 --self-checkouts 3 --max-queue 2 \\
        --arrivals 0.0 0.5 0.75 1.5 --service-time 1.0

When ``--arrivals`` is omitted, whitespace-separated arrival times are read
from stdin. Prints one line per reported event followed by the summary line
``[<average wait> <served> <left>]``.
"""

from __future__ import annotations

import argparse
import sys

from shopsimulator.config import SimulationConfig
from shopsimulator.distributions import ConstantValue, SequenceValues, Supplier
from shopsimulator.logging_config import configure_from_env, enable_console_logging
from shopsimulator.simulation import run_simulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shopsim",
        description="Shop simulation with human servers and self-checkout counters",
    )
    parser.add_argument("--servers", type=int, default=1, help="number of human servers")
    parser.add_argument("--self-checkouts", type=int, default=0, help="number of self-checkout counters")
    parser.add_argument("--max-queue", type=int, default=0, help="queue capacity per server")
    parser.add_argument(
        "--arrivals", type=float, nargs="*", default=None,
        help="arrival times (read from stdin when omitted)",
    )

    service = parser.add_mutually_exclusive_group()
    service.add_argument("--service-time", type=float, default=None, help="constant service duration")
    service.add_argument("--service-times", type=float, nargs="+", default=None,
                         help="service durations, consumed in the order customers are served")
    service.add_argument("--service-mean", type=float, default=1.0,
                         help="mean of exponential service durations (default)")

    parser.add_argument("--rest-probability", type=float, default=0.0,
                        help="chance a human server rests after each customer")
    parser.add_argument("--rest-mean", type=float, default=1.0, help="mean rest duration")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default=None, help="enable console logging at this level")
    parser.add_argument("--csv", default=None, help="write the event trace to this CSV file")
    parser.add_argument("--plot", default=None, help="save a queue length plot to this PNG file")
    return parser


def _read_arrivals(stream) -> list[float]:
    return [float(token) for token in stream.read().split()]


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    try:
        arrivals = args.arrivals if args.arrivals is not None else _read_arrivals(sys.stdin)
        config = SimulationConfig(
            num_servers=args.servers,
            num_self_checkouts=args.self_checkouts,
            max_queue=args.max_queue,
            arrival_times=arrivals,
            service_time_mean=args.service_mean,
            rest_probability=args.rest_probability,
            rest_time_mean=args.rest_mean,
            seed=args.seed,
        )
        service_time: Supplier | None = None
        if args.service_time is not None:
            service_time = ConstantValue(args.service_time)
        elif args.service_times is not None:
            service_time = SequenceValues(args.service_times)
    except ValueError as e:
        parser.error(str(e))

    result = run_simulation(config, service_time=service_time)
    print(result.output())

    if args.csv:
        result.to_dataframe().to_csv(args.csv, index=False)
    if args.plot:
        from shopsimulator.visual.plots import plot_queue_lengths

        plot_queue_lengths(result, args.plot)


if __name__ == "__main__":
    main()
