import argparse
import json
import sys
from dataclasses import asdict
from .models import SimulationConfig
from .delays import UpdateDelays
from .environment import Environment
from .simulation import Simulation
from .logger import setup_logging, get_logger


def load_delays(path):
    """Read a JSON object of machine_id -> update delay"""
    logger = get_logger("cli")
    try:
        data = json.load(open(path))
        if not isinstance(data, dict):
            raise ValueError("delays file must contain a JSON object")
        delays = {}
        for machine_id, delay in data.items():
            if isinstance(delay, bool) or not isinstance(delay, int):
                raise ValueError(f"update_delay for {machine_id} must be an integer, got {delay!r}")
            if delay < 0:
                raise ValueError(f"update_delay must be >= 0 (got {delay} for {machine_id})")
            delays[machine_id] = delay
        return delays
    except Exception as e:
        logger.error(f"Error loading delays: {e}")
        raise


def save_result(path, result):
    json.dump(asdict(result), open(path, "w"), indent=2)


def main():
    parser = argparse.ArgumentParser(description="Rolling deployment simulator")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--machines", type=int, default=10)
    parser.add_argument("--update-delay", type=int, default=2)
    parser.add_argument("--concurrency", type=int, default=2)
    parser.add_argument("--delays")
    parser.add_argument("--max-ticks", type=int)
    parser.add_argument("--output")

    args = parser.parse_args()
    setup_logging(args.log_level)

    try:
        config = SimulationConfig(args.machines, args.update_delay, args.concurrency, args.max_ticks)
        config.validate()
        delay_map = load_delays(args.delays) if args.delays else {}
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

    environment = Environment.build(config.machine_count, UpdateDelays(delay_map, default=config.update_delay))
    result = Simulation(environment, config.concurrency).run(config.max_ticks)

    if args.output:
        save_result(args.output, result)

    if not result.completed:
        print(f"Error: {result.aborted_reason} after {result.ticks} ticks")
        sys.exit(1)
    print(f"All {config.machine_count} servers up to date after {result.ticks} ticks.")

if __name__ == "__main__":
    main()
