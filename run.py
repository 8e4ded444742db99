import argparse
import copy
import sys

import numpy as np

from montyhall import GameSeries, MontyHallError, prepare_config
from strategies import generate_strategies, handwritten_strategies

config = {
    # Below 10,000 the stats are noisy; 1,000,000 is solid but slow across
    # many strategies
    'trials': 100_000,
    # Integer seed for reproducible runs, None for fresh entropy
    'seed': None,
    # 1 for informational output, 2 to dump every trial
    'verbose': 0,
    'rules': {
        # The standard problem has 3
        'n_doors': 5,
        # Length of the choice history including the initial guess.
        #   None -- n_doors - 1, the standard problem
        #   smaller values explore related problems with fewer reveals
        'max_choices': None,
    },
}


def header(config, n_generated):
    print("######################################################")
    print(f"Doors: {config['rules']['n_doors']}")
    print(f"Trials: {config['trials']}")
    print("")
    print("Choice breakdown stats represent the probability of finding prize behind")
    print("each of the chosen doors, starting on the left with the original guess,")
    print("and showing the final choice on the far right.")
    print(f"\nThere are {n_generated} auto-generated unique strategies.")


def report_all(config, strategies, rng):
    """Report every strategy in order and return the (name, win rate) list"""
    rankings = []
    for name, strategy in strategies.items():
        if config['verbose']:
            print(f"--- Simulating {name} ---")
        rankings.append(GameSeries(config, strategy, name=name, rng=rng).report())
    return rankings


def print_rankings(rankings):
    print("")
    print("Ranked results, least effective to most effective:")
    for entry in sorted(rankings, key=lambda entry: entry[1]):
        print(entry)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Monte Carlo comparison of stay/switch strategies for the N-door Monty Hall game")
    parser.add_argument("--doors", type=int, help="Number of doors (at least 3)")
    parser.add_argument("--trials", type=int, help="Trials per strategy")
    parser.add_argument("--max-choices", type=int,
                        help="Choices including the initial guess (default: doors - 1)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible run")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    curr_config = copy.deepcopy(config)

    # Apply overrides
    if args.doors is not None:
        curr_config['rules']['n_doors'] = args.doors
    if args.trials is not None:
        curr_config['trials'] = args.trials
    if args.max_choices is not None:
        curr_config['rules']['max_choices'] = args.max_choices
    if args.seed is not None:
        curr_config['seed'] = args.seed
    curr_config['verbose'] = max(curr_config['verbose'], args.verbose)

    try:
        curr_config = prepare_config(curr_config)
        max_choices = curr_config['rules']['max_choices']
        generated = generate_strategies(max_choices)
        rng = np.random.default_rng(curr_config['seed'])

        header(curr_config, len(generated))
        rankings = report_all(curr_config, generated, rng)
        rankings += report_all(curr_config, handwritten_strategies(max_choices), rng)
    except MontyHallError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print_rankings(rankings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
