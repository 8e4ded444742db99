import copy
import pprint
from collections import defaultdict

import numpy as np


class MontyHallError(Exception):
    """Base class for errors raised by the simulation"""


class ConfigurationError(MontyHallError, ValueError):
    """Door, trial or choice-round settings that cannot produce a valid game"""


class StrategyError(MontyHallError):
    """A strategy picked a door that is neither the held door nor an available switch"""


def prepare_config(config):
    """Return a validated copy of config with defaults filled in

    rules.max_choices defaults to n_doors - 1, the standard puzzle.
    Raises ConfigurationError before anything is simulated.
    """
    config = copy.deepcopy(config)
    rules = config.setdefault('rules', {})
    config.setdefault('verbose', 0)
    config.setdefault('seed', None)

    n_doors = rules.get('n_doors')
    if not isinstance(n_doors, int) or n_doors < 3:
        raise ConfigurationError(f"n_doors must be an integer >= 3, got {n_doors!r}")

    trials = config.get('trials')
    if not isinstance(trials, int) or trials < 1:
        raise ConfigurationError(f"trials must be an integer >= 1, got {trials!r}")

    if rules.get('max_choices') is None:
        rules['max_choices'] = n_doors - 1
    max_choices = rules['max_choices']
    # Each reveal before the last one needs a closed, non-prize, unheld door
    if not isinstance(max_choices, int) or not 2 <= max_choices <= n_doors - 1:
        raise ConfigurationError(
            f"max_choices must be an integer from 2 to {n_doors - 1} for {n_doors} doors, "
            f"got {max_choices!r}")
    return config


class Game:
    def __init__(self, rng=None, n_doors=3, max_choices=None, verbose=0):
        """Configure and initialize a single trial
        rng: our random number generator, shared with the strategy being played
        n_doors (int): total number of doors, one of which hides the prize
        max_choices (int): length of the choice history, initial guess included.
            Defaults to n_doors - 1
        verbose: set to 2 for a dump of every trial
        """
        self.rng = rng or np.random.default_rng()
        self.n_doors = n_doors
        self.max_choices = max_choices or n_doors - 1
        self.verbose = verbose

        self.initialize_state()

    def initialize_state(self):
        self.prize = int(self.rng.integers(self.n_doors))
        # The prize is placed uniformly, so fixing the first guess costs nothing
        self.choices = [0]
        self.available = [door for door in range(self.n_doors) if door != 0]
        self.revealed = []
        self.win = False

    @property
    def held(self):
        return self.choices[-1]

    def pstate(self):
        print(f"prize behind {self.prize} / {self.n_doors} doors")
        pprint.pprint({
            'choices': self.choices,
            'available': self.available,
            'revealed': self.revealed,
        })

    def reveal(self, reveal):
        """Host opens a random door that hides no prize and isn't held

        The held door is never in available, so only the prize needs excluding.
        On the final round there may be nothing left to open; no decision follows
        it, so the reveal is skipped and None returned.
        """
        options = [door for door in self.available if door != self.prize]
        if not options:
            if reveal == self.max_choices:
                return None
            raise ConfigurationError(
                f"No door for the host to open on reveal {reveal} "
                f"with {self.n_doors} doors and {self.max_choices} choices")

        door = options[self.rng.integers(len(options))]
        self.available.remove(door)
        self.revealed.append(door)
        return door

    def choose(self, strategy, reveal):
        """Ask the strategy for the next door and update the bookkeeping"""
        held = self.held
        new_choice = strategy(tuple(self.choices), tuple(self.available), reveal, self.rng)
        if new_choice != held and new_choice not in self.available:
            raise StrategyError(
                f"{getattr(strategy, '__name__', strategy)} chose door {new_choice!r} on "
                f"reveal {reveal}; allowed: held {held} or {self.available}")

        new_choice = int(new_choice)
        if new_choice != held:
            self.available.remove(new_choice)
            # An abandoned door can be switched back to later
            self.available.append(held)
        self.choices.append(new_choice)
        return new_choice

    def play(self, strategy):
        """Run every reveal round against strategy and score the final door"""
        for reveal in range(1, self.max_choices + 1):
            self.reveal(reveal)
            if self.available and reveal != self.max_choices:
                self.choose(strategy, reveal)

        self.win = self.held == self.prize
        if self.verbose > 1:
            self.pstate()
            print("win" if self.win else "loss")
        return self.win


class GameSeries:
    def __init__(self, config, strategy, name=None, rng=None):
        """Evaluate one strategy over config['trials'] independent games"""
        self.config = prepare_config(config)
        self.rng = rng or np.random.default_rng(self.config['seed'])
        self.strategy = strategy
        self.name = name or getattr(strategy, '__name__', repr(strategy))

        # Data collection, owned by this series only
        self.stats = defaultdict(int)
        self.choice_count = np.zeros(self.config['rules']['max_choices'], dtype=int)

    @property
    def trials(self):
        return self.config['trials']

    @property
    def win_rate(self):
        return self.stats['wins'] / self.trials

    @property
    def loss_rate(self):
        return self.stats['losses'] / self.trials

    @property
    def breakdown(self):
        """Fraction of trials with the prize behind the door held at each position"""
        return self.choice_count / self.trials

    def simulate(self):
        self.stats.clear()
        self.choice_count[:] = 0
        for game_idx in range(self.trials):
            if self.config['verbose'] > 1:
                print(f"---Game {game_idx + 1}")
            game = Game(rng=self.rng, verbose=self.config['verbose'], **(self.config['rules']))
            if game.play(self.strategy):
                self.stats['wins'] += 1
            else:
                self.stats['losses'] += 1
            # A door held across several positions is counted at each of them
            for idx, door in enumerate(game.choices):
                self.choice_count[idx] += (door == game.prize)
        return self.stats['wins'], self.stats['losses'], self.choice_count.copy()

    def pstats(self):
        print("")
        print(f"Strategy: {self.name}")
        print(f"  Success: {self.stats['wins']} ({self.win_rate})")
        print(f"  Failure:  {self.stats['losses']}  ({self.loss_rate})")
        print(f"  Choice breakdown: {[float(rate) for rate in self.breakdown]}")

    def report(self):
        """Simulate, print the block and return the (name, win rate) ranking entry"""
        self.simulate()
        self.pstats()
        return self.name, self.win_rate
