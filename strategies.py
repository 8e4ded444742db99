"""Contestant strategies

A strategy takes the choices made so far (the initial guess first), the doors
it may switch to, the 1-based reveal number and the random generator, and
returns the door to hold next. It must not alter its arguments.
"""
import itertools

ACTIONS = ('stay', 'switch')
SEPARATOR = '_'


def always_stay(choices, available, reveal, rng=None):
    return choices[-1]


def random_switch(choices, available, reveal, rng):
    return available[rng.integers(len(available))]


def never_repeat(choices, available, reveal, rng):
    unused = [door for door in available if door not in choices]
    # Stay if the only other option is a door we already held
    if not unused:
        return choices[-1]
    return unused[rng.integers(len(unused))]


def never_repeat_with_return(max_choices):
    """Build the strategy that goes back to the first door on the last decision

    The last decision happens on reveal max_choices - 1. Any other time, or if
    the first door is gone, it switches at random.
    """
    def strategy(choices, available, reveal, rng):
        if reveal == max_choices - 1 and choices[0] in available:
            return choices[0]
        return random_switch(choices, available, reveal, rng)

    strategy.__name__ = 'never_repeat_with_return'
    return strategy


def generate_strategy(actions):
    """Build a strategy from a sequence such as ('stay', 'switch') or 'stay_switch'

    The action at position reveal - 1 decides whether to stay or switch at random.
    """
    if isinstance(actions, str):
        actions = actions.split(SEPARATOR)
    actions = tuple(actions)
    unknown = sorted(set(actions) - set(ACTIONS))
    if unknown:
        raise ValueError(f"Unknown actions {unknown}, expected {ACTIONS}")

    def strategy(choices, available, reveal, rng):
        if actions[reveal - 1] == 'stay':
            return always_stay(choices, available, reveal, rng)
        return random_switch(choices, available, reveal, rng)

    strategy.__name__ = SEPARATOR.join(actions)
    strategy.actions = actions
    return strategy


def generate_strategies(max_choices):
    """Every stay/switch sequence for the max_choices - 1 rounds that offer a decision"""
    return {
        SEPARATOR.join(actions): generate_strategy(actions)
        for actions in itertools.product(ACTIONS, repeat=max_choices - 1)
    }


def handwritten_strategies(max_choices):
    return {
        "never repeat": never_repeat,
        "return to original door at end if available": never_repeat_with_return(max_choices),
    }
