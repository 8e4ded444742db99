import numpy as np

import run
from strategies import always_stay, generate_strategies


def test_main_prints_full_report(capsys):
    assert run.main(["--doors", "3", "--trials", "300", "--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "Doors: 3" in out
    assert "Trials: 300" in out
    assert "There are 2 auto-generated unique strategies." in out
    for name in ["stay", "switch", "never repeat", "return to original door at end if available"]:
        assert f"Strategy: {name}\n" in out
    assert "Ranked results, least effective to most effective:" in out


def test_main_ranks_worst_first(capsys):
    run.main(["--doors", "4", "--trials", "2000", "--seed", "5"])
    out = capsys.readouterr().out
    ranked = out.split("Ranked results, least effective to most effective:\n")[1]
    lines = [line for line in ranked.splitlines() if line]
    assert len(lines) == 4 + 2
    assert lines[0].startswith("('stay_stay',")
    rates = [float(line.rsplit(",", 1)[1].strip(" )")) for line in lines]
    assert rates == sorted(rates)


def test_main_with_fewer_choices(capsys):
    assert run.main(["--doors", "5", "--max-choices", "3", "--trials", "100", "--seed", "6"]) == 0
    assert "There are 4 auto-generated unique strategies." in capsys.readouterr().out


def test_main_rejects_bad_configuration(capsys):
    assert run.main(["--doors", "2"]) == 2
    captured = capsys.readouterr()
    assert "error: n_doors" in captured.err
    assert "Ranked results" not in captured.out
    assert "Doors:" not in captured.out


def test_main_rejects_zero_trials(capsys):
    assert run.main(["--trials", "0"]) == 2
    assert "error: trials" in capsys.readouterr().err


def test_main_leaves_default_config_alone():
    run.main(["--doors", "3", "--trials", "10"])
    assert run.config['rules']['n_doors'] == 5
    assert run.config['trials'] == 100_000


def test_report_all_returns_one_entry_per_strategy(capsys, small_config):
    config = dict(small_config, verbose=1)
    rankings = run.report_all(config, generate_strategies(3), np.random.default_rng(0))
    assert [name for name, _ in rankings] == list(generate_strategies(3))
    assert "--- Simulating stay_stay ---" in capsys.readouterr().out


def test_print_rankings_sorts_ascending(capsys):
    run.print_rankings([("b", 0.5), ("a", 0.1), ("c", 0.9)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == ["('a', 0.1)", "('b', 0.5)", "('c', 0.9)"]


def test_always_stay_is_reported_by_name(capsys, small_config):
    rankings = run.report_all(small_config, {"stay put": always_stay}, np.random.default_rng(1))
    assert rankings[0][0] == "stay put"
