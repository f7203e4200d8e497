import pytest

from mazegen.__main__ import main
from mazegen.domain.types import GenerationConfig
from mazegen.utils.analysis import is_perfect
from mazegen.utils.grid_factory import generate_maze


def test_config_normalizes_algorithm():
    config = GenerationConfig(algorithm="Hunt-and-Kill")
    assert config.algorithm == "hunt_and_kill"


@pytest.mark.parametrize("kwargs", [
    {"rows": 0},
    {"rows": 2.5},
    {"columns": "4"},
    {"seed": -3},
    {"columns": -3},
    {"algorithm": "kruskal"},
    {"style": "unicode"},
])
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        GenerationConfig(**kwargs)


def test_generate_maze_uses_config_seed():
    grid, seed = generate_maze(GenerationConfig(rows=5, columns=6, algorithm="wilsons", seed=17))
    assert seed == 17
    assert (grid.rows, grid.columns) == (5, 6)
    assert is_perfect(grid)


def test_prints_maze_with_algorithm_and_seed(capsys):
    assert main(["--rows", "3", "--columns", "4", "--algorithm", "sidewinder", "--seed", "7"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Sidewinder (seed 7)"
    maze = lines[1:8]
    assert maze[0] == "+---+---+---+---+"
    assert maze[-1] == "+---+---+---+---+"


def test_same_seed_same_output(capsys):
    args = ["--rows", "6", "--columns", "6", "--algorithm", "aldous-broder", "--seed", "3"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    assert capsys.readouterr().out == first


def test_all_algorithms(capsys):
    assert main(["--rows", "4", "--columns", "4", "--algorithm", "all", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    for title in ["Sidewinder", "Aldous-Broder", "Wilson's", "Hunt-and-Kill", "Backtracker"]:
        assert f"{title} (seed 1)" in out


def test_stats_and_compact_style(capsys):
    assert main(["--rows", "2", "--columns", "5", "--style", "compact", "--stats", "--seed", "9"]) == 0
    out = capsys.readouterr().out
    assert "________________" in out
    assert "Links: 9" in out
    assert "Perfect maze: yes" in out


def test_unknown_algorithm_is_an_error(capsys):
    assert main(["--algorithm", "prims"]) == 1
    assert capsys.readouterr().out.startswith("Error: Unknown algorithm")


def test_bad_dimensions_are_an_error(capsys):
    assert main(["--rows", "0"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_negative_seed_is_an_error(capsys):
    assert main(["--seed", "-1"]) == 1
    assert capsys.readouterr().out.startswith("Error: Seed must be")


def test_bad_style_exits_through_argparse():
    with pytest.raises(SystemExit) as excinfo:
        main(["--style", "fancy"])
    assert excinfo.value.code == 2
