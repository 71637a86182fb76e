import pytest

from hotsprings.io.cli import main


def test_counts_and_total(capsys):
    assert main(["???.### 1,1,3", ".??..??...?##. 1,1,3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["???.### 1,1,3: 1", ".??..??...?##. 1,1,3: 4", "Total: 5"]


def test_repeat_and_strategy(capsys):
    assert main(["--repeat", "5", "--strategy", "merged", "????.######..#####. 1,6,5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Total: 2500"


def test_list(capsys):
    assert main(["--list", "????.#...#... 4,1,1", "???.### 1,1,3"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "????.#...#... 4,1,1: 1",
        "  ####.#...#...",
        "???.### 1,1,3: 1",
        "  #.#.###",
    ]


def test_list_rejects_strategy(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--list", "--strategy", "expand", "# 1"])
    assert info.value.code == 2
    assert "--strategy" in capsys.readouterr().err


def test_config_file(tmp_path, capsys):
    path = tmp_path / "options.yaml"
    path.write_text("repeat: 5\nstrategy: expand\n", encoding="utf-8")
    assert main(["--config", str(path), "???.### 1,1,3"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Total: 1"


def test_flags_override_config(tmp_path, capsys):
    path = tmp_path / "options.yaml"
    path.write_text("repeat: 5\n", encoding="utf-8")
    assert main(["--config", str(path), "--repeat", "1", "????.#...#... 4,1,1"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Total: 1"


def test_invalid_record_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        main(["???.### 1,x,3"])
    assert info.value.code == 2
    assert "groups" in capsys.readouterr().err


def test_invalid_repeat(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--repeat", "0", "# 1"])
    assert info.value.code == 2
    assert "repeat" in capsys.readouterr().err


def test_missing_config_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--config", str(tmp_path / "missing.yaml"), "# 1"])
    assert info.value.code == 2
    assert "missing.yaml" in capsys.readouterr().err


def test_malformed_config_file(tmp_path, capsys):
    path = tmp_path / "options.yaml"
    path.write_text("repeat: [1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        main(["--config", str(path), "# 1"])
    assert info.value.code == 2
