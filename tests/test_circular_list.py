import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.circular_list import CircularList, main, run_commands


def ring_of(*names):
    ring = CircularList()
    for name in names:
        ring.add(name)
    return ring


def test_empty_format():
    assert CircularList().format() == "[EMPTY LIST]\n"


def test_format_shows_ring():
    ring = ring_of("a", "b", "c")
    assert ring.format() == "c <- [a, b, c, ] -> a\n"


def test_neighbours_wrap_around():
    ring = ring_of("a", "b", "c")
    assert ring.neighbours("a") == ("c", "b")
    assert ring.neighbours("c") == ("b", "a")


def test_single_element_is_its_own_neighbour():
    ring = ring_of("x")
    assert ring.neighbours("x") == ("x", "x")


def test_duplicate_add_raises():
    ring = ring_of("a")
    with pytest.raises(ValueError):
        ring.add("a")
    assert len(ring) == 1


def test_remove_head_moves_head_forward():
    ring = ring_of("a", "b", "c")
    ring.remove("a")
    assert ring.format() == "c <- [b, c, ] -> b\n"


def test_remove_missing_raises():
    ring = ring_of("a")
    with pytest.raises(KeyError):
        ring.remove("b")
    with pytest.raises(KeyError):
        CircularList().remove("b")


def test_neighbours_missing_raises():
    with pytest.raises(KeyError):
        ring_of("a").neighbours("b")


@given(st.lists(st.text(min_size=1, max_size=4), unique=True, min_size=1, max_size=20))
def test_neighbours_are_consistent(names):
    ring = ring_of(*names)
    for name in names:
        before, after = ring.neighbours(name)
        assert ring.neighbours(after)[0] == name
        assert ring.neighbours(before)[1] == name


def test_run_commands_report():
    lines = ["ADD Ana Maria\n", "ADD Bob\n", "ADD Bob\n", "SHOW Ana Maria\n", "REMOVE Ana Maria\n", "REMOVE Bob\n"]
    report = run_commands(lines).splitlines()
    assert report == [
        "[EMPTY LIST]",
        "[OK ADDED - CREATED NEW HEAD] ADD Ana Maria",
        "Ana Maria <- [Ana Maria, ] -> Ana Maria",
        "[OK ADDED] ADD Bob",
        "Bob <- [Ana Maria, Bob, ] -> Ana Maria",
        "[ERROR ADDING - ALREADY EXIST] ADD Bob",
        "Bob <- [Ana Maria, Bob, ] -> Ana Maria",
        "[OK SHOWING] Bob <- Ana Maria -> Bob",
        "Bob <- [Ana Maria, Bob, ] -> Ana Maria",
        "[OK REMOVING] REMOVE Ana Maria",
        "Bob <- [Bob, ] -> Bob",
        "[OK REMOVING - REMOVED HEAD] REMOVE Bob",
    ]


def test_run_commands_errors_on_missing():
    report = run_commands(["SHOW Zed", "ADD Amy", "SHOW Zed", "REMOVE Zed"])
    assert "[ERROR SHOW - EMPTY LIST] ? <- Zed -> ?\n" in report
    assert "[ERROR SHOW - NOT FOUND] ? <- Zed -> ?\n" in report
    assert "[ERROR REMOVING - NOT FOUND] REMOVE Zed\n" in report


def test_main_writes_report(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("ADD Ann\nSHOW Ann\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == run_commands(["ADD Ann", "SHOW Ann"])
    assert "[ADD] Ann" in capsys.readouterr().out