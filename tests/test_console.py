import pytest

from disasterprep.console import get_yes_or_no, make_file_selection, make_selection_from


def _feed(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_selection_returns_chosen_index(monkeypatch, capsys):
    _feed(monkeypatch, ["1"])
    assert make_selection_from("Pick one", ["apple", "pear"]) == 1
    out = capsys.readouterr().out
    assert "Pick one" in out
    assert "0 apple" in out
    assert "1 pear" in out


def test_selection_reprompts_out_of_range(monkeypatch, capsys):
    _feed(monkeypatch, ["5", "-1", "0"])
    assert make_selection_from("Pick", ["apple", "pear"]) == 0
    out = capsys.readouterr().out
    assert out.count("Please enter a number between 0 and 1") == 2


def test_selection_reprompts_non_integer(monkeypatch):
    _feed(monkeypatch, ["abc", "2"])
    assert make_selection_from("Pick", ["a", "b", "c"]) == 2


def test_selection_from_empty_list_is_an_error():
    with pytest.raises(ValueError, match="empty list"):
        make_selection_from("Pick", [])


def test_file_selection_filters_by_suffix(monkeypatch, tmp_path):
    for name in ["a.dst", "b.txt", "c.dst"]:
        (tmp_path / name).write_text("")
    _feed(monkeypatch, ["1"])
    assert make_file_selection(".dst", str(tmp_path)) == str(tmp_path) + "/c.dst"


def test_file_selection_keeps_trailing_slash(monkeypatch, tmp_path):
    (tmp_path / "only.dst").write_text("")
    _feed(monkeypatch, ["0"])
    directory = str(tmp_path) + "/"
    assert make_file_selection(".dst", directory) == directory + "only.dst"


def test_file_selection_empty_directory_means_current(monkeypatch, tmp_path):
    (tmp_path / "here.dst").write_text("")
    monkeypatch.chdir(tmp_path)
    _feed(monkeypatch, ["0"])
    assert make_file_selection(".dst", "") == "./here.dst"


def test_file_selection_without_matches_is_an_error(monkeypatch, tmp_path):
    (tmp_path / "b.txt").write_text("")
    with pytest.raises(ValueError):
        make_file_selection(".dst", str(tmp_path))


@pytest.mark.parametrize("answer, expected", [("yes", True), ("Y", True), ("no", False), ("N", False)])
def test_yes_or_no(monkeypatch, answer, expected):
    _feed(monkeypatch, [answer])
    assert get_yes_or_no("Again? ") is expected


def test_yes_or_no_reprompts(monkeypatch, capsys):
    _feed(monkeypatch, ["", "maybe", "y"])
    assert get_yes_or_no("Again? ") is True
    assert capsys.readouterr().out.count("starts with 'Y' or 'N'") == 2