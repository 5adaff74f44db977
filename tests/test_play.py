import pytest

from binairo.board import Element, GameBoard
from binairo.play import (
    CANT_ADD,
    DEFAULT_INPUTS_FILE,
    OUT_OF_BOARD,
    QUIT,
    CantAdd,
    InvalidInput,
    MoveError,
    OutOfBoard,
    QuitGame,
    StartError,
    StartMethod,
    find_fill_symbol,
    load_inputs,
    parse_number,
    play_move,
    start_board,
)


def _small_board():
    board = GameBoard(2)
    board.fill_from_input('"01 0"')
    return board


@pytest.mark.parametrize("text, expected", [("12", 12), ("007", 7), ("1a", 0), ("-3", 0)])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_empty_raises():
    with pytest.raises(ValueError):
        parse_number("")


@pytest.mark.parametrize("text, expected", [(" 1 ", "1"), ("0", "0"), ("\t0\n", "0")])
def test_find_fill_symbol_accepts(text, expected):
    assert find_fill_symbol(text) == expected


@pytest.mark.parametrize("text", ["01", "2", "", "  ", "a"])
def test_find_fill_symbol_rejects(text):
    assert find_fill_symbol(text) is None


@pytest.mark.parametrize("x_text", ["q", "Q", "quit"])
def test_play_move_quit(x_text):
    with pytest.raises(QuitGame) as info:
        play_move(GameBoard(), x_text, "1", 0)
    assert str(info.value) == QUIT


@pytest.mark.parametrize("x_text, y_text", [("0", "1"), ("7", "1"), ("1", "7"), ("abc", "1"), ("", "1")])
def test_play_move_out_of_board(x_text, y_text):
    with pytest.raises(OutOfBoard) as info:
        play_move(GameBoard(), x_text, y_text, 1)
    assert str(info.value) == OUT_OF_BOARD


def test_play_move_invalid_symbol():
    board = GameBoard()
    with pytest.raises(InvalidInput):
        play_move(board, "1", "1", 2)
    assert board[0, 0] is Element.EMPTY


def test_play_move_occupied_cell():
    board = _small_board()
    with pytest.raises(CantAdd) as info:
        play_move(board, "1", "1", 1)
    assert str(info.value) == CANT_ADD
    assert board[0, 0] is Element.ZERO


def test_play_move_rule_violation_leaves_cell_empty():
    board = GameBoard(6)
    board.fill_from_input('"00' + " " * 34 + '"')
    with pytest.raises(MoveError):
        play_move(board, "3", "1", 0)
    assert board[0, 2] is Element.EMPTY


def test_play_move_places_symbol_by_column_and_row():
    board = GameBoard(6)
    assert play_move(board, "2", "4", "1") is False
    assert board[3, 1] is Element.ONE


def test_play_move_filling_board_wins():
    board = _small_board()
    assert play_move(board, "1", "2", 1) is True
    assert board.is_game_over()


def test_load_inputs(tmp_path):
    path = tmp_path / "boards.txt"
    path.write_text('"01 0"\n"1  1"\n', encoding="utf-8")
    assert load_inputs(path) == ['"01 0"', '"1  1"']


def test_load_inputs_missing(tmp_path):
    with pytest.raises(StartError):
        load_inputs(tmp_path / "missing.txt")


@pytest.mark.parametrize("method", [StartMethod.RANDOM, StartMethod.INPUT])
def test_start_board_size_too_small(method):
    with pytest.raises(StartError):
        start_board(method, 1, "1")


def test_start_board_missing_seed():
    with pytest.raises(StartError):
        start_board(StartMethod.RANDOM, 6, "")


def test_start_board_bad_seed():
    with pytest.raises(StartError):
        start_board(StartMethod.RANDOM, 6, "2")


def test_start_board_random_is_valid_and_repeatable():
    first = start_board(StartMethod.RANDOM, 6, "1")
    second = start_board(StartMethod.RANDOM, 6, " 1 ")
    assert first.size == 6
    assert first.ok_adjacent_symbols() and first.ok_amount_of_symbols()
    assert first.rows == second.rows


def test_start_board_input():
    board = start_board(StartMethod.INPUT, 2, '"01 0"')
    assert board.size == 2
    assert board[0, 1] is Element.ONE
    assert board[1, 0] is Element.EMPTY


def test_start_board_input_invalid():
    with pytest.raises(StartError):
        start_board(StartMethod.INPUT, 2, "01 0")


def test_start_board_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DEFAULT_INPUTS_FILE).write_text('"01 0"\n"1  1"\n', encoding="utf-8")
    board = start_board(StartMethod.FILE, 0, "boards", chooser=lambda lines: lines[-1])
    assert board.size == 2
    assert board[0, 0] is Element.ONE
    assert board[1, 1] is Element.ONE
    assert board[0, 1] is Element.EMPTY


def test_start_board_file_default_chooser(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DEFAULT_INPUTS_FILE).write_text('"01 0"\n', encoding="utf-8")
    board = start_board(StartMethod.FILE, 0, "boards")
    assert board.rows == _small_board().rows


def test_start_board_file_missing_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DEFAULT_INPUTS_FILE).write_text('"01 0"\n', encoding="utf-8")
    with pytest.raises(StartError):
        start_board(StartMethod.FILE, 2, "")


def test_start_board_file_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(StartError):
        start_board(StartMethod.FILE, 2, "boards")


def test_start_board_file_invalid_line(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DEFAULT_INPUTS_FILE).write_text('"0002"\n', encoding="utf-8")
    with pytest.raises(StartError):
        start_board(StartMethod.FILE, 2, "boards", chooser=lambda lines: lines[0])