import pytest

from solong.board import GameMap, MapError, count_lines, parse_map, validate_map

VALID = ["11111", "1PC01", "10E01", "11111"]


def write_map(tmp_path, rows, trailing_newline=True, name="map.ber"):
    path = tmp_path / name
    text = "\n".join(rows) + ("\n" if trailing_newline else "")
    path.write_text(text, encoding="latin-1")
    return path


@pytest.mark.parametrize("trailing", [True, False])
def test_count_lines_matches_rows(tmp_path, trailing):
    path = write_map(tmp_path, VALID, trailing_newline=trailing)
    assert count_lines(path) == len(VALID)


def test_count_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert count_lines(path) == 0


def test_count_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="Impossible to open"):
        count_lines(tmp_path / "nope.ber")


def test_parse_map_reads_grid(tmp_path):
    game_map = parse_map(write_map(tmp_path, VALID))
    assert game_map.rows() == VALID
    assert game_map.width == len(VALID[0])
    assert game_map.height == len(VALID)
    assert game_map.collectibles == 0


def test_parse_map_keeps_empty_trailing_line(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID) + "\n\n")
    game_map = parse_map(path)
    assert game_map.height == len(VALID) + 1
    assert game_map.rows()[-1] == ""


def test_validate_sets_player_and_collectibles(tmp_path):
    game_map = validate_map(parse_map(write_map(tmp_path, VALID)))
    player_row = next(y for y, row in enumerate(VALID) if "P" in row)
    assert game_map.player_y == player_row
    assert game_map.player_x == VALID[player_row].index("P")
    assert game_map.collectibles == sum(row.count("C") for row in VALID)


def test_validate_twice_does_not_double_count(tmp_path):
    game_map = parse_map(write_map(tmp_path, VALID))
    validate_map(game_map)
    validate_map(game_map)
    assert game_map.collectibles == sum(row.count("C") for row in VALID)


@pytest.mark.parametrize(
    "rows, message",
    [
        (["11111", "1PC1", "10E01", "11111"], "The map is not rectangular"),
        (["11111", "1PC00", "10E01", "11111"], "The map is not enclosed"),
        (["11111", "1PCX1", "10E01", "11111"], "Invalid character 'X'"),
        (["11111", "1PCP1", "10E01", "11111"], "There must be exactly 1 player"),
        (["11111", "1PC01", "10001", "11111"], "There must be exactly 1 exit"),
        (["11111", "1PE01", "10E01", "11111"], "There must be exactly 1 exit"),
        (["11111", "1P001", "10E01", "11111"], "There must be exactly 1 collectible"),
    ],
)
def test_validate_errors(tmp_path, rows, message):
    game_map = parse_map(write_map(tmp_path, rows))
    with pytest.raises(MapError) as info:
        validate_map(game_map)
    assert str(info.value) == message


def test_border_checked_before_character(tmp_path):
    rows = ["11X11", "1PC01", "10E01", "11111"]
    with pytest.raises(MapError, match="not enclosed"):
        validate_map(parse_map(write_map(tmp_path, rows)))


def test_empty_map_has_no_player(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="player"):
        validate_map(parse_map(path))


def test_tile_and_copy_are_independent():
    game_map = GameMap(grid=[list(row) for row in VALID], width=5, height=4)
    clone = game_map.copy()
    clone.grid[1][2] = "0"
    assert game_map.tile(2, 1) == "C"
    assert clone.tile(2, 1) == "0"
    assert clone.width == game_map.width