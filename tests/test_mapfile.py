import pytest

from solong.mapfile import (
    MapError,
    MapInfo,
    catalog_map,
    check_borders,
    check_map,
    check_solvable,
    describe_map,
    flood_fill,
    is_valid_tile,
    read_map,
    validate_map_path,
)

GOOD = ["111111", "1P0C01", "1000E1", "111111"]


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_validate_accepts_ber_file(tmp_path):
    path = _write(tmp_path, "level.ber", "1")
    assert validate_map_path(path) is None


def test_validate_missing_file(tmp_path):
    with pytest.raises(MapError, match="doesn't exist"):
        validate_map_path(tmp_path / "missing.ber")


def test_validate_wrong_suffix(tmp_path):
    path = _write(tmp_path, "level.txt", "1")
    with pytest.raises(MapError, match="does not end in .ber"):
        validate_map_path(path)


def test_validate_too_short(tmp_path, monkeypatch):
    _write(tmp_path, ".ber", "1")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MapError, match="Len of file not possible"):
        validate_map_path(".ber")


def test_read_map_drops_blank_lines(tmp_path):
    path = _write(tmp_path, "m.ber", "111\n1P1\n\n111\n")
    assert read_map(path) == ["111", "1P1", "111"]


def test_read_map_without_trailing_newline(tmp_path):
    path = _write(tmp_path, "m.ber", "\n".join(GOOD))
    assert read_map(path) == GOOD


@pytest.mark.parametrize("char", list("10CEP"))
def test_valid_tiles(char):
    assert is_valid_tile(char) is True


@pytest.mark.parametrize("char", ["x", " ", "F", "p"])
def test_invalid_tiles(char):
    assert is_valid_tile(char) is False


def test_borders_accept_closed_map():
    assert check_borders(GOOD) is None


@pytest.mark.parametrize(
    "rows",
    [
        [],
        ["", ""],
        ["101", "111"],
        ["111", "0P1", "111"],
        ["111", "1P0", "111"],
        ["111", "1P11", "111"],
        ["111", "1P1", "101"],
    ],
)
def test_borders_reject(rows):
    with pytest.raises(MapError, match="uneven/open"):
        check_borders(rows)


def test_catalog_counts_items():
    info = catalog_map(GOOD)
    assert info.coins == sum(row.count("C") for row in GOOD)
    assert GOOD[info.start[0]][info.start[1]] == "P"
    assert GOOD[info.exit[0]][info.exit[1]] == "E"
    assert (info.players, info.exits) == (1, 1)
    assert info.width == len(GOOD[-1]) - 1
    assert info.depth == len(GOOD) - 1


def test_catalog_rejects_invalid_character():
    with pytest.raises(MapError, match="Invalid character in map: x"):
        catalog_map(["1111", "1Px1", "1111"])


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1P0E1", "11111"],
        ["111111", "1PPCE1", "111111"],
        ["111111", "1PCEE1", "111111"],
        ["11111", "10CE1", "11111"],
    ],
)
def test_catalog_rejects_bad_counts(rows):
    with pytest.raises(MapError, match="item count"):
        catalog_map(rows)


def test_check_map_checks_borders_first():
    with pytest.raises(MapError, match="uneven/open"):
        check_map(["1x1", "1P1", "11"])


def test_check_map_returns_info():
    assert check_map(GOOD) == catalog_map(GOOD)


def test_flood_fill_solvable():
    info = catalog_map(GOOD)
    assert flood_fill(GOOD, info.start, info.coins) is True


def test_flood_fill_leaves_rows_alone():
    rows = list(GOOD)
    info = catalog_map(rows)
    flood_fill(rows, info.start, info.coins)
    assert rows == GOOD


def test_flood_fill_exit_blocks_passage():
    rows = ["11111", "1PEC1", "11111"]
    info = catalog_map(rows)
    assert flood_fill(rows, info.start, info.coins) is False


def test_flood_fill_unreachable_exit():
    rows = ["111111", "1PC1E1", "111111"]
    info = catalog_map(rows)
    assert flood_fill(rows, info.start, info.coins) is False


def test_check_solvable_raises():
    rows = ["1111111", "1PC1C01", "1001E01", "1111111"]
    info = catalog_map(rows)
    with pytest.raises(MapError, match="impossible"):
        check_solvable(rows, info)


def test_check_solvable_accepts_good_map():
    assert check_solvable(GOOD, catalog_map(GOOD)) is None


def test_describe_map_lists_rows_and_counts():
    info = catalog_map(GOOD)
    text = describe_map(GOOD, info)
    assert text.startswith("This is le map!:\n")
    for row in GOOD:
        assert f"{row}\n" in text
    assert f"Collectible/s: {info.coins}\n" in text
    assert f"Player/s: {info.players}\nExit/s: {info.exits}\n" in text
    assert text.endswith(f"Width: {info.width}\nDepth: {info.depth}\n")


def test_map_info_is_frozen():
    info = catalog_map(GOOD)
    assert isinstance(info, MapInfo)
    with pytest.raises(AttributeError):
        info.coins = 5
    assert info.coins == 1
    assert info == catalog_map(GOOD)