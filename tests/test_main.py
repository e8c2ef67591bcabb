import json

import pytest

import main
from gfx_converter.options import ConverterOptions, load_options


@pytest.fixture
def input_file(tmp_path, gfx_data):
    path = tmp_path / "hand.json"
    path.write_text(json.dumps(gfx_data), encoding="utf-8")
    return path


def test_main_writes_transcript(tmp_path, input_file, capsys):
    out = tmp_path / "hand-history.txt"

    code = main.main([str(input_file), "-o", str(out)])

    assert code == 0
    assert out.read_text(encoding="utf-8").startswith("PokerStars Hand #202510260001:")
    assert "Готово!" in capsys.readouterr().out


def test_main_cli_flags_override_options_file(tmp_path, input_file):
    opts = tmp_path / "options.json"
    opts.write_text(json.dumps({"seat_offset": 5, "table_name": "Studio"}), encoding="utf-8")
    out = tmp_path / "hand-history.txt"

    code = main.main(
        [str(input_file), "-o", str(out), "--options", str(opts), "--seat-offset", "1", "--cumulative-board"]
    )

    text = out.read_text(encoding="utf-8")
    assert code == 0
    assert "Table 'Studio' 5-max  (Play Money) Seat #2 is the button" in text
    assert "*** RIVER *** [Th Kc 2s 9d] [3c]" in text


def test_main_missing_input(tmp_path, capsys):
    code = main.main([str(tmp_path / "missing.json"), "-o", str(tmp_path / "x.txt")])

    assert code == 1
    assert "missing.json" in capsys.readouterr().err
    assert not (tmp_path / "x.txt").exists()


def test_main_bad_json(tmp_path, capsys):
    bad = tmp_path / "hand.json"
    bad.write_text("{not json", encoding="utf-8")

    assert main.main([str(bad), "-o", str(tmp_path / "x.txt")]) == 1
    assert "Ошибка JSON" in capsys.readouterr().err


def test_main_empty_hands(tmp_path, capsys):
    empty = tmp_path / "hand.json"
    empty.write_text(json.dumps({"Hands": []}), encoding="utf-8")

    assert main.main([str(empty), "-o", str(tmp_path / "x.txt")]) == 1
    assert not (tmp_path / "x.txt").exists()


def test_load_options_ignores_unknown_keys(tmp_path):
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"seat_offset": 2, "colour": "red"}), encoding="utf-8")

    assert load_options(path) == ConverterOptions(seat_offset=2)


def test_bad_zero_result_mode():
    with pytest.raises(ValueError):
        ConverterOptions(zero_result="split")


def test_options_file_must_be_object(tmp_path):
    path = tmp_path / "options.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(path)
