import json

from puzzle_source import DEFAULT_PUZZLES, SPANISH_QUOTES_FILE_PATH, load_puzzles, normalize_puzzle_entry


def test_bundled_quotes_file_loads():
    puzzles = load_puzzles(SPANISH_QUOTES_FILE_PATH)
    assert len(puzzles) >= 5
    assert all(p["quote"] and p["language"] == "Spanish" for p in puzzles)


def test_entries_may_be_plain_strings(tmp_path):
    path = tmp_path / "quotes.json"
    path.write_text(json.dumps(["Hola mundo", {"quote": "Adiós", "source": "Anónimo"}, {"quote": ""}, 5]), encoding="utf-8")
    puzzles = load_puzzles(str(path))
    assert puzzles == [
        {"quote": "Hola mundo", "language": "Spanish", "source": ""},
        {"quote": "Adiós", "language": "Spanish", "source": "Anónimo"},
    ]


def test_missing_file_falls_back_to_defaults(tmp_path, capsys):
    puzzles = load_puzzles(str(tmp_path / "missing.json"))
    assert puzzles == DEFAULT_PUZZLES
    assert "未找到" in capsys.readouterr().out


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_puzzles(str(path)) == DEFAULT_PUZZLES


def test_empty_list_falls_back_to_defaults(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    assert load_puzzles(str(path)) == DEFAULT_PUZZLES


def test_normalize_puzzle_entry_rejects_missing_quote():
    assert normalize_puzzle_entry({"language": "Spanish"}) is None
    assert normalize_puzzle_entry(None) is None


def test_non_utf8_file_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'["\xff\xfe bad"]')
    assert load_puzzles(str(path)) == DEFAULT_PUZZLES
    assert "UTF-8" in capsys.readouterr().out
