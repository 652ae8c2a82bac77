import json
import pytest
from logrank.cli import main

@pytest.fixture
def log_file(tmp_path):
    p = tmp_path / "app.log"
    p.write_text("Error: Disk full\nWarning: Memory low\nerror: network down\nError: Disk full\n", encoding="utf-8")
    return p

def test_prints_list_literal(log_file, capsys):
    assert main([str(log_file), "2"]) == 0
    assert capsys.readouterr().out.strip() == '[("error", 3), ("disk", 2)]'

def test_k_zero_prints_empty(log_file, capsys):
    assert main([str(log_file), "0"]) == 0
    assert capsys.readouterr().out.strip() == "[]"

def test_default_k_from_env(log_file, capsys, monkeypatch):
    monkeypatch.setenv("LOGRANK_DEFAULT_K", "1")
    assert main([str(log_file)]) == 0
    assert capsys.readouterr().out.strip() == '[("error", 3)]'

def test_default_k_fallback(log_file, capsys, monkeypatch):
    monkeypatch.delenv("LOGRANK_DEFAULT_K", raising=False)
    assert main([str(log_file)]) == 0
    out = capsys.readouterr().out.strip()
    assert out == '[("error", 3), ("disk", 2), ("full", 2), ("down", 1), ("low", 1)]'

def test_bad_env_default(log_file, capsys, monkeypatch):
    monkeypatch.setenv("LOGRANK_DEFAULT_K", "lots")
    assert main([str(log_file)]) == 2
    assert "LOGRANK_DEFAULT_K" in capsys.readouterr().err

def test_json_and_csv(log_file, tmp_path, capsys):
    out_csv = tmp_path / "out" / "top.csv"
    assert main([str(log_file), "2", "--json", "--out-csv", str(out_csv)]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows[0] == {"rank": 1, "word": "error", "count": 3}
    assert out_csv.read_text().splitlines()[0] == "rank,word,count"

def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.log"), "3"]) == 2
    assert "file not found" in capsys.readouterr().err

def test_undecodable_file(tmp_path, capsys):
    p = tmp_path / "bin.log"
    p.write_bytes(b"\xff\xfe\xfa error")
    assert main([str(p), "3"]) == 1
    assert "cannot read" in capsys.readouterr().err

@pytest.mark.parametrize("bad_k", ["-1", "two"])
def test_invalid_k_is_usage_error(log_file, bad_k):
    with pytest.raises(SystemExit) as exc:
        main([str(log_file), bad_k])
    assert exc.value.code == 2

@pytest.mark.parametrize("bad_k", ["1_0", "٣", "+3"])
def test_k_must_be_plain_decimal(log_file, bad_k):
    with pytest.raises(SystemExit) as exc:
        main([str(log_file), bad_k])
    assert exc.value.code == 2

def test_k_accepts_padded_digits(log_file, capsys):
    assert main([str(log_file), " 1 "]) == 0
    assert capsys.readouterr().out.strip() == '[("error", 3)]'

def test_directory_input_is_read_error(tmp_path, capsys):
    assert main([str(tmp_path), "3"]) == 1
    err = capsys.readouterr().err
    assert "cannot read" in err
    assert "file not found" not in err

def test_unwritable_csv_target(log_file, tmp_path, capsys):
    target = tmp_path / "reports"
    target.mkdir()
    assert main([str(log_file), "2", "--out-csv", str(target)]) == 1
    captured = capsys.readouterr()
    assert captured.out.strip() == '[("error", 3), ("disk", 2)]'
    assert "cannot write" in captured.err
