import pytest

from huffman_cli import main


def test_compress_and_decompress(tmp_path, capsys):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"command line round trip " * 30)
    packed = tmp_path / "notes.huf"
    restored = tmp_path / "notes.out"

    assert main(["--no-progress", "compress", str(source), str(packed)]) == 0
    assert "Space savings" in capsys.readouterr().out

    assert main(["--no-progress", "decompress", str(packed), str(restored)]) == 0
    assert "Restored 720 bytes" in capsys.readouterr().out
    assert restored.read_bytes() == source.read_bytes()


def test_decompress_invalid_file(tmp_path, capsys):
    bogus = tmp_path / "bogus.huf"
    bogus.write_bytes(b"definitely not huffman")
    assert main(["--no-progress", "decompress", str(bogus), str(tmp_path / "x")]) == 1
    assert "Invalid magic number" in capsys.readouterr().err
    assert not (tmp_path / "x").exists()


def test_missing_input(tmp_path, capsys):
    assert main(["compress", str(tmp_path / "nope"), str(tmp_path / "out")]) == 1
    assert "Error" in capsys.readouterr().err


def test_analyze_with_plot(tmp_path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(b"aaaabbbcc")
    chart = tmp_path / "chart.png"
    assert main(["analyze", str(source), "--top", "2", "--plot", str(chart)]) == 0
    out = capsys.readouterr().out
    assert "Unique characters: 3" in out
    assert "Top 2 most frequent characters:" in out
    assert chart.exists()


def test_batch(tmp_path, capsys):
    first = tmp_path / "one.txt"
    first.write_bytes(b"one one one")
    out_dir = tmp_path / "packed"
    assert main(["--no-progress", "batch", str(out_dir), str(first)]) == 0
    assert (out_dir / "one.huf").exists()
    assert "Batch compression summary" in capsys.readouterr().out

    assert main(["--no-progress", "batch", str(out_dir), str(tmp_path / "gone.txt")]) == 1
    assert "FAILED" in capsys.readouterr().err


@pytest.mark.parametrize("top", ["-1", "many"])
def test_analyze_rejects_bad_top(tmp_path, capsys, top):
    source = tmp_path / "data.bin"
    source.write_bytes(b"aaaabbbcc")
    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(source), "--top", top])
    assert excinfo.value.code == 2
    assert "--top" in capsys.readouterr().err


def test_analyze_top_zero(tmp_path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(b"aaaabbbcc")
    assert main(["analyze", str(source), "--top", "0"]) == 0
    assert "Unique characters: 3" in capsys.readouterr().out
