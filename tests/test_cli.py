from filejanitor.cli import main


def test_missing_directory(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert main([str(missing)]) == 1
    err = capsys.readouterr().err
    assert "Directory not found:" in err
    assert str(missing) in err


def test_empty_directory(tmp_path, capsys):
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Found 0 files." in out
    assert "No files to organize. Exiting." in out


def test_sorts_files_into_buckets(tmp_path, capsys):
    (tmp_path / "a.TXT").write_text("a")
    (tmp_path / "b").write_text("b")
    (tmp_path / "sub").mkdir()
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Found 2 files." in out
    assert "Generated 2 operations." in out
    assert "Execution Complete." in out
    assert (tmp_path / "txt" / "a.TXT").read_text() == "a"
    assert (tmp_path / "no_extension" / "b").read_text() == "b"
    assert not (tmp_path / "a.TXT").exists()
    assert (tmp_path / "sub").is_dir()


def test_reports_counts(tmp_path, capsys):
    (tmp_path / "x.md").write_text("x")
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "(Bucket: md)" in out
    assert "  Processed: 1" in out
    assert "  Success:   1" in out
    assert "  Failures:  0" in out
    assert "[!] Errors:" not in out