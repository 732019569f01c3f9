from pathlib import Path

from filejanitor.planner import bucket_name, generate_plan, normalize_extension


def test_normalize_extension_lowercases():
    assert normalize_extension("docs/Report.PDF") == ".pdf"


def test_normalize_extension_without_extension():
    assert normalize_extension("README") == ""


def test_normalize_extension_dotfile_has_none():
    assert normalize_extension(".bashrc") == ""


def test_normalize_extension_uses_last_suffix():
    assert normalize_extension("archive.tar.gz") == normalize_extension("x.gz")


def test_bucket_name_for_empty_extension():
    assert bucket_name("") == "no_extension"


def test_bucket_name_strips_dot():
    assert bucket_name(".txt") == "txt"


def test_generate_plan_destinations(tmp_path):
    files = [tmp_path / "a.TXT", tmp_path / "b", tmp_path / "c.jpg"]
    plan = generate_plan(files, tmp_path)
    assert len(plan) == 3
    by_source = {op.source: op for op in plan}
    assert by_source[tmp_path / "a.TXT"].destination == tmp_path / "txt" / "a.TXT"
    assert by_source[tmp_path / "b"].destination == tmp_path / "no_extension" / "b"
    assert by_source[tmp_path / "c.jpg"].bucket_name == "jpg"


def test_generate_plan_groups_are_contiguous_and_sorted(tmp_path):
    files = [
        tmp_path / "1.png",
        tmp_path / "2.md",
        tmp_path / "3.png",
        tmp_path / "4",
        tmp_path / "5.md",
    ]
    plan = generate_plan(files, tmp_path)
    extensions = [normalize_extension(op.source) for op in plan]
    assert extensions == sorted(extensions)
    buckets = [op.bucket_name for op in plan]
    seen = []
    for b in buckets:
        if not seen or seen[-1] != b:
            assert b not in seen
            seen.append(b)
    assert {op.source for op in plan} == set(files)


def test_generate_plan_bucket_matches_destination(tmp_path):
    files = [tmp_path / "x.Py", tmp_path / "y.py"]
    plan = generate_plan(files, tmp_path)
    for op in plan:
        assert op.destination.parent == Path(tmp_path) / op.bucket_name
        assert op.destination.name == op.source.name
    assert {op.bucket_name for op in plan} == {"py"}


def test_generate_plan_empty(tmp_path):
    assert generate_plan([], tmp_path).operations == []