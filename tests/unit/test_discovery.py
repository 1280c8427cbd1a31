import pytest

from enro.application.discovery import collect_files


def test_single_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("hello")
    assert collect_files(path) == [path]


def test_directory_without_recursion_skips_subdirectories(sample_tree):
    names = [p.name for p in collect_files(sample_tree)]
    assert names == ["archive.zip", "empty.dat", "notes.txt", "secret.bin"]


def test_recursive_walk_is_sorted(sample_tree):
    files = collect_files(sample_tree, recursive=True)
    relative = [p.relative_to(sample_tree).as_posix() for p in files]
    assert relative == [
        "archive.zip",
        "empty.dat",
        "notes.txt",
        "secret.bin",
        "nested/report.pdf",
    ]


def test_min_size_filters_small_files(sample_tree):
    names = {p.name for p in collect_files(sample_tree, min_size=1)}
    assert "empty.dat" not in names
    assert "secret.bin" in names


def test_min_size_applies_to_a_single_file(tmp_path):
    path = tmp_path / "small.txt"
    path.write_text("abc")
    assert collect_files(path, min_size=10) == []


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        collect_files(tmp_path / "nope")


def test_symlink_loop_is_walked_once(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "loop").symlink_to(root, target_is_directory=True)
    assert collect_files(root, recursive=True) == [root / "a.txt"]


def test_directory_reached_twice_is_listed_once(tmp_path):
    root = tmp_path / "root"
    inner = root / "inner"
    inner.mkdir(parents=True)
    (inner / "b.txt").write_text("hello")
    (root / "alias").symlink_to(inner, target_is_directory=True)
    files = collect_files(root, recursive=True)
    assert [p.name for p in files] == ["b.txt"]


def test_symlinked_directory_outside_the_tree_is_followed(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    other = tmp_path / "other"
    other.mkdir()
    (other / "c.txt").write_text("hello")
    (root / "ext").symlink_to(other, target_is_directory=True)
    assert collect_files(root, recursive=True) == [root / "ext" / "c.txt"]
    assert collect_files(root, recursive=True, follow_links=False) == []
