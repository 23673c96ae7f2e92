import os

import pytest

from pathglob.glob import eglob, glob
from pathglob.walk import child_path, list_recursively, walk


@pytest.fixture
def tree(tmp_path, make_files):
    # tmp/
    #   z.txt
    #   a/x.txt
    #   a/b/y.txt
    #   c/
    make_files(tmp_path, ["z.txt", "a/x.txt", "a/b/y.txt"])
    (tmp_path / "c").mkdir()
    return str(tmp_path)


def test_walk_topdown(tree):
    entries = list(walk(tree, True, flavor="posix"))

    assert entries == [
        (tree, ["a", "c"], ["z.txt"]),
        (tree + "/a", ["b"], ["x.txt"]),
        (tree + "/a/b", [], ["y.txt"]),
        (tree + "/c", [], []),
    ]


def test_walk_bottomup(tree):
    dirpaths = [entry.dirpath for entry in walk(tree, False, flavor="posix")]

    assert dirpaths == [tree + "/a/b", tree + "/a", tree + "/c", tree]


def test_walk_entries_unpack_as_triples(tree):
    dirpath, dirnames, filenames = next(walk(tree, flavor="posix"))
    assert dirpath == tree
    assert dirnames == ["a", "c"]
    assert filenames == ["z.txt"]


def test_walk_topdown_prunes_removed_dirnames(tree):
    seen = []
    for entry in walk(tree, True, flavor="posix"):
        seen.append(entry.dirpath)
        if entry.dirpath == tree:
            entry.dirnames.remove("a")

    assert seen == [tree, tree + "/c"]


def test_walk_missing_top_yields_nothing(tmp_path):
    assert list(walk(str(tmp_path / "nope"), flavor="posix")) == []


def test_walk_file_top_yields_nothing(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")
    assert list(walk(str(f), flavor="posix")) == []


def test_walk_is_lazy_and_restartable(tree):
    gen = walk(tree, flavor="posix")
    first = next(gen)
    assert first.dirpath == tree

    assert [e.dirpath for e in walk(tree, flavor="posix")][0] == tree


def test_walk_deep_tree_does_not_recurse(tmp_path):
    deep = tmp_path
    for _ in range(200):
        deep = deep / "d"
    deep.mkdir(parents=True)

    assert len(list(walk(str(tmp_path), flavor="posix"))) == 201


def test_list_recursively_topdown(tree):
    out = list(list_recursively(tree, True, flavor="posix"))

    assert set(out) == {
        tree + "/z.txt",
        tree + "/a",
        tree + "/a/x.txt",
        tree + "/a/b",
        tree + "/a/b/y.txt",
        tree + "/c",
    }
    assert out.index(tree + "/a") < out.index(tree + "/a/x.txt")


def test_list_recursively_bottomup_puts_directories_last(tree):
    out = list(list_recursively(tree, False, flavor="posix"))

    assert out.index(tree + "/a/b/y.txt") < out.index(tree + "/a/b")
    assert out.index(tree + "/a/x.txt") < out.index(tree + "/a")
    assert tree not in out


def test_child_path():
    assert child_path("/", "etc", "/") == "/etc"
    assert child_path("a", "b", "/") == "a/b"
    assert child_path("", "b", "/") == "b"
    assert child_path("c:", "x", "\\") == "c:x"
    assert child_path("c:\\", "x", "\\") == "c:\\x"


@pytest.fixture
def unsearchable_dir(tmp_path):
    # readable but not searchable: names can be listed, entries cannot be stat'ed
    if not hasattr(os, "geteuid") or os.geteuid() == 0:
        pytest.skip("needs a non-root POSIX user")
    locked = tmp_path / "locked"
    (locked / "sub").mkdir(parents=True)
    (locked / "f").write_text("", encoding="utf-8")
    locked.chmod(0o444)
    yield str(tmp_path), str(locked)
    locked.chmod(0o755)


def test_walk_skips_unsearchable_directory(unsearchable_dir):
    top, locked = unsearchable_dir

    entries = {e.dirpath: e for e in walk(top, flavor="posix")}

    assert entries[top].dirnames == ["locked"]
    assert "f" in entries[locked].dirnames + entries[locked].filenames
    assert locked + "/sub" not in entries


def test_glob_into_unsearchable_directory_is_empty(unsearchable_dir):
    top, locked = unsearchable_dir

    assert glob(locked + "/*/", flavor="posix") == []
    assert eglob(top + "/locked/sub/*", flavor="posix") == []
    assert eglob(top + "/**/nothing.txt", flavor="posix") == []
