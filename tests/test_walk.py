import os
import stat

import pytest

from packkit.walk import SkipDir, walk


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    (root / "a").mkdir(parents=True)
    (root / "a" / "x.txt").write_text("x")
    (root / "b.txt").write_text("b")
    (root / "c").mkdir()
    (root / "c" / "y.txt").write_text("y")
    return root


def _recorder(visits):
    def fn(path, info, err):
        visits.append((path, None if info is None else stat.S_ISDIR(info.st_mode), err))

    return fn


def test_walk_visits_in_lexical_order(tree):
    visits = []
    walk(str(tree), _recorder(visits))
    paths = [p for p, _, _ in visits]
    assert paths == [
        str(tree),
        os.path.join(str(tree), "a"),
        os.path.join(str(tree), "a", "x.txt"),
        os.path.join(str(tree), "b.txt"),
        os.path.join(str(tree), "c"),
        os.path.join(str(tree), "c", "y.txt"),
    ]
    assert all(err is None for _, _, err in visits)


def test_walk_reports_directories(tree):
    visits = []
    walk(str(tree), _recorder(visits))
    dirs = {p for p, is_dir, _ in visits if is_dir}
    assert dirs == {str(tree), os.path.join(str(tree), "a"), os.path.join(str(tree), "c")}


def test_skipdir_on_directory_skips_contents(tree):
    visits = []

    def fn(path, info, err):
        visits.append(path)
        if path == os.path.join(str(tree), "a"):
            raise SkipDir

    walk(str(tree), fn)
    assert os.path.join(str(tree), "a", "x.txt") not in visits
    assert os.path.join(str(tree), "b.txt") in visits
    assert os.path.join(str(tree), "c", "y.txt") in visits


def test_skipdir_on_root_returns_quietly(tree):
    visits = []

    def fn(path, info, err):
        visits.append(path)
        raise SkipDir

    walk(str(tree), fn)
    assert visits == [str(tree)]


def test_missing_root_passes_error(tmp_path):
    missing = str(tmp_path / "nope")
    visits = []
    walk(missing, _recorder(visits))
    assert len(visits) == 1
    assert visits[0][0] == missing
    assert visits[0][1] is None
    assert isinstance(visits[0][2], FileNotFoundError)


def test_error_from_walk_fn_propagates(tree):
    def fn(path, info, err):
        if path.endswith("b.txt"):
            raise ValueError("stop here")

    with pytest.raises(ValueError, match="stop here"):
        walk(str(tree), fn)


def test_symlinked_directory_is_followed(tree, tmp_path):
    target = tmp_path / "elsewhere"
    target.mkdir()
    (target / "z.txt").write_text("z")
    os.symlink(target, tree / "link")
    visits = []
    walk(str(tree), _recorder(visits))
    paths = [p for p, _, _ in visits]
    assert os.path.join(str(tree), "link", "z.txt") in paths
    link_entry = [v for v in visits if v[0] == os.path.join(str(tree), "link")]
    assert link_entry and link_entry[0][1] is True


def test_broken_symlink_raises(tree):
    os.symlink(tree / "does-not-exist", tree / "broken")
    with pytest.raises(OSError, match="error evaluating symlink"):
        walk(str(tree), lambda path, info, err: None)