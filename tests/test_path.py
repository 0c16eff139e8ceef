import pytest

from webserv.path import Path, paths_components_are_equal


@pytest.mark.parametrize("text", ["a//b", "/var///www/app", "//x/", "a/b//"])
def test_repeated_slashes_collapse(text):
    p = Path(text)
    assert "//" not in str(p)
    assert Path(str(p)) == p


def test_equality_with_text_and_hash():
    assert Path("/var/www/app") == "/var/www/app"
    assert hash(Path("/var/www/app")) == hash(Path("/var//www/app"))


def test_ordering_follows_text():
    names = ["/var/www/app", "/etc", "index.html", "a"]
    assert [str(p) for p in sorted(Path(n) for n in names)] == sorted(names)


def test_root_directory():
    assert Path("/var/www").root_directory() == "/"
    assert Path("var/www").root_directory().empty()
    assert Path("/var").root_path() == Path("/var").root_directory()


def test_absolute_and_relative():
    assert Path("/var").is_absolute()
    assert not Path("/var").is_relative()
    assert Path("var").is_relative()


def test_root_and_relative_rebuild_absolute_path():
    p = Path("/var/www/app")
    assert p.root_path() / p.relative_path() == p
    assert Path("www/app").relative_path() == Path("www/app")
    assert Path("/").relative_path().empty()


def test_parent_and_filename_rebuild_path():
    p = Path("/var/www/index.html")
    assert p.parent_path() / p.filename() == p
    assert p.filename() == "index.html"


def test_parent_path_edges():
    assert Path("/var").parent_path() == "/"
    assert Path("index.html").parent_path().empty()
    assert Path().parent_path().empty()


def test_filename_of_trailing_slash_is_empty():
    assert Path("/var/www/").filename().empty()
    assert Path("index.html").filename() == "index.html"


def test_stem_and_extension_make_filename():
    p = Path("www/youtube/demo.php")
    assert str(p.stem()) + str(p.extension()) == str(p.filename())
    assert p.extension() == ".php"


def test_hidden_file_has_no_extension():
    p = Path("/home/.bashrc")
    assert p.extension().empty()
    assert p.stem() == p.filename()


@pytest.mark.parametrize("name", [".", ".."])
def test_dot_names_are_their_own_stem(name):
    assert Path("a/" + name).stem() == name


def test_join_relative_and_absolute():
    base = Path("/var/www")
    assert (base / "app").parent_path() == base
    assert base / "/etc" == Path("/etc")
    assert "/var" / Path("www") == Path("/var/www")


def test_iteration_components():
    assert list(Path("/var/www/app")) == [Path("/"), Path("var"), Path("www"), Path("app")]
    parts = list(Path("var/www/"))
    assert parts[-1].empty()
    assert list(Path()) == []


def test_remove_filename():
    p = Path("/var/www/index.html").remove_filename()
    assert str(p).endswith("/")
    assert p.filename().empty()
    assert Path("index.html").remove_filename().empty()


def test_replace_filename():
    p = Path("/var/www/index.html")
    q = p.replace_filename("error404.html")
    assert q.filename() == "error404.html"
    assert q.parent_path() == p.parent_path()


def test_replace_extension():
    p = Path("www/index.html")
    assert p.replace_extension("php") == p.replace_extension(".php")
    assert p.replace_extension("php").stem() == p.stem()
    assert p.replace_extension() == Path("www") / p.stem()


def test_lexically_normal_documented_examples():
    assert Path("foo/./bar/..").lexically_normal() == "foo/"
    assert Path("/../a").lexically_normal() == Path("/a")
    assert Path("foo/..").lexically_normal() == "."


@pytest.mark.parametrize(
    "text", ["a/./b/../c", "../../x/", "/a/b/../../..", ".", "a/b/c/"]
)
def test_lexically_normal_is_idempotent(text):
    once = Path(text).lexically_normal()
    assert once.lexically_normal() == once
    assert "/./" not in str(once)


def test_lexically_normal_of_empty_stays_empty():
    assert Path().lexically_normal().empty()


def test_components_equal():
    p = Path("/var/www/app")
    assert paths_components_are_equal(p, "/var/www/app") == (True, len(list(p)))


def test_components_differ_at_name():
    equal, same = paths_components_are_equal("/youtube/test", "/youtube/random")
    assert not equal
    assert same == len(list(Path("/youtube")))


def test_components_trailing_empty_counts():
    equal, same = paths_components_are_equal("/youtube/", "/youtube/test")
    assert not equal
    assert same == len(list(Path("/youtube/test")))


def test_components_prefix_only():
    equal, same = paths_components_are_equal("/youtube", "/youtube/test")
    assert not equal
    assert same == len(list(Path("/youtube")))


def test_bytes_rejected():
    with pytest.raises(TypeError):
        Path(b"/var")