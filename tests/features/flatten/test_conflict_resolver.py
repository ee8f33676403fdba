import os

import pytest

from flattener.features.flatten.data.conflict_resolver import resolve_destination, split_name


def test_free_name_is_used_as_is(tmp_path):
    assert resolve_destination(tmp_path, "report.pdf") == tmp_path / "report.pdf"


def test_probing_skips_every_taken_suffix(tmp_path):
    """
    With test.txt and test_1.txt taken, the next free name is test_2.txt.
    """
    (tmp_path / "test.txt").write_text("root")
    (tmp_path / "test_1.txt").write_text("one")

    assert resolve_destination(tmp_path, "test.txt") == tmp_path / "test_2.txt"


def test_gap_in_suffixes_is_filled_first(tmp_path):
    (tmp_path / "test.txt").write_text("root")
    (tmp_path / "test_2.txt").write_text("two")

    assert resolve_destination(tmp_path, "test.txt") == tmp_path / "test_1.txt"


def test_name_without_extension(tmp_path):
    (tmp_path / "Makefile").write_text("all:")

    assert resolve_destination(tmp_path, "Makefile") == tmp_path / "Makefile_1"


def test_suffix_goes_before_final_extension_only(tmp_path):
    (tmp_path / "archive.tar.gz").write_bytes(b"")

    assert resolve_destination(tmp_path, "archive.tar.gz") == tmp_path / "archive.tar_1.gz"


def test_dotfile_has_no_extension(tmp_path):
    (tmp_path / ".bashrc").write_text("")

    assert resolve_destination(tmp_path, ".bashrc") == tmp_path / ".bashrc_1"


def test_existing_directory_counts_as_taken(tmp_path):
    (tmp_path / "data").mkdir()

    assert resolve_destination(tmp_path, "data") == tmp_path / "data_1"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_dangling_symlink_counts_as_taken(tmp_path):
    try:
        os.symlink(tmp_path / "missing", tmp_path / "link.txt")
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert resolve_destination(tmp_path, "link.txt") == tmp_path / "link_1.txt"


def test_custom_exists_probe_is_consulted_each_time(tmp_path):
    taken = {tmp_path / "a.txt", tmp_path / "a_1.txt", tmp_path / "a_2.txt"}
    probes = []

    def exists(path):
        probes.append(path)
        return path in taken

    assert resolve_destination(tmp_path, "a.txt", exists=exists) == tmp_path / "a_3.txt"
    assert len(probes) == 4


@pytest.mark.parametrize("name, expected", [
    ("test.txt", ("test", ".txt")),
    ("noext", ("noext", "")),
    ("a.b.c", ("a.b", ".c")),
    (".hidden", (".hidden", "")),
    ("name.", ("name", "")),
])
def test_split_name(name, expected):
    assert split_name(name) == expected


def test_trailing_dot_is_dropped_from_suffixed_name(tmp_path):
    (tmp_path / "name.").write_text("")

    assert resolve_destination(tmp_path, "name.") == tmp_path / "name_1"
