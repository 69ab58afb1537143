"""Tests for source file discovery."""

import pytest

from dbgc.finder import SourceFinder, find_source_files, is_text_file


class TestFinder:
    """Directory walking and filtering."""

    def test_walks_and_skips_dependency_dirs(self, sample_project):
        files = find_source_files(sample_project)
        names = [f.relative_to(sample_project).as_posix() for f in files]
        assert names == ["src/lib.rs", "src/main.c", "src/main.go"]

    def test_single_file(self, write_source):
        path = write_source("one.cpp", 'std::cout << "debug";\n')
        assert find_source_files(path) == [path]

    def test_unsupported_single_file(self, write_source):
        path = write_source("README.md", "# debug\n")
        assert find_source_files(path) == []

    def test_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_source_files(tmp_path / "nope")

    def test_exclude_patterns(self, sample_project):
        files = find_source_files(sample_project, exclude=["*.go", "src/lib.rs"])
        assert [f.name for f in files] == ["main.c"]

    def test_extension_filter(self, sample_project):
        files = find_source_files(sample_project, extensions=[".rs"])
        assert [f.name for f in files] == ["lib.rs"]

    def test_large_and_binary_files_skipped(self, tmp_path):
        (tmp_path / "big.c").write_text("x();\n" * 100, encoding="utf-8")
        (tmp_path / "blob.c").write_bytes(b"\x00\x01printf")
        (tmp_path / "ok.c").write_text('puts("debug");\n', encoding="utf-8")

        finder = SourceFinder(max_file_size=200)
        files = finder.find(tmp_path)
        assert [f.name for f in files] == ["ok.c"]
        assert finder.stats["large_files"] == 1
        assert finder.stats["binary_files"] == 1

    def test_is_text_file(self, tmp_path):
        text = tmp_path / "a.c"
        text.write_text("int x;\n", encoding="utf-8")
        assert is_text_file(text)
        assert not is_text_file(tmp_path / "missing.c")
