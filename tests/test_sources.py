"""Tests for source file discovery."""

import os

import pytest

from cbuild.exceptions import DiscoveryError
from cbuild.sources import discover_sources, is_source


class TestIsSource:

	def test_extension(self):
		assert is_source("main.c")
		assert is_source("a.c")
		assert not is_source("main.cpp")
		assert not is_source("main.C")
		assert not is_source("main.h")
		assert not is_source("readme.md")

	def test_bare_extension_excluded(self):
		assert not is_source(".c")
		assert not is_source("c")


class TestDiscoverSources:

	@pytest.fixture
	def src(self, tmp_path):
		src = tmp_path / "src"
		src.mkdir()
		for name in ["a.c", "b.c", "readme.md", "c.cpp", ".c"]:
			(src / name).write_text("")
		return src

	def test_only_c_files(self, src):
		files = discover_sources(str(src), [])
		assert sorted(files) == sorted([
			str(src) + os.sep + "a.c",
			str(src) + os.sep + "b.c",
		])

	def test_appends_to_existing_list(self, src):
		files = ["existing.c"]
		discover_sources(str(src), files)
		assert files[0] == "existing.c"
		assert len(files) == 3

	def test_trailing_separator_not_doubled(self, src):
		files = discover_sources(str(src) + "/", [])
		assert str(src) + "/a.c" in files

	def test_not_recursive(self, src):
		sub = src / "sub"
		sub.mkdir()
		(sub / "deep.c").write_text("")
		files = discover_sources(str(src), [])
		assert not any(path.endswith("deep.c") for path in files)

	def test_directories_named_like_sources_are_skipped(self, src):
		(src / "dir.c").mkdir()
		files = discover_sources(str(src), [])
		assert not any(path.endswith("dir.c") for path in files)

	def test_empty_directory(self, tmp_path):
		assert discover_sources(str(tmp_path), []) == []

	def test_missing_directory(self, tmp_path):
		with pytest.raises(DiscoveryError) as info:
			discover_sources(str(tmp_path / "missing"), [])
		assert info.value.directory == str(tmp_path / "missing")

	def test_empty_path(self):
		with pytest.raises(DiscoveryError):
			discover_sources("", [])
