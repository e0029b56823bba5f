"""
Pytest configuration for the cbuild test suite.

Lives at the repository root so the cbuild package is importable without installing it.
"""

import textwrap

import pytest

from cbuild import verbose_print


@pytest.fixture(autouse=True)
def quiet():
	"""Each test starts at verbosity 0 with color off, regardless of what main() set before."""
	verbose_print.set_verbosity(0, color_enabled=False)
	yield
	verbose_print.set_verbosity(0, color_enabled=False)


@pytest.fixture
def project(tmp_path, monkeypatch):
	"""An empty project directory that is also the working directory.
	Returns a helper that writes files relative to it."""
	monkeypatch.chdir(tmp_path)
	monkeypatch.delenv("CC", raising=False)

	def write(path, contents=""):
		full = tmp_path / path
		full.parent.mkdir(parents=True, exist_ok=True)
		full.write_text(textwrap.dedent(contents))
		return full

	write.root = tmp_path
	return write
