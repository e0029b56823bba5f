"""Tests for verbosity-levelled printing and color formatting."""

from cbuild import verbose_print
from cbuild.verbose_print import color, set_verbosity, stack_colors, warn


class TestColors:

	def test_disabled_returns_text(self):
		set_verbosity(0, color_enabled=False)
		assert color.red("x") == "x"
		assert color.yellow("x") == "x"
		assert color.cyan("x") == "x"

	def test_enabled_wraps_text(self):
		set_verbosity(0, color_enabled=True)
		assert color.red("x") == "\x1b[31mx\x1b[m"
		assert color.cyan("x") == "\x1b[36mx\x1b[m"

	def test_stack_colors_restores_outer_color(self):
		text = f"\x1b[31mouter \x1b[36minner\x1b[m after\x1b[m"
		assert stack_colors(text) == "\x1b[31mouter \x1b[36minner\x1b[31m after\x1b[m"


class TestVerbosePrint:

	def test_levels(self, capsys):
		set_verbosity(0, color_enabled=False)
		verbose_print.verbose_print(0, "shown")
		verbose_print.verbose_print(1, "hidden")
		assert capsys.readouterr().out == "shown\n"
		set_verbosity(1, color_enabled=False)
		verbose_print.verbose_print(1, "now shown")
		assert capsys.readouterr().out == "now shown\n"

	def test_warn_goes_to_stderr(self, capsys):
		set_verbosity(0, color_enabled=False)
		warn("careful")
		warn("only when verbose", v=1)
		captured = capsys.readouterr()
		assert captured.err == "Warning: careful\n"
		assert captured.out == ""
