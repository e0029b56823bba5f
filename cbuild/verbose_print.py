"""Mechanism for printing at various verbosity levels.
Use set_verbosity to set the global verbosity level.
verbose_print(v, text) wraps print(text) but only runs
if v <= the global verbosity level.

Level 0 is always printed (errors, warnings the user must see),
level 1 is enabled by --verbose.

Also exposes color formatting, which can optionally be disabled.
"""

import re
import sys

verbosity = 0

class Colors:
	enabled = False

	def set(self, enabled):
		self.enabled = enabled

	def make_method(format_code):
		def color_method(self, text):
			return f"\x1b[{format_code}m{text}\x1b[m" if self.enabled else text
		return color_method

	red = make_method("31")
	yellow = make_method("33")
	cyan = make_method("36")

color = Colors()

def set_verbosity(new_verbosity, color_enabled=None):
	"""Set the global verbosity. If color_enabled is None, color is used only when
	stderr is a terminal."""
	global verbosity
	verbosity = new_verbosity
	if color_enabled is None:
		color_enabled = sys.stderr.isatty()
	color.set(color_enabled)

def verbose_print(v, text, file=None):
	# Resolve the stream at call time so redirected sys.stdout is honoured
	if file is None:
		file = sys.stdout
	if v <= verbosity:
		text = str(text)
		if color.enabled:
			text = stack_colors(text)
		print(text, file=file)

def warn(text, v=0):
	"""Print a warning to stderr at the given verbosity level"""
	verbose_print(v, color.yellow(f"Warning: {text}"), file=sys.stderr)

def stack_colors(input):
	"""Takes some text containing SGI escapes and restructures them so that each reset
	escape restores the previous context instead of resetting completely.
	So eg. "{red} foo {blue} bar {reset} baz" would show foo in red, bar in blue,
	then baz in red instead of default."""
	output = ""
	stack = []
	while True:
		# Scan for next escape
		escape = re.search("\x1b\\[([0-9;]*)m", input)
		if escape is None:
			# No more escapes, output the remainder and exit
			output += input
			break
		# Output everything until the next escape, store everything after it for later processing
		output += input[:escape.start()]
		input = input[escape.end():]
		code = escape.group(1)
		if code == "":
			# Restore previous context if any (otherwise just preserve the reset)
			if stack:
				stack.pop()
			code = stack[-1] if stack else ""
		else:
			stack.append(code)
		output += f"\x1b[{code}m"
	return output
