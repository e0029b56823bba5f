import os
import sys
import traceback

import argh

from .command import DEFAULT_COMPILER, compose_command
from .exceptions import CBuildError, ConfigError
from .recipe import format_recipe, resolve
from .script import Mode, Script, System
from .verbose_print import color, set_verbosity, verbose_print, warn

BUILDFILE_CANDIDATES = ["Buildfile", "Buildfile.py"]

# Value given to --mode and --os when the flag is passed with no value after it
MISSING = ""


@argh.arg("targets", help=" ".join([
	"Target to build. Defaults to the build file's default target. Extra names are ignored.",
	"Unrecognised options (anything starting with -) are rejected with an error,",
	"put a target name that starts with - after -- to build it.",
]))
@argh.arg("--mode", nargs="?", const=MISSING, help="Build mode: debug (default) or release")
@argh.arg("--os", nargs="?", const=MISSING, help="System to build for: linux or windows. Defaults to the current system.")
@argh.arg("--verbose", help="Print the resolved recipe and the compiler command before running it")
@argh.arg("--cc", help="Compiler to invoke. Defaults to $CC, or gcc.")
@argh.arg("--buildfile", "-f", help="Build file path. Defaults to Buildfile or Buildfile.py")
@argh.arg("--no-color", help="Never use color in output")
def main(*targets, mode="debug", os=None, verbose=False, cc=None, buildfile=None, no_color=False):
	set_verbosity(1 if verbose else 0, color_enabled=False if no_color else None)
	try:
		config = parse_config(targets, mode, os, verbose, cc)

		script = Script()
		script.load_buildfile(find_buildfile(buildfile), config.system)

		name = script.select_target(config.target)
		try:
			recipe = resolve(script, name, config.mode, config.system)
		except CBuildError as e:
			raise CBuildError(f"Failed to build target {name!r} recipe") from e

		command = compose_command(recipe, config.compiler)
		verbose_print(1, format_recipe(recipe))
		verbose_print(1, f"Command:\n\t{command}")

		status = command.run()
	except CBuildError as e:
		report(e)
		sys.exit(1)

	if status != 0:
		verbose_print(1, color.red(f"Compiler exited with status {status}"), file=sys.stderr)
		sys.exit(status)


def report(error):
	verbose_print(0, color.red(error), file=sys.stderr)
	cause = error.__cause__
	if isinstance(cause, CBuildError):
		report(cause)
	elif cause is not None:
		traceback.print_exception(cause)


class RunConfig:
	"""The parsed command line. Immutable by convention once parse_config returns it."""
	def __init__(self, mode, system, target, verbose, compiler):
		self.mode = mode
		self.system = system
		self.target = target
		self.verbose = verbose
		self.compiler = compiler

	def __repr__(self):
		return f"<RunConfig {self.mode.value}/{self.system.value} target={self.target!r}>"


def parse_config(targets, mode, system, verbose, compiler):
	"""Validate raw CLI values into a RunConfig.
	A flag given without a value falls back to its default with a warning,
	an unrecognised value raises ConfigError."""
	if mode == MISSING:
		warn("Missing argument for option '--mode'")
		mode = "debug"
	mode = Mode.from_name(mode)

	if system == MISSING:
		warn("Missing argument for option '--os'", v=1)
		system = None
	system = System.current() if system is None else System.from_name(system)

	target = targets[0] if targets else None
	for ignored in targets[1:]:
		warn(f"Ignoring option {ignored!r}", v=1)

	if compiler is None:
		compiler = os.environ.get("CC") or DEFAULT_COMPILER

	return RunConfig(mode, system, target, verbose, compiler)


def find_buildfile(buildfile=None):
	if buildfile is not None:
		return buildfile
	for candidate in BUILDFILE_CANDIDATES:
		if os.path.exists(candidate):
			return candidate
	raise ConfigError("Could not find Buildfile, are you in the right directory?")
