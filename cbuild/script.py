import enum
import functools
import sys
from collections import namedtuple

from .containers import FlagString, StringList
from .exceptions import BuildfileError, ConfigError
from .verbose_print import verbose_print


"""API for declaring build targets and the libraries they use

Glossary:
	target: A named build unit producing one output file, configured by a callback
		func(target, mode, system) which declares source dirs, compile flags and libraries.
	library: A dependency, configured by a callback func(library, mode, system) which declares
		include dirs, library dirs and link flags. It is bound to a target together with
		a directory prefix, which is prepended to every directory the library declares.
	mode: DEBUG or RELEASE
	system: The operating system being built for, LINUX or WINDOWS.

Callbacks are only called when a recipe is resolved (see recipe.resolve()), so registering
a target is cheap and registration order is the only thing the script itself records.
"""


class Mode(enum.Enum):
	DEBUG = "debug"
	RELEASE = "release"

	@classmethod
	def from_name(cls, name):
		try:
			return cls(name)
		except ValueError:
			raise ConfigError(f"Unexpected mode {name!r}. Only 'debug' and 'release' are allowed.") from None


class System(enum.Enum):
	LINUX = "linux"
	WINDOWS = "windows"

	@classmethod
	def from_name(cls, name):
		try:
			return cls(name)
		except ValueError:
			raise ConfigError(f"Unknown system {name!r}") from None

	@classmethod
	def current(cls):
		"""The system cbuild itself is running on"""
		return cls.WINDOWS if sys.platform.startswith("win") else cls.LINUX


TargetDescriptor = namedtuple("TargetDescriptor", ["name", "output", "func"])

LibraryBinding = namedtuple("LibraryBinding", ["prefix", "func"])


class Target:
	"""The object passed to a target's callback. Created fresh for every resolution."""
	def __init__(self, name):
		self.name = name
		self.description = ""
		self.source_dirs = StringList()
		self.cflags = FlagString()
		self.libraries = []

	def __repr__(self):
		return f"<Target({self.name!r})>"

	def describe(self, description):
		"""Set a human-readable description. Informational only."""
		self.description = description

	def source_dir(self, directory):
		"""Compile every .c file directly inside directory"""
		self.source_dirs.append(directory)

	def compile_flags(self, flags):
		self.cflags.append(flags)

	def use_library(self, func, prefix=""):
		"""Bind a library callback to this target. Directories the library declares are
		prefixed with prefix, by plain concatenation, so it normally ends with a separator."""
		self.libraries.append(LibraryBinding(str(prefix) if prefix else "", func))


class Library:
	"""The object passed to a library's callback. Created fresh for every binding."""
	def __init__(self):
		self.include_dirs = StringList()
		self.library_dirs = StringList()
		self.lflags = FlagString()

	def include_dir(self, directory):
		self.include_dirs.append(directory)

	def library_dir(self, directory):
		self.library_dirs.append(directory)

	def link_flags(self, flags):
		self.lflags.append(flags)


class Script:
	"""A script holds the registered targets and the name of the default target.
	Generally there is only one script per run, populated by loading a build file.
	"""
	def __init__(self):
		self.targets = []
		self.default = None

	def __repr__(self):
		return f"<Script {[target.name for target in self.targets]} default={self.default!r}>"

	def add_target(self, name, output, func):
		"""Register a target. Duplicate names are accepted, but only the first is ever found."""
		descriptor = TargetDescriptor(name, output, func)
		self.targets.append(descriptor)
		return descriptor

	def set_default(self, name):
		"""Set the target built when none is named. The last call wins."""
		self.default = name

	def get_target(self, name):
		"""Return the first target registered under name, or None"""
		for descriptor in self.targets:
			if descriptor.name == name:
				return descriptor
		return None

	def target_exists(self, name):
		return self.get_target(name) is not None

	def select_target(self, requested=None):
		"""Return the name to build: requested if given, otherwise the default.
		Raises ConfigError if there is no such target."""
		name = requested if requested is not None else self.default
		if name is None:
			raise ConfigError("No target specified and no default target defined.")
		if not self.target_exists(name):
			raise ConfigError(f"No such target {name!r}")
		return name

	def load_buildfile(self, path, system):
		"""Execute the build file at path, which registers targets into this script.
		system is exposed to the file so registration itself can depend on the target OS."""
		injected = {
			"script": self,
			"system": system,
			"Mode": Mode,
			"System": System,
			"DEBUG": Mode.DEBUG,
			"RELEASE": Mode.RELEASE,
			"LINUX": System.LINUX,
			"WINDOWS": System.WINDOWS,
			"add_target": self.add_target,
			"default_target": self.set_default,
			"target": functools.partial(target, self),
			"default": functools.partial(default, self),
			"log": functools.partial(verbose_print, 1),
		}
		try:
			with open(path) as f:
				source = f.read()
		except OSError as e:
			raise ConfigError(f"Could not read build file {path!r}: {e.strerror}") from None
		try:
			exec(compile(source, path, "exec"), injected)
		except Exception as e:
			raise BuildfileError("Unhandled exception while loading build file") from e


def target(script, name, output):
	"""
	Decorator-style registration for build files:
		@target("app", "build/app")
		def app(t, mode, system):
			t.source_dir("src")
	is equivalent to:
		def app(t, mode, system):
			t.source_dir("src")
		app = add_target("app", "build/app", app)
	"""
	def decorator(fn):
		return script.add_target(name, output, fn)
	return decorator


def default(script, descriptor):
	"""Mark a registered target as the default. Intended to be stacked on @target:
		@default
		@target("app", "build/app")
		def app(t, mode, system): ...
	"""
	script.set_default(descriptor.name)
	return descriptor
