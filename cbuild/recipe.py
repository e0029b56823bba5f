from collections import namedtuple

from .containers import FlagString, StringList
from .exceptions import CBuildError, ResolveError
from .script import Library, Target
from .sources import discover_sources


Recipe = namedtuple("Recipe", [
	"name",
	"description",
	"output",
	"source_dirs", # tuple of directories, in registration order
	"files", # tuple of discovered source files
	"cflags", # str
	"lflags", # str
	"include_dirs", # tuple, already prefixed by the owning library's prefix
	"library_dirs", # as include_dirs
])
Recipe.__doc__ = """The fully resolved build plan for one (target, mode, system).
Self-sufficient: composing the command needs nothing else."""


def call_user(chain, func, *args):
	"""Run a target or library callback, wrapping any failure in a ResolveError"""
	try:
		func(*args)
	except CBuildError:
		raise
	except Exception as e:
		# raise ... from e will include e's traceback in the output
		raise ResolveError(chain, "Callback raised exception") from e


def resolve(script, name, mode, system):
	"""Run the callbacks of the named target and each of its libraries, and merge
	everything they declared into a Recipe.
	The target must exist, callers are expected to have checked with script.select_target().
	"""
	descriptor = script.get_target(name)
	assert descriptor is not None, f"Resolving unknown target {name!r}"
	chain = (descriptor.name,)

	target = Target(descriptor.name)
	call_user(chain, descriptor.func, target, mode, system)

	source_dirs = StringList()
	files = StringList()
	for directory in target.source_dirs:
		source_dirs.append(directory)
		discover_sources(directory, files)

	lflags = FlagString()
	include_dirs = StringList()
	library_dirs = StringList()
	for binding in target.libraries:
		library = Library()
		call_user(chain + (binding.prefix or "<library>",), binding.func, library, mode, system)
		lflags.extend(library.lflags)
		# Prefixing is plain concatenation, the prefix carries its own separator
		include_dirs.extend(binding.prefix + directory for directory in library.include_dirs)
		library_dirs.extend(binding.prefix + directory for directory in library.library_dirs)

	return Recipe(
		name = descriptor.name,
		description = target.description,
		output = descriptor.output,
		source_dirs = source_dirs.freeze(),
		files = files.freeze(),
		cflags = str(target.cflags),
		lflags = str(lflags),
		include_dirs = include_dirs.freeze(),
		library_dirs = library_dirs.freeze(),
	)


def format_recipe(recipe):
	"""Render the recipe as the multi-line report printed in verbose mode"""
	def section(title, values):
		return [f"{title}:"] + [f"\t{value}" for value in values]

	lines = [f"Target: {recipe.name} -> {recipe.output}"]
	if recipe.description:
		lines.append(f"\t{recipe.description}")
	lines += section("Compiler Flags", [recipe.cflags])
	lines += section("Linker Flags", [recipe.lflags])
	lines += section("Include Directories", recipe.include_dirs)
	lines += section("Library Directories", recipe.library_dirs)
	lines += section("Source Directories", recipe.source_dirs)
	lines += section("Source Files", recipe.files)
	return "\n".join(lines)
