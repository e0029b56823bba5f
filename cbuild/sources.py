import os

from .exceptions import DiscoveryError

SOURCE_EXTENSION = ".c"


def is_source(name):
	"""True if name ends in the source extension and has a basename before it.
	The match is case-sensitive, so "x.C" and "x.cpp" are not sources."""
	return len(name) > len(SOURCE_EXTENSION) and name.endswith(SOURCE_EXTENSION)


def discover_sources(directory, files):
	"""Append every source file directly inside directory to the list files.
	Paths are the directory joined to the entry name with the native separator, unless
	directory already ends in one. Order is whatever the filesystem lists, not sorted.
	Subdirectories are not scanned. Raises DiscoveryError if the directory can't be listed.
	"""
	if not directory:
		raise DiscoveryError(directory, "empty path")
	prefix = directory if directory.endswith(("/", "\\")) else directory + os.sep
	try:
		with os.scandir(directory) as entries:
			for entry in entries:
				if is_source(entry.name) and entry.is_file():
					files.append(prefix + entry.name)
	except OSError as e:
		raise DiscoveryError(directory, e.strerror or str(e)) from None
	return files
