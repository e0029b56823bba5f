from .verbose_print import color

class CBuildError(Exception):
	"""General exception that should be reported to the user"""


def chain_str(chain):
	return " -> ".join(color.cyan(link) for link in chain)


class ConfigError(CBuildError):
	"""The run configuration or the requested target could not be resolved,
	eg. an unknown mode name or a target that was never registered."""


class BuildfileError(CBuildError):
	"""The build file raised while it was being loaded. The original exception is chained."""


class ResolveError(CBuildError):
	"""
	A user callback failed while a recipe was being resolved.
	Has attached metadata indicating the chain of target and library bindings that led to it.
	"""
	def __init__(self, chain, message):
		self.chain = chain
		self.message = message

	def __str__(self):
		return f"{chain_str(self.chain)}: {self.message}"


class DiscoveryError(CBuildError):
	"""A source directory could not be listed"""
	def __init__(self, directory, message):
		self.directory = directory
		self.message = message

	def __str__(self):
		return f"Cannot scan source directory {self.directory!r}: {self.message}"


class LaunchError(CBuildError):
	"""The compiler process could not be started"""
