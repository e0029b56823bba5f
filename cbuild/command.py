import os
import shlex
import subprocess

from .exceptions import ConfigError, LaunchError

"""Composes compiler invocations from recipes and runs them."""

DEFAULT_COMPILER = "gcc"


class Command:
	"""
	A builder for options when running the compiler.
	Immutable, all methods return a new Command.

	Methods are additive, so you can define command "stems". eg:
		cc = Command()("gcc", "-Wall")
		cc("-o", "app", "main.c").run()

	Arguments are kept as a list and passed straight to the process, never through a shell,
	so paths containing spaces survive. str() gives a shell-quoted rendering for display.
	"""
	_COPY_ATTRS = ["_args", "_env", "_stdout", "_stderr", "_workdir"]

	def __init__(self):
		self._args = ()
		self._env = {}
		self._stdout = None # None inherits our stdout, otherwise a fileobj or subprocess.PIPE
		self._stderr = None # as stdout, or subprocess.STDOUT
		self._workdir = None

	def __repr__(self):
		return f"<Command {self._args} {self._env}>"

	def __str__(self):
		return shlex.join(self._args)

	def _copy(self, **updates):
		new = Command()
		for attr in self._COPY_ATTRS:
			setattr(new, attr, updates.get(attr, getattr(self, attr)))
		return new

	@property
	def argv(self):
		return list(self._args)

	def args(self, args):
		"""Append args onto the argument list. Args will be coerced to string."""
		return self._copy(_args = self._args + tuple(str(arg) for arg in args))

	def __call__(self, *args):
		"""cmd(*args) is equivalent to cmd.args(args) but is intended to be ergonomic with stemming."""
		return self.args(args)

	def env(self, **env):
		"""Set or update environment variables. Values will be coerced to string."""
		return self._copy(_env = self._env | {key: str(value) for key, value in env.items()})

	def stdout(self, value):
		return self._copy(_stdout=value)

	def stderr(self, value):
		"""As stdout(), but also accepts subprocess.STDOUT to redirect stderr to stdout."""
		return self._copy(_stderr=value)

	def workdir(self, dir):
		return self._copy(_workdir=dir)

	def run(self):
		"""Execute the command, blocking until it exits, and return its exit status.
		Output goes wherever stdout/stderr point, by default straight to ours.
		Raises LaunchError if the process could not be started.
		"""
		if not self._args:
			raise ValueError("Cannot run an empty command")
		try:
			proc = subprocess.Popen(
				self._args,
				env = os.environ | self._env,
				close_fds = True,
				stdout = self._stdout,
				stderr = self._stderr,
				cwd = self._workdir,
			)
		except OSError as e:
			raise LaunchError(f"Failed to run {self._args[0]!r}: {e.strerror or e}") from None
		try:
			return proc.wait()
		except BaseException:
			# attempt to kill before returning
			try:
				proc.kill()
			except ProcessLookupError:
				pass # process not existing is fine, ignore it.
			raise


def split_flags(flags):
	"""Split a flags string into arguments, honouring shell-style quoting.
	Raises ConfigError if the quoting is unbalanced."""
	try:
		return shlex.split(flags, posix=(os.name != "nt"))
	except ValueError as e:
		raise ConfigError(f"Cannot split flags {flags!r}: {e}") from e


def compose_command(recipe, compiler=DEFAULT_COMPILER):
	"""Render a recipe into a compiler Command. The argument order is fixed:
	compiler, output, sources, compile flags, link flags, include dirs, library dirs.
	"""
	return Command()(
		*split_flags(compiler),
		"-o", recipe.output,
		*recipe.files,
		*split_flags(recipe.cflags),
		*split_flags(recipe.lflags),
		*[f"-I{directory}" for directory in recipe.include_dirs],
		*[f"-L{directory}" for directory in recipe.library_dirs],
	)
