"""Append-only containers that back the registration model and recipes.

Both ignore absent (None) and empty values on append, so that callbacks can pass
through optional configuration without guarding it, eg.
	target.compile_flags("-g" if mode is DEBUG else None)
"""


class StringList:
	"""An ordered list of strings. Duplicates are kept."""
	def __init__(self, values=()):
		self._items = []
		self.extend(values)

	def __repr__(self):
		return f"<StringList {self._items!r}>"

	def __iter__(self):
		return iter(self._items)

	def __len__(self):
		return len(self._items)

	def __getitem__(self, index):
		return self._items[index]

	def __eq__(self, other):
		if isinstance(other, StringList):
			return self._items == other._items
		return NotImplemented

	def append(self, value):
		if not value:
			return
		self._items.append(str(value))

	def extend(self, values):
		for value in values:
			self.append(value)

	def freeze(self):
		"""Return the contents as a tuple"""
		return tuple(self._items)


class FlagString:
	"""An append-only string of command line flags.
	Each append adds a fragment, and the rendered string is the fragments joined by a single
	space, in call order. A fragment may itself hold several flags ("-Wall -Wextra").
	"""
	def __init__(self):
		self._fragments = []

	def __repr__(self):
		return f"<FlagString {str(self)!r}>"

	def __str__(self):
		return " ".join(self._fragments)

	def __bool__(self):
		return bool(self._fragments)

	def __eq__(self, other):
		if isinstance(other, FlagString):
			return self._fragments == other._fragments
		return NotImplemented

	def append(self, flags):
		if not flags:
			return
		self._fragments.append(str(flags))

	def extend(self, other):
		for fragment in other._fragments:
			self.append(fragment)
