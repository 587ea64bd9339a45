"""
# Pathname value type.

# &Selector holds an immutable pathname string and derives every other property
# from it on demand. Operations that transform the selector always construct a
# new instance of the same class.
"""
from typing import Optional, Union

from . import core
from . import rewrite

class Selector(object):
	"""
	# Immutable pathname with the pure operations of a Unix path.

	# Trailing separators are removed at construction; `'/foo/bar/'` and
	# `'/foo/bar'` are the same pathname. Equality is semantic: two selectors are
	# equal when their pathnames are identical or when they agree on relativity and
	# have identical &components.

	# [ Properties ]
	# /pathname/
		# The string that the selector was constructed with, less trailing separators.
	"""
	__slots__ = ('pathname',)
	pathname: str

	def __init__(self, pathname:str=''):
		if isinstance(pathname, Selector):
			pathname = pathname.pathname
		object.__setattr__(self, 'pathname', core.strip(str(pathname)))

	def __setattr__(self, name, value):
		raise AttributeError("selectors are immutable")

	def __delattr__(self, name):
		raise AttributeError("selectors are immutable")

	@classmethod
	def from_string(Class, pathname:str):
		"""
		# Construct an instance from a pathname.
		"""
		return Class(pathname)

	@classmethod
	def from_components(Class, points, absolute:bool=False):
		"""
		# Construct an instance by joining &points with separators.
		"""
		return Class(core.form(points, absolute))

	def _coerce(self, operand:Union['Selector', str]) -> 'Selector':
		if isinstance(operand, Selector):
			return operand
		return self.__class__(operand)

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, self.pathname)

	def __str__(self):
		return self.pathname

	def __reduce__(self):
		return (self.__class__, (self.pathname,))

	@property
	def components(self) -> tuple[str, ...]:
		"""
		# The components of the pathname in root order.
		# The root path has no components.
		"""
		return core.components(self.pathname)

	@property
	def is_relative(self) -> bool:
		"""
		# Whether the pathname does not start at the root.
		"""
		return not core.absolute(self.pathname)

	@property
	def filename(self) -> Optional[str]:
		"""
		# The last component. &None for the root and the empty pathname.
		"""
		points = self.components
		if not points:
			return None
		return points[-1]

	@property
	def extension(self) -> Optional[str]:
		"""
		# Return the last dot-extension of the filename.
		# &None if there is no filename or the filename has no `.` characters at all.
		"""
		i = self.filename
		if i is None:
			return None

		p = i.rfind('.')
		if p == -1:
			return None

		return i[p+1:]

	@property
	def parent(self) -> Optional['Selector']:
		"""
		# The selector of the directory containing &self.

		# &None for the root and for relative selectors with a single component
		# as the enclosing directory cannot be expressed without a base.
		"""
		points = self.components
		if not points:
			return None

		if self.is_relative:
			if len(points) == 1:
				return None
			return self.from_components(points[:-1])

		return self.from_components(points[:-1], absolute=True)

	def normalized(self) -> 'Selector':
		"""
		# Construct the normalized form of &self by removing redundant separators
		# and resolving `.` and `..` components.

		# The filesystem is not consulted.
		"""
		a = not self.is_relative
		return self.from_components(rewrite.fold(self.components, absolute=a), absolute=a)
	__pos__ = normalized

	def joined(self, *others:Union['Selector', str]) -> 'Selector':
		"""
		# Construct a selector by appending &others to &self.

		# An absolute selector in &others replaces everything on its left.
		# Redundant separators are not removed.
		"""
		current = self.pathname
		for x in others:
			x = x.pathname if isinstance(x, Selector) else core.strip(str(x))
			if core.absolute(x) or not current:
				# The empty selector has no root to append to.
				current = x
			else:
				current = current + core.separator + x

		return self.__class__(current)

	def __truediv__(self, other:Union['Selector', str]) -> 'Selector':
		return self.joined(other)

	def relative(self, base:Union['Selector', str]) -> 'Selector':
		"""
		# Construct a selector that designates &self when applied to &base.

		# When &self is absolute and &base is relative, &self is returned as there
		# is no common position to ascend to. Identical selectors produce `'.'`.
		"""
		base = self._coerce(base)
		if not self.is_relative and base.is_relative:
			return self

		points = core.relative(self.components, base.components)
		if not points:
			return self.__class__('.')
		return self.from_components(points)

	def prefix_shared(self, other:Union['Selector', str]) -> Optional['Selector']:
		"""
		# The selector of the leading components that &self and &other have in common.

		# &None when the selectors differ in relativity or share nothing.
		"""
		other = self._coerce(other)
		if self.is_relative != other.is_relative:
			return None

		points = core.shared(self.components, other.components)
		if not points:
			return None

		return self.from_components(points, absolute=not self.is_relative)

	def has_prefix(self, prefix:Union['Selector', str]) -> bool:
		"""
		# Whether &prefix designates &self or one of the directories leading to it.
		"""
		prefix = self._coerce(prefix)
		if self.is_relative != prefix.is_relative:
			return False
		return core.leads(self.components, prefix.components)

	def has_suffix(self, suffix:Union['Selector', str]) -> bool:
		"""
		# Whether the trailing components of &self are the components of &suffix.

		# An absolute &suffix only matches when it designates &self.
		"""
		suffix = self._coerce(suffix)
		if not suffix.is_relative:
			return self == suffix
		return core.ends(self.components, suffix.components)

	def __eq__(self, operand):
		if not isinstance(operand, Selector):
			return NotImplemented

		if self.pathname == operand.pathname:
			return True

		return self.is_relative == operand.is_relative and self.components == operand.components

	def __ne__(self, operand):
		r = self.__eq__(operand)
		if r is NotImplemented:
			return r
		return not r

	def __hash__(self):
		return hash((self.is_relative, self.components))

	def __lt__(self, operand):
		if not isinstance(operand, Selector):
			return NotImplemented
		return (self.is_relative, self.components) < (operand.is_relative, operand.components)
