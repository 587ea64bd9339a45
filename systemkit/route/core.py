r"""
# Pathname scanning and the string level operations used by &.types.Selector.

# Pathnames are plain &str instances. The separator is `/` and the two character
# sequence `\/` escapes a separator so that it becomes content of the component
# being scanned. A backslash that is not followed by a separator is ordinary data.

# [ Elements ]
# /separator/
	# The path separator.
# /escape/
	# The character that, when immediately followed by &separator, makes the
	# separator part of the component.
"""
from collections.abc import Sequence, Iterable

from ..context.tools import cachedcalls, consistency, trailing

separator = '/'
escape = '\\'

def scan(pathname:str) -> Iterable[str]:
	"""
	# Produce the components of &pathname in root order.

	# The scanner has two states: (id)`normal` and (id)`escape`. A backslash moves
	# the scanner into (id)`escape`; a separator seen in (id)`escape` is component
	# content, a separator seen in (id)`normal` ends the current component.
	# Empty components are never produced.
	"""
	state = 'normal'
	start = 0

	for i, c in enumerate(pathname):
		if state == 'escape':
			if c == separator:
				state = 'normal'
				continue
			elif c != escape:
				state = 'normal'
				continue
			# Consecutive backslashes; the last one decides.
		elif c == escape:
			state = 'escape'
		elif c == separator:
			if i > start:
				yield pathname[start:i]
			start = i + 1

	if len(pathname) > start:
		yield pathname[start:]

@cachedcalls(128)
def components(pathname:str) -> tuple[str, ...]:
	"""
	# The components of &pathname as a tuple; cached by pathname.
	"""
	return tuple(scan(pathname))

def strip(pathname:str) -> str:
	"""
	# Remove trailing separators from &pathname unless they are escaped.

	# A pathname consisting only of separators is reduced to the root, `/`.
	"""
	end = len(pathname)
	while end > 1 and pathname[end-1] == separator and pathname[end-2] != escape:
		end -= 1

	if end == 1 and pathname[:1] == separator:
		return separator

	return pathname[:end]

def absolute(pathname:str) -> bool:
	"""
	# Whether &pathname starts at the root.
	"""
	return pathname[:1] == separator

def form(points:Sequence[str], absolute:bool) -> str:
	"""
	# Construct a pathname from &points.
	"""
	s = separator.join(points)
	if absolute:
		return separator + s
	return s

def relative(target:Sequence[str], source:Sequence[str]) -> list[str]:
	"""
	# The sequence of components that leads from &source to &target.

	# One `..` is emitted for each component of &source beyond the common prefix.
	"""
	cl = consistency(source, target)
	ascent = len(source) - cl
	return (['..'] * ascent) + list(target[cl:])

def shared(former:Sequence[str], latter:Sequence[str]) -> Sequence[str]:
	"""
	# The leading components common to &former and &latter.
	"""
	return former[:consistency(former, latter)]

def leads(sequence:Sequence[str], prefix:Sequence[str]) -> bool:
	"""
	# Whether &prefix is a leading run of &sequence.
	"""
	return len(prefix) <= len(sequence) and consistency(sequence, prefix) == len(prefix)

def ends(sequence:Sequence[str], suffix:Sequence[str]) -> bool:
	"""
	# Whether &suffix is a trailing run of &sequence.
	"""
	return trailing(sequence, suffix)
