"""
# Relative accessor resolution.
"""
from collections.abc import Iterable

def fold(points:Iterable[str], absolute:bool=False) -> list[str]:
	"""
	# Resolve the relative accessors, `.` and `..`, within &points.

	# A `..` removes the preceding component. When there is no component to remove,
	# the accessor is kept for relative sequences so that the result still designates
	# the same location once a base directory is supplied. Absolute sequences
	# are at their root in that case and the accessor is discarded.
	"""
	r:list[str] = []
	add = r.append

	for x in points:
		if x == '.':
			continue
		elif x == '..':
			if r and r[-1] != '..':
				del r[-1]
			elif not absolute:
				add(x)
		else:
			add(x)

	return r
