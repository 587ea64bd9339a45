"""
# Function and iterator tools used by the local packages.
"""
import functools
import itertools

cachedcalls = functools.lru_cache

def consistency(*iterables,
		takewhile=itertools.takewhile,
		zip=zip, sum=sum, len=len, set=set
	) -> int:
	"""
	# Return the level of consistency among the elements produced by the given &iterables.
	# The counting stops when an element is not equal to the others at the same index.

	# More commonly, the common prefix depth or length of all the given iterables.
	# Elements must be hashable; equality is indirectly performed by forming a set.
	"""
	return sum(
		takewhile(
			(1).__eq__,
			(len(set(x)) for x in zip(*iterables))
		)
	)

def trailing(former, latter) -> bool:
	"""
	# Whether the sequence &latter is found at the end of &former.
	"""
	n = len(latter)
	if n > len(former):
		return False
	if n == 0:
		return True
	return tuple(former[-n:]) == tuple(latter)
