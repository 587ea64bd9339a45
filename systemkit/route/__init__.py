"""
# Pathname data structures and the pure operations performed on them.

# [ Modules ]
# /&.core/
	# Component scanning and sequence comparisons over pathname strings.
# /&.rewrite/
	# Resolution of `.` and `..` components.
# /&.types/
	# The &.types.Selector value type.
"""
from .types import Selector
