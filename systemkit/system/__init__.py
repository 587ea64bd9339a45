"""
# Filesystem access for &..route pathnames.

# [ Modules ]
# /&.core/
	# Error taxonomy.
# /&.provider/
	# The &.provider.FileSystemProvider capability and its &os implementation.
# /&.process/
	# Working directory and environment access.
# /&.files/
	# &.files.Path, permissions, and directory iteration.
# /&.local/
	# Content access for local files.
"""
