"""
# Unix pathname values and the filesystem queries built on them.

# [ Packages ]
# /&.route/
	# Pure pathname handling. Component scanning, normalization and the
	# &.route.types.Selector value type.
# /&.system/
	# Filesystem access through an injected provider: &.system.files.Path,
	# permissions, directory iteration and local files.
# /&.context/
	# Function tools shared by the packages.
# /&.test/
	# Test harness used by the `test` directories.
"""
