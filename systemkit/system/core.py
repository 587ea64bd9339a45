"""
# Error taxonomy for filesystem operations.

# Operating system error numbers are not exposed directly; &Error.from_os_error
# selects the subclass describing the kind of failure and retains the number
# in &Error.code for diagnostics.
"""
import errno
import os
from typing import Optional

class Error(Exception):
	"""
	# Base class of the failures reported by filesystem providers.

	# [ Properties ]
	# /code/
		# The system error number, if any, that caused the failure.
	# /path/
		# The pathname that was being operated on.
	# /strerror/
		# Description of the error.
	"""
	kind = 'error'
	description = "filesystem operation failed"

	def __init__(self, path=None, code:Optional[int]=None, strerror:Optional[str]=None):
		super().__init__(path, code, strerror)
		self.path = None if path is None else str(path)
		self.code = code
		self.strerror = strerror

	def __str__(self):
		desc = self.strerror or self.description
		if self.code is not None:
			desc = f"{desc} ({errno.errorcode.get(self.code, self.code)})"

		if self.path is not None:
			return f"{desc}\nPATH: {self.path}"
		return desc

	@classmethod
	def from_os_error(Class, err:OSError, path=None) -> 'Error':
		"""
		# Construct the taxonomy error corresponding to &err.

		# If &path is &None, the filename recorded by &err is used.
		"""
		if path is None:
			path = err.filename

		Type = Class.select(err.errno)
		return Type(path, err.errno, err.strerror)

	@staticmethod
	def select(code:Optional[int]) -> type:
		"""
		# Identify the &Error subclass used to represent the error number, &code.
		"""
		return errno_map.get(code, Other)

class NotFound(Error):
	'No file at the path, or a leading directory is missing.'
	kind = 'not-found'
	description = "no such file or directory"

class PermissionDenied(Error):
	'The process lacks the permissions required by the operation.'
	kind = 'permission-denied'
	description = "permission denied"

class AlreadyExists(Error):
	'A file is already present at the path.'
	kind = 'already-exists'
	description = "file exists"

class NotADirectory(Error):
	'A directory was required, or a leading path component is not a directory.'
	kind = 'not-a-directory'
	description = "not a directory"

class IsADirectory(Error):
	'A non-directory file was required.'
	kind = 'is-a-directory'
	description = "is a directory"

class NotEmpty(Error):
	'The directory still contains files.'
	kind = 'not-empty'
	description = "directory not empty"

class TooManyOpenHandles(Error):
	'The process or system file table is full.'
	kind = 'too-many-open-handles'
	description = "too many open files"

class InvalidArgument(Error):
	'The operation was given an argument that the system rejected.'
	kind = 'invalid-argument'
	description = "invalid argument"

class IOFailure(Error):
	'Low level input or output error.'
	kind = 'io-failure'
	description = "input/output error"

class Unsupported(Error):
	'The operation is not supported by the system or the filesystem.'
	kind = 'unsupported'
	description = "operation not supported"

class Other(Error):
	'Catch-all for error numbers without a dedicated class; see &Error.code.'
	kind = 'other'

errno_map = {
	errno.ENOENT: NotFound,
	errno.EACCES: PermissionDenied,
	errno.EPERM: PermissionDenied,
	errno.EEXIST: AlreadyExists,
	errno.ENOTDIR: NotADirectory,
	errno.EISDIR: IsADirectory,
	errno.ENOTEMPTY: NotEmpty,
	errno.EMFILE: TooManyOpenHandles,
	errno.ENFILE: TooManyOpenHandles,
	errno.EINVAL: InvalidArgument,
	errno.EIO: IOFailure,
	errno.ENOSYS: Unsupported,
	errno.EOPNOTSUPP: Unsupported,
}
if hasattr(errno, 'ENOTSUP'):
	errno_map.setdefault(errno.ENOTSUP, Unsupported)

def error(code:int, path=None) -> Error:
	"""
	# Construct the taxonomy error for the error number &code.
	"""
	return Error.select(code)(path, code, os.strerror(code))
