"""
# Filesystem provider capability.

# &FileSystemProvider is the narrow interface through which &.files.Path reaches
# the operating system. &Local implements it with &os; tests substitute their own
# implementations.

# All provider methods raise &.core.Error subclasses on failure.

# [ Elements ]
# /local/
	# The &Local provider instance used by default.
"""
import abc
import contextlib
import errno
import logging
import os
import os.path
import stat
from typing import Any, Optional

from . import core

logger = logging.getLogger(__name__)

class Status(tuple):
	"""
	# File metadata record produced by &FileSystemProvider.query.

	# A triple holding the file type, the mode bits, and the size in bytes.
	"""
	__slots__ = ()

	_fs_type_map = {
		stat.S_IFIFO: 'pipe',
		stat.S_IFLNK: 'link',
		stat.S_IFREG: 'data',
		stat.S_IFDIR: 'directory',
		stat.S_IFSOCK: 'socket',
		stat.S_IFBLK: 'device',
		stat.S_IFCHR: 'device',
	}

	def __new__(Class, type:str, mode:int, size:int):
		return super().__new__(Class, (type, mode, size))

	def __getnewargs__(self):
		return tuple(self)

	@classmethod
	def from_system(Class, st:os.stat_result, *, ifmt=stat.S_IFMT, imode=stat.S_IMODE) -> 'Status':
		"""
		# Construct an instance from a status record produced by &os.stat.
		"""
		typ = Class._fs_type_map.get(ifmt(st.st_mode), 'unknown')
		return Class(typ, imode(st.st_mode), st.st_size)

	def __add__(self, operand):
		# Protect from unexpected addition.
		return NotImplemented

	@property
	def type(self) -> str:
		"""
		# /`'directory'`/
			# A file containing other files.
		# /`'data'`/
			# A regular file containing bytes.
		# /`'link'`/
			# A symbolic link; only reported when links are not followed.
		# /`'pipe'`/
			# A named pipe; also known as a FIFO.
		# /`'socket'`/
			# A unix domain socket.
		# /`'device'`/
			# A character or block device file.
		# /`'unknown'`/
			# A file type that is not recognized.
		"""
		return self[0]

	@property
	def mode(self) -> int:
		"""
		# The permission bits of the file including the setuid, setgid and sticky bits.
		"""
		return self[1]

	@property
	def size(self) -> int:
		"""
		# Number of bytes contained by the file.
		"""
		return self[2]

class FileSystemProvider(abc.ABC):
	"""
	# Operations that &.files.Path requires from the operating system.

	# Paths are given as strings. Directory handles are opaque to the caller and
	# only passed back to &read_directory and &close_directory.
	"""

	@abc.abstractmethod
	def query(self, path:str, follow:bool=True) -> Status:
		"""
		# Retrieve the metadata of the file at &path. When &follow is &False,
		# symbolic links are not followed.
		"""

	@abc.abstractmethod
	def canonicalize(self, path:str) -> str:
		"""
		# Resolve &path to an absolute pathname free of symbolic links and
		# relative accessors. The file must exist.
		"""

	@abc.abstractmethod
	def open_directory(self, path:str) -> Any:
		"""
		# Open a stream over the entries of the directory at &path.
		"""

	@abc.abstractmethod
	def read_directory(self, handle) -> Optional[str]:
		"""
		# The name of the next entry in the stream, or &None when there are no more.
		"""

	@abc.abstractmethod
	def close_directory(self, handle) -> None:
		"""
		# Release the stream opened by &open_directory.
		"""

	@abc.abstractmethod
	def create_directory(self, path:str, mode:int) -> None:
		"""
		# Create a directory at &path with the permission bits, &mode.
		"""

	@abc.abstractmethod
	def remove_entry(self, path:str) -> None:
		"""
		# Remove the file or empty directory at &path; links are removed, not followed.
		"""

	@abc.abstractmethod
	def set_mode(self, path:str, mode:int) -> None:
		"""
		# Change the permission bits of the file at &path.
		"""

@contextlib.contextmanager
def translation(path):
	"""
	# Convert &OSError instances raised within the context into &core.Error instances.

	# &ValueError, raised for pathnames that the system cannot represent such as
	# those containing NUL or unpaired surrogates, becomes &core.InvalidArgument.
	"""
	try:
		yield
	except OSError as err:
		raise core.Error.from_os_error(err, path) from err
	except ValueError as err:
		raise core.InvalidArgument(path, errno.EINVAL, str(err)) from err

class Local(FileSystemProvider):
	"""
	# &FileSystemProvider implementation using the &os module.
	"""

	def query(self, path, follow=True, *, stat=os.stat):
		with translation(path):
			return Status.from_system(stat(path, follow_symlinks=follow))

	def canonicalize(self, path, *, realpath=os.path.realpath):
		with translation(path):
			return realpath(path, strict=True)

	def open_directory(self, path, *, scandir=os.scandir):
		with translation(path):
			return scandir(path)

	def read_directory(self, handle):
		with translation(getattr(handle, 'path', None)):
			de = next(handle, None)

		if de is None:
			return None
		return de.name

	def close_directory(self, handle):
		handle.close()

	def create_directory(self, path, mode, *, mkdir=os.mkdir):
		logger.debug("creating directory %s with mode %o", path, mode)
		with translation(path):
			mkdir(path, mode)

	def remove_entry(self, path, *, lstat=os.lstat, rmdir=os.rmdir, unlink=os.unlink):
		with translation(path):
			if stat.S_ISDIR(lstat(path).st_mode):
				logger.debug("removing directory %s", path)
				rmdir(path)
			else:
				logger.debug("removing file %s", path)
				unlink(path)

	def set_mode(self, path, mode, *, chmod=os.chmod):
		logger.debug("changing mode of %s to %o", path, mode)
		with translation(path):
			chmod(path, mode)

local = Local()
