"""
# Filesystem interfaces and data structures.

# &Path extends &..route.types.Selector with operations that consult the
# filesystem through a &.provider.FileSystemProvider. The provider and the process
# context are given as keywords, `fs` and `process`, defaulting to the local
# instances.

# [ Elements ]
# /root/
	# The &Path to the root directory of the operating system.
# /default_directory_permissions/
	# The &PermissionTriplet used by &Path.fs_mkdir when none is given;
	# `rwxr-xr-x`.
"""
import contextlib
import enum
import logging
import tempfile
from collections.abc import Iterator
from typing import Optional

from ..route.types import Selector
from . import core
from . import provider
from . import process as pcontext

logger = logging.getLogger(__name__)

class Permission(enum.IntFlag):
	"""
	# Access rights held by one of the owner, group, or other classes.
	"""
	none = 0
	execute = 1
	write = 2
	read = 4

	rx = read | execute
	rw = read | write
	rwx = read | write | execute

class PermissionTriplet(tuple):
	"""
	# The &Permission sets of the owner, group, and other classes.

	# Converts to and from the classic nine bit encoding:
	# `owner*64 + group*8 + other`.
	"""
	__slots__ = ()

	def __new__(Class, owner=Permission.none, group=Permission.none, other=Permission.none):
		return super().__new__(Class, (Permission(owner), Permission(group), Permission(other)))

	def __getnewargs__(self):
		return tuple(self)

	@classmethod
	def from_mode(Class, mode:int) -> 'PermissionTriplet':
		"""
		# Construct an instance from the low nine bits of &mode.
		# Higher bits, setuid, setgid, and sticky, are ignored.
		"""
		return Class((mode >> 6) & 7, (mode >> 3) & 7, mode & 7)

	@property
	def owner(self) -> Permission:
		return self[0]

	@property
	def group(self) -> Permission:
		return self[1]

	@property
	def other(self) -> Permission:
		return self[2]

	@property
	def mode(self) -> int:
		"""
		# The nine bit encoding of the triplet.
		"""
		return (int(self[0]) << 6) + (int(self[1]) << 3) + int(self[2])

	def __int__(self):
		return self.mode

	def __str__(self):
		# ls(1) notation.
		return ''.join(
			''.join((
				'r' if p & Permission.read else '-',
				'w' if p & Permission.write else '-',
				'x' if p & Permission.execute else '-',
			))
			for p in self
		)

	def __repr__(self):
		return "%s.from_mode(0o%03o)" %(self.__class__.__name__, self.mode)

default_directory_permissions = PermissionTriplet(Permission.rwx, Permission.rx, Permission.rx)

class DirectoryIterator(Iterator):
	r"""
	# Single pass cursor over the entries of a directory.

	# Produces a &Path for each entry save `.` and `..` in the order that the
	# provider reads them. The directory handle is released exactly once: when the
	# stream reports its end, when &close is called, when the context manager exits,
	# or when an abandoned iterator is collected.

	# Entry names are appended without escaping. A name ending with `\` is
	# produced correctly, but a selector joined onto it reads the `\/` pair as an
	# escaped separator, so its &Path.components merge the two names. Operating
	# system calls using the &Path.pathname are unaffected.

	# [ Properties ]
	# /base/
		# The &Path of the directory being read.
	# /state/
		# /`'open'`/
			# The handle is held and entries may be read.
		# /`'exhausted'`/
			# The stream reported its end; the handle was released.
		# /`'closed'`/
			# The iterator was closed before reaching the end.
	"""

	def __init__(self, base:'Path', handle, fs:provider.FileSystemProvider):
		self.base = base
		self.state = 'open'
		self._handle = handle
		self._fs = fs

	def _release(self, state):
		handle = self._handle
		self._handle = None
		self.state = state
		self._fs.close_directory(handle)

	def __next__(self) -> 'Path':
		if self.state != 'open':
			raise StopIteration

		read = self._fs.read_directory
		while True:
			try:
				name = read(self._handle)
			except BaseException:
				self._release('closed')
				raise

			if name is None:
				self._release('exhausted')
				raise StopIteration

			if name not in ('.', '..'):
				return self.base._entry(name)

	def close(self) -> None:
		"""
		# Release the directory handle; no effect if already released.
		"""
		if self.state == 'open':
			self._release('closed')

	def __enter__(self):
		return self

	def __exit__(self, typ, val, tb):
		self.close()

	def __del__(self):
		if getattr(self, 'state', None) == 'open':
			self.close()

class Path(Selector):
	"""
	# Pathname with filesystem controls.

	# Filesystem predicates, &exists, &is_file, &is_directory and
	# &is_symbolic_link, report &False when the metadata query fails.
	# Other filesystem operations raise &.core.Error subclasses.
	"""
	__slots__ = ()

	def __fspath__(self) -> str:
		return self.pathname

	def _entry(self, name:str) -> 'Path':
		# Avoid the redundant separator that joining to the root would produce.
		if self.pathname == '/':
			return self.__class__('/' + name)
		return self.joined(name)

	@classmethod
	def from_path(Class, path:str, *, process:pcontext.Context=pcontext.local) -> 'Path':
		"""
		# Construct a normalized, absolute &Path from &path; relative paths are
		# taken relative to the working directory of &process.
		"""
		p = Class(path)
		if p.is_relative:
			p = Class.fs_pwd(process=process).joined(p)
		return p.normalized()

	# Metadata

	def fs_status(self, follow:bool=True, *, fs:provider.FileSystemProvider=provider.local) -> provider.Status:
		"""
		# Query the metadata of the file. Links are followed unless &follow is &False.
		"""
		return fs.query(self.pathname, follow)

	def fs_type(self, *, fs:provider.FileSystemProvider=provider.local) -> str:
		"""
		# The type of file the path points to; `'void'` if there is no file at the path
		# or the path is a broken link.

		# See &.provider.Status.type for the possible values.
		"""
		try:
			return fs.query(self.pathname).type
		except core.NotFound:
			return 'void'

	def fs_size(self, *, fs:provider.FileSystemProvider=provider.local) -> int:
		"""
		# Return the size of the file in bytes.
		"""
		return fs.query(self.pathname).size

	def _check(self, follow, fs):
		try:
			return fs.query(self.pathname, follow).type
		except core.Error:
			return None

	def exists(self, *, fs:provider.FileSystemProvider=provider.local) -> bool:
		"""
		# Whether a file of any type is present at the path.

		# A path to a broken link does not exist.
		"""
		return self._check(True, fs) is not None

	def is_file(self, *, fs:provider.FileSystemProvider=provider.local) -> bool:
		"""
		# Whether the path identifies a regular file.
		"""
		return self._check(True, fs) == 'data'

	def is_directory(self, *, fs:provider.FileSystemProvider=provider.local) -> bool:
		"""
		# Whether the path identifies a directory.
		"""
		return self._check(True, fs) == 'directory'

	def is_symbolic_link(self, *, fs:provider.FileSystemProvider=provider.local) -> bool:
		"""
		# Whether the path identifies a symbolic link. The link is not followed.
		"""
		return self._check(False, fs) == 'link'

	def get_permissions(self, *, fs:provider.FileSystemProvider=provider.local) -> PermissionTriplet:
		"""
		# Retrieve the permissions of the file.
		"""
		return PermissionTriplet.from_mode(fs.query(self.pathname).mode)

	def set_permissions(self, permissions:PermissionTriplet, *, fs:provider.FileSystemProvider=provider.local):
		"""
		# Change the permissions of the file to &permissions.
		"""
		fs.set_mode(self.pathname, int(permissions))
		return self

	def resolved(self, *, fs:provider.FileSystemProvider=provider.local) -> 'Path':
		"""
		# Construct the canonical form of the path by following symbolic links.

		# [ Exceptions ]
		# /&.core.NotFound/
			# The file does not exist.
		"""
		return self.__class__(fs.canonicalize(self.pathname))

	# Directories

	def fs_iterator(self, *, fs:provider.FileSystemProvider=provider.local) -> DirectoryIterator:
		"""
		# Open a &DirectoryIterator over the directory, &self.
		"""
		return DirectoryIterator(self, fs.open_directory(self.pathname), fs)

	def fs_iterfiles(self, *, fs:provider.FileSystemProvider=provider.local):
		"""
		# Generate the &Path instances identifying the files held by the directory.
		# The directory handle is released when the generator is closed.
		"""
		with self.fs_iterator(fs=fs) as entries:
			yield from entries

	@classmethod
	def fs_mkdir(Class, path, permissions:PermissionTriplet=default_directory_permissions, *,
			fs:provider.FileSystemProvider=provider.local,
		) -> 'Path':
		"""
		# Create a directory at &path. The leading directories must exist.

		# The permissions are subject to the process' umask.
		"""
		path = Class(path)
		fs.create_directory(path.pathname, int(permissions))
		return path

	@classmethod
	def fs_remove(Class, path, recursively:bool=False, *, fs:provider.FileSystemProvider=provider.local) -> None:
		"""
		# Remove the file or directory at &path.

		# Directories must be empty unless &recursively is &True, in which case the
		# contents are removed depth first. The first failure is raised and the
		# files removed before it stay removed. Symbolic links are removed, never followed.
		"""
		path = Class(path)

		if recursively and fs.query(path.pathname, False).type == 'directory':
			logger.debug("removing the contents of %s", path.pathname)
			with path.fs_iterator(fs=fs) as entries:
				for entry in entries:
					Class.fs_remove(entry, True, fs=fs)

		fs.remove_entry(path.pathname)

	# Process context

	@classmethod
	def fs_pwd(Class, *, process:pcontext.Context=pcontext.local) -> 'Path':
		"""
		# The working directory of &process.
		"""
		return Class(process.get_working_directory())

	@classmethod
	def fs_chdir(Class, path, *, process:pcontext.Context=pcontext.local) -> 'Path':
		"""
		# Change the working directory of &process to &path.
		"""
		path = Class(path)
		process.set_working_directory(path.pathname)
		return path

	@classmethod
	def fs_tmp(Class, *,
			process:pcontext.Context=pcontext.local,
			fs:provider.FileSystemProvider=provider.local,
		) -> 'Path':
		"""
		# The directory designated for temporary files.

		# (system/environ)`TMPDIR` when defined, `/tmp` when it is a directory,
		# and the working directory otherwise.
		"""
		tmpdir = process.get_environment_variable('TMPDIR')
		if tmpdir:
			return Class(tmpdir)

		tmp = Class('/tmp')
		if tmp.is_directory(fs=fs):
			return tmp

		return Class.fs_pwd(process=process)

	@classmethod
	@contextlib.contextmanager
	def fs_tmpdir(Class, *, prefix:Optional[str]='systemkit.', mkdtemp=tempfile.mkdtemp):
		"""
		# Create a temporary directory at a new path using a context manager.

		# A &Path to the temporary directory is returned on entrance,
		# and that same path is destroyed on exit.
		"""
		r = Class(mkdtemp(prefix=prefix))
		try:
			yield r
		finally:
			Class.fs_remove(r, recursively=True)

root = Path('/')
