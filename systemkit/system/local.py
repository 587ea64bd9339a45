"""
# Byte and text oriented access to the content of local files.

# &BinaryFile and &TextFile address a file by &.files.Path. Writes always append
# to the end of the file. Failures are raised as &.core.Error subclasses.
"""
import contextlib
import os
import tempfile

from . import files
from . import provider
from . import process as pcontext
from .provider import translation

class LocalFile(object):
	"""
	# Base class of files addressed by a &files.Path.

	# [ Properties ]
	# /path/
		# The location of the file.
	"""
	__slots__ = ('path',)
	_read_mode = 'rb'
	_append_mode = 'ab'
	_encoding = None

	def __init__(self, path):
		self.path = files.Path(path)

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, self.path.pathname)

	def __eq__(self, operand):
		if not isinstance(operand, LocalFile):
			return NotImplemented
		return self.__class__ is operand.__class__ and self.path == operand.path

	def __hash__(self):
		return hash((self.__class__, self.path))

	def _open(self, mode):
		with translation(self.path.pathname):
			return open(self.path.pathname, mode, encoding=self._encoding)

	def byte_count(self, *, fs:provider.FileSystemProvider=provider.local) -> int:
		"""
		# The size of the file in bytes.

		# Not necessarily the number of elements read by &read as text files
		# decode multibyte characters.
		"""
		return self.path.fs_size(fs=fs)

	def read(self, count=None, offset:int=0):
		"""
		# Read up to &count elements after skipping &offset elements.
		# When &count is &None, the remainder of the file is read.
		"""
		with self._open(self._read_mode) as f, translation(self.path.pathname):
			if offset:
				self._skip(f, offset)
			if count is None:
				return f.read()
			return f.read(count)

	def write(self, elements) -> None:
		"""
		# Append &elements to the end of the file; the file is created if necessary.
		"""
		with self._open(self._append_mode) as f, translation(self.path.pathname):
			f.write(elements)

	@classmethod
	@contextlib.contextmanager
	def temporary(Class, prefix:str='systemkit.', *,
			process:pcontext.Context=pcontext.local,
			fs:provider.FileSystemProvider=provider.local,
		):
		"""
		# Create an empty file in &files.Path.fs_tmp and provide an instance for it.
		# The file is removed when the context exits.
		"""
		tmp = files.Path.fs_tmp(process=process, fs=fs)

		with translation(tmp.pathname):
			fd, pathname = tempfile.mkstemp(prefix=prefix, dir=tmp.pathname)
		os.close(fd)

		path = files.Path(pathname)
		try:
			yield Class(path)
		finally:
			files.Path.fs_remove(path, fs=fs)

class BinaryFile(LocalFile):
	"""
	# File whose elements are bytes.
	"""
	__slots__ = ()

	@staticmethod
	def _skip(f, offset):
		f.seek(offset)

class TextFile(LocalFile):
	"""
	# File whose elements are characters decoded from UTF-8.
	"""
	__slots__ = ()
	_read_mode = 'rt'
	_append_mode = 'at'
	_encoding = 'utf-8'

	@staticmethod
	def _skip(f, offset):
		# Character offsets; seek only works with opaque cookies.
		f.read(offset)
