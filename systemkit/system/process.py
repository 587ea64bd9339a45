"""
# Process context capability.

# The working directory and the environment are process-global state. Operations
# that depend on them receive a &Context instead of reading the state directly,
# so that a substitute can be given.

# [ Elements ]
# /local/
	# The &Local context of the running process.
"""
import os
import logging
from typing import Optional

from .provider import translation

logger = logging.getLogger(__name__)

class Context(object):
	"""
	# Interface to the working directory and environment of a process.
	"""

	def get_working_directory(self) -> str:
		raise NotImplementedError("get_working_directory")

	def set_working_directory(self, path:str) -> None:
		raise NotImplementedError("set_working_directory")

	def get_environment_variable(self, name:str) -> Optional[str]:
		raise NotImplementedError("get_environment_variable")

class Local(Context):
	"""
	# &Context of the running process.

	# Changing the working directory also updates (system/environ)`PWD`.
	"""

	def get_working_directory(self, *, getcwd=os.getcwd) -> str:
		with translation(None):
			return getcwd()

	def set_working_directory(self, path, *, chdir=os.chdir):
		path = str(path)
		logger.debug("changing working directory to %s", path)

		# Set prior to the environment so that a failure leaves PWD untouched.
		with translation(path):
			chdir(path)
		os.environ['PWD'] = path

	def get_environment_variable(self, name):
		return os.environ.get(name)

local = Local()
