"""
# Test primitives and the module executor.

# Test functions take a single &Test argument and state their checks as
# contentions:

#!/pl/python
	def test_feature(test):
		test/feature() == expectation
		test/KeyError ^ (lambda: lookup('missing'))

# [ Elements ]
# /execute/
	# Run the tests of a module, raising the &Fate of the first failure.
"""
import builtins
import contextlib
import functools
import operator

def gather(container, prefix='test_'):
	"""
	# Collect the identifier and function pairs of the tests held by &container
	# in the order that they were defined.
	"""
	tests = [
		('#'.join((container.__name__, name)), getattr(container, name))
		for name in dir(container)
		if name.startswith(prefix) and callable(getattr(container, name))
	]
	tests.sort(key=(lambda x: getattr(getattr(x[1], '__code__', None), 'co_firstlineno', 0)))
	return tests

class Absurdity(Exception):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	operator_names = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__le__': '<=',
		'__gt__': '>',
		'__ge__': '>=',
		'__mod__': 'is',
		'__lshift__': 'contains',
	}

	def __init__(self, operator, former, latter, inverse=False):
		super().__init__(operator, former, latter, inverse)
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse

	def __str__(self):
		opchars = self.operator_names.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Assertion constructed by the true division of a &Test and the subject.

	# Comparisons are passed to the subject and an &Absurdity is raised
	# when they do not hold. Floor division inverts the contention.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	def _contend(self, opname, check, operand):
		if bool(check(self.object, operand)) == self.inverse:
			raise self.test.Absurdity(opname, self.object, operand, inverse=self.inverse)

	def __eq__(self, operand):
		self._contend('__eq__', operator.eq, operand)

	def __ne__(self, operand):
		self._contend('__ne__', operator.ne, operand)

	def __lt__(self, operand):
		self._contend('__lt__', operator.lt, operand)

	def __le__(self, operand):
		self._contend('__le__', operator.le, operand)

	def __gt__(self, operand):
		self._contend('__gt__', operator.gt, operand)

	def __ge__(self, operand):
		self._contend('__ge__', operator.ge, operand)

	def __mod__(self, operand):
		"""
		# Contend that the subject is the &operand.
		"""
		self._contend('__mod__', operator.is_, operand)

	def __lshift__(self, operand):
		"""
		# Contend that the subject contains the &operand.
		"""
		self._contend('__lshift__', operator.contains, operand)

	__hash__ = None

	# Exception traps.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		y = self.storage = val
		if isinstance(y, self.test.Fate):
			# Fates are never trapped.
			return None

		if not isinstance(y, self.object):
			raise self.test.Absurdity("isinstance", self.object, y)
		return True

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the exception when it is called:

		#!/pl/python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Fate(BaseException):
	"""
	# The conclusion of a test; raised to end a test with a specific outcome.

	# [ Properties ]
	# /subtype/
		# One of the keys of &descriptors.
	"""
	descriptors = {
		# Abstract, Impact
		'return': ("passed", 1),
		'pass': ("passed", 1),
		'skip': ("skipped", 0),
		'fail': ("failed", -1),
		'interrupt': ("interrupted", -1),
	}
	line = None

	def __init__(self, content, subtype='fail'):
		super().__init__(content, subtype)
		self.content = content
		self.subtype = subtype

	@property
	def impact(self) -> int:
		return self.descriptors[self.subtype][1]

	@property
	def negative(self) -> bool:
		"""
		# Whether the fate's effect should be considered undesirable.
		"""
		return self.impact < 0

class Test(object):
	"""
	# Manages the execution of a single test function.

	# [ Properties ]
	# /identifier/
		# The key used to retrieve the test function from its container.
	# /subject/
		# The callable performing the checks.
	# /fate/
		# The &Fate of the test once &seal has been called.
	# /exits/
		# A &contextlib.ExitStack for releasing resources allocated by the test.
		# The executor closes the stack after the subject returns.
	"""
	__slots__ = ('identifier', 'subject', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, *, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args, inverse=True)

	def skip(self, condition):
		"""
		# End the test as skipped when &condition is true.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def fail(self, cause):
		raise self.Fate(cause, subtype='fail')

	def seal(self):
		"""
		# Run the subject with &self as its only argument and record the &fate.
		"""
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")

		try:
			r = self.subject(self)
			self.fate = r if isinstance(r, self.Fate) else self.Fate(r, subtype='return')
		except self.Fate as fate:
			self.fate = fate
		except Exception as err:
			self.fate = self.Fate('test raised exception', subtype='fail')
			self.fate.__cause__ = err
			self.fate.line = err.__traceback__.tb_next.tb_lineno if err.__traceback__.tb_next else None
		except BaseException as err:
			self.fate = self.Fate('test raised interrupt', subtype='interrupt')
			self.fate.__cause__ = err
			raise

def execute(module):
	"""
	# Resolve the fate of the tests contained in &module. No status information
	# is printed and the fate of the first failure is raised.
	"""
	for identifier, subject in gather(module):
		test = Test(identifier, subject)
		with test.exits:
			test.seal()
		if test.fate.negative:
			raise test.fate
