"""
# Provide the &systemkit.test.library.Test instance taken by test functions.
"""
import pytest

from systemkit.test import library as libtest

@pytest.fixture
def test(request):
	t = libtest.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
