import pickle
from operator import neg

import pytest

import lambdautils
from lambdautils.utils import compose, identity, require


def test_identity():
    obj = object()
    assert identity(obj) is obj


class TestCompose:
    def test_call(self):
        func = compose(str, neg, lambda x, y: x + y)
        assert func(4, y=3) == "-7"

    def test_single(self):
        assert compose(len)("abc") == 3

    def test_equality(self):
        assert compose(str, neg) == compose(str, neg)
        assert compose(str, neg) != compose(neg, str)
        assert not compose(str) == object()
        assert hash(compose(str, neg)) == hash(compose(str, neg))

    def test_repr(self):
        assert repr(compose(str, len)) == (
            "compose(<class 'str'>, <built-in function len>)"
        )

    def test_pickle(self):
        func = pickle.loads(pickle.dumps(compose(str, neg)))
        assert func == compose(str, neg)
        assert func(3) == "-3"


class TestRequire:
    def test_ok(self):
        obj = object()
        assert require(obj, "foo") is obj

    def test_falsy_is_ok(self):
        assert require(0, "foo") == 0

    def test_none(self):
        with pytest.raises(lambdautils.NullArgumentError, match="foo"):
            require(None, "foo")


def test_version():
    assert isinstance(lambdautils.__version__, str)
