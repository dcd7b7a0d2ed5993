"""Message and Options value tests."""

import dataclasses

import httpx
import pytest

from notifykit.message import Message
from notifykit.options import Options


class TestMessage:
    def test_defaults(self):
        msg = Message()
        assert msg.title is None
        assert msg.content == ""
        assert msg.image_url is None
        assert msg.color is None

    def test_is_immutable(self):
        msg = Message(content="hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.content = "changed"


class TestOptions:
    def test_defaults(self):
        opts = Options()
        assert opts.client is None
        assert opts.timeout is None

    def test_with_timeout_returns_new_instance(self):
        base = Options()
        opts = base.with_timeout(5)
        assert opts.timeout == 5
        assert base.timeout is None

    def test_with_client_returns_new_instance(self):
        client = httpx.AsyncClient()
        base = Options().with_timeout(3)
        opts = base.with_client(client)
        assert opts.client is client
        assert opts.timeout == 3
        assert base.client is None

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Options().timeout = 1
