import pytest
from hypothesis import assume, given

from collect_until.aio_trampoline import Call, Done
from collect_until.hypothesis_strategies import anything

from .utils import recursion_limit


class TestTrampoline:
    @given(anything())
    def test_equality(self, value):
        assert Done(value) == Done(value)

    @given(anything(), anything())
    def test_inequality(self, first, second):
        assume(first != second)
        assert Done(first) != Done(second)

    @pytest.mark.asyncio
    async def test_map(self):
        assert await Done(['row1', 'row2']).map(len).run() == 2

    @pytest.mark.asyncio
    async def test_call(self):
        async def thunk():
            return Done('row1')

        assert await Call(thunk).run() == 'row1'
        assert await Call(thunk).and_then(lambda v: Done(v + '!')
                                          ).run() == 'row1!'

    @pytest.mark.asyncio
    async def test_coroutine_continuation(self):
        async def cont(v):
            return Done(v + 1)

        assert await Done(1).and_then(cont).and_then(cont).run() == 3

    @pytest.mark.asyncio
    async def test_stack_safety(self):
        t = Done(0)
        for _ in range(500):
            t = t.and_then(lambda v: Done(v + 1))
        with recursion_limit(150):
            assert await t.run() == 500
