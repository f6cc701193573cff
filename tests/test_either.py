from hypothesis import assume, given

from collect_until import MonadSequencer
from collect_until.either import Left, Right, sequencer
from collect_until.hypothesis_strategies import anything, eithers, unaries

from .monad_test import MonadTest, SequencerTest
from .utils import recursion_limit


def countdown(i):
    if i == 0:
        return Right(Right('done'))
    return Right(Left(i - 1))


class TestEither(MonadTest, SequencerTest):
    @given(eithers(anything()))
    def test_right_identity_law(self, either):
        assert either.and_then(Right) == either

    @given(anything(), unaries(eithers(anything())))
    def test_left_identity_law(self, value, f):
        assert Right(value).and_then(f) == f(value)

    @given(
        eithers(anything()),
        unaries(eithers(anything())),
        unaries(eithers(anything()))
    )
    def test_associativity_law(self, either, f, g):
        assert either.and_then(f).and_then(g) == either.and_then(
            lambda x: f(x).and_then(g)
        )

    @given(anything())
    def test_equality(self, value):
        assert Left(value) == Left(value)
        assert Right(value) == Right(value)

    @given(anything(), anything())
    def test_inequality(self, first, second):
        assume(first != second)
        assert Left(first) != Left(second)
        assert Right(first) != Right(second)
        assert Left(first) != Right(first)

    @given(anything())
    def test_identity_law(self, value):
        assert Left(value).map(lambda v: v) == Left(value)
        assert Right(value).map(lambda v: v) == Right(value)

    @given(unaries(anything()), unaries(anything()), anything())
    def test_composition_law(self, f, g, value):
        assert Left(value).map(lambda v: f(g(v))) == Left(value).map(g).map(f)
        assert Right(value).map(lambda v: f(g(v))
                                ) == Right(value).map(g).map(f)

    @given(anything())
    def test_bool(self, value):
        assert bool(Right(value))
        assert not bool(Left(value))

    def test_repr(self):
        assert repr(Right(['row1'])) == "Right(['row1'])"
        assert repr(Left('invalid page')) == "Left('invalid page')"

    @given(anything(), unaries(eithers(anything())))
    def test_lift_left_identity(self, value, f):
        assert sequencer.sequence(sequencer.lift(value), f) == f(value)

    @given(anything())
    def test_sequence_short_circuits(self, reason):
        def f(_):
            raise AssertionError('continuation called after failure')

        assert sequencer.sequence(Left(reason), f) == Left(reason)

    def test_map(self):
        assert sequencer.map(Right(1), str) == Right('1')
        assert sequencer.map(Left('error'), str) == Left('error')

    def test_tail_rec_failure(self):
        def fail_at_5(i):
            if i == 5:
                return Left('failed at 5')
            return Right(Left(i - 1))

        assert sequencer.tail_rec(fail_at_5, 10) == Left('failed at 5')

    def test_tail_rec_stack_safety(self):
        with recursion_limit(100):
            assert sequencer.tail_rec(countdown, 5000) == Right('done')

    def test_monad_sequencer_tail_rec_stack_safety(self):
        s = MonadSequencer(Right)
        with recursion_limit(100):
            assert s.tail_rec(countdown, 5000) == Right('done')
