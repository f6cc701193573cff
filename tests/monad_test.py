from abc import ABC, abstractmethod


class FunctorTest(ABC):
    @abstractmethod
    def test_equality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_inequality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_composition_law(self, *args):
        raise NotImplementedError()


class MonadTest(FunctorTest, ABC):
    @abstractmethod
    def test_right_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_left_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_associativity_law(self, *args):
        raise NotImplementedError()


class SequencerTest(ABC):
    """
    Laws every `Sequencer` must satisfy for `collect_until` to work
    """
    @abstractmethod
    def test_lift_left_identity(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_sequence_short_circuits(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_tail_rec_stack_safety(self, *args):
        raise NotImplementedError()


class CombinerTest(ABC):
    @abstractmethod
    def test_combine_associativity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_combine_preserves_order(self, *args):
        raise NotImplementedError()
