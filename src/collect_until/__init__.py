from . import combiner, effect, either, logging, maybe, trampoline  # noqa
from .collect import Step, collect_until  # noqa
from .combiner import Combiner  # noqa
from .either import Either, Left, Right  # noqa
from .functions import *  # noqa
from .immutable import Immutable  # noqa
from .maybe import Just, Maybe, Nothing  # noqa
from .monad import MonadSequencer, Sequencer  # noqa
