"""iris-functor: a maybe-container with validator hooks for Python 3.13+.

Flat imports (preferred):
    from iris_functor import of, maybe, empty, Present, Empty, Functor
    from iris_functor import lift, sequence, init

Submodule imports (for organization):
    from iris_functor.functor import Present, EmptyType
    from iris_functor.errors import NoSuchElementError
    from iris_functor.decorators import lift
"""

# Combinators
from iris_functor.combinators import first_present, present_values, sequence, traverse

# Configuration
from iris_functor._config import FunctorConfig, get_config, init, reset_config

# Decorators
from iris_functor.decorators import lift

# Errors
from iris_functor.errors import (
    FunctorError,
    MissingValidatorError,
    NoSuchElementError,
    NullPayloadError,
)

# Types and factories
from iris_functor.functor import (
    Empty,
    EmptyType,
    Functor,
    Present,
    ValidatorSlot,
    empty,
    is_functor,
    maybe,
    of,
)

# Logging
from iris_functor._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

__all__ = [
    # Types
    'Empty',
    'EmptyType',
    'Functor',
    # Configuration
    'FunctorConfig',
    # Errors
    'FunctorError',
    'MissingValidatorError',
    'NoSuchElementError',
    'NullPayloadError',
    'Present',
    'ValidatorSlot',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    # Factories
    'empty',
    # Combinators
    'first_present',
    'get_config',
    'get_logger',
    'init',
    'is_functor',
    # Decorators
    'lift',
    'maybe',
    'of',
    'present_values',
    'remove_log_hook',
    'reset_config',
    'sequence',
    'traverse',
]
