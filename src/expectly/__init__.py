"""expectly - fluent expectations for test suites."""

from .config import ExpectConfig, config_scope, get_config, load_config
from .diff import print_failure, render_diff
from .equality import is_equal
from .errors import ExpectationError, ExpectationFailedError, ExpectationUsageError
from .expectation import ALIASES, Expectation, expect
from .spy import CallRecord, Spy, create_spy, is_spy, restore_spies, spy_on
from .version import __version__


__all__ = [
    # Core
    "expect",
    "Expectation",
    "ALIASES",
    "is_equal",
    # Errors
    "ExpectationError",
    "ExpectationFailedError",
    "ExpectationUsageError",
    # Spies
    "CallRecord",
    "Spy",
    "create_spy",
    "is_spy",
    "restore_spies",
    "spy_on",
    # Configuration
    "ExpectConfig",
    "config_scope",
    "get_config",
    "load_config",
    # Diffs
    "print_failure",
    "render_diff",
    "__version__",
]
