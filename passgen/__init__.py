"""passgen: constraint-driven random password generation

Passwords are built from groups of symbols, each group with a relative weight
and a number of symbols every password must contain. A global cap limits how
often a single symbol may repeat, and caller-supplied rules may reject any
candidate symbol at its insertion index, forcing a new draw.

Cross-cutting Concerns:
    Thread Safety:
        - Configuration methods and generate() may be called from any thread
        - Each generate() call works on a snapshot of groups and rules

    Error Handling:
        - All library errors derive from PassGenError
        - Generation either returns a complete Password or raises

    Logging:
        - Module loggers under the "passgen" namespace, DEBUG only
        - Generated symbols are never logged
"""

from passgen.core.errors import InvalidArgumentError, NotConfiguredError, PassGenError
from passgen.core.generator import PasswordGenerator
from passgen.core.password import Password
from passgen.core.symbols import Symbol, SymbolSet
from passgen.runtime.randomness import SerializedRandom

__version__ = "0.1.0"

__all__ = [
    "PasswordGenerator",
    "Password",
    "Symbol",
    "SymbolSet",
    "SerializedRandom",
    # Errors
    "PassGenError",
    "NotConfiguredError",
    "InvalidArgumentError",
]
