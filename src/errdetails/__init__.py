"""errdetails -- typed, renderable details for error values.

Manifesto:
    An error has three audiences: the end user, the code that has to decide
    what to do next, and the operator reading the logs. A plain exception
    message serves none of the last two well. ``errdetails`` lets the code
    that creates an error attach typed key/value details once, and then:

    - **code** asks ``err.lookup(IS_RETRIABLE)`` to choose a branch
    - **operators** read ``err.detailed()``: the message plus one line per
      displayable detail

    Keys and values opt into the operator view by implementing
    ``display()`` (or being plain strings); everything else stays available
    to code only.

Architecture::

    keys.py         Key / Label / CAUSED_BY_DETAIL_KEY
    protocols.py    Displayable, DetailStore, Detalizer, DetailedError
    render.py       per-detail line rule ("key : value")
    chain.py        DetailChain, the immutable default detail store
    decorated.py    DecoratedError (message + details + causal chaining)
    factory.py      ErrorFactory (details + detalizers -> DecoratedError)
    detalizers/     call stack and timestamp providers
    settings.py     ErrdetailsSettings (pydantic-settings)
    defaults.py     settings-driven default factory + new()/errorf()/...
    logging.py      structlog configuration + decorated error processor

Quick start::

    from errdetails import ErrorFactory, Label
    from errdetails.detalizers import new_callstack_detalizer

    IS_CRITICAL = Label("Is Critical")
    errors = ErrorFactory(new_callstack_detalizer())

    err = errors.new("Ledger mismatch", (IS_CRITICAL, True), account="A-17")
    if IS_CRITICAL in err:
        page_on_call(err.detailed())
"""

from errdetails.chain import EMPTY_CHAIN, Detail, DetailChain
from errdetails.decorated import DecoratedError
from errdetails.defaults import (
    build_factory,
    convert_to_error,
    errorf,
    get_default_factory,
    new,
    new_with_details,
)
from errdetails.errors import (
    ErrdetailsError,
    ErrorCategory,
    InvalidKeyKindError,
    MisconfiguredFactoryError,
)
from errdetails.factory import ErrorFactory
from errdetails.keys import CAUSED_BY_DETAIL_KEY, Key, Label
from errdetails.protocols import DetailedError, DetailStore, Detalizer, Displayable, StoreFactory
from errdetails.render import display_text, render_detail

__version__ = "0.1.0"

__all__ = [
    # Keys
    "CAUSED_BY_DETAIL_KEY",
    "Key",
    "Label",
    # Storage
    "Detail",
    "DetailChain",
    "EMPTY_CHAIN",
    "display_text",
    "render_detail",
    # Errors
    "DecoratedError",
    "ErrorFactory",
    "ErrdetailsError",
    "ErrorCategory",
    "InvalidKeyKindError",
    "MisconfiguredFactoryError",
    # Protocols
    "DetailedError",
    "DetailStore",
    "Detalizer",
    "Displayable",
    "StoreFactory",
    # Default factory
    "build_factory",
    "convert_to_error",
    "errorf",
    "get_default_factory",
    "new",
    "new_with_details",
]
