"""
Error factory: composes details and builds decorated errors.

An ``ErrorFactory`` owns two things: the store factory that turns an ordered
list of details into a ``DetailStore`` and the detalizers that contribute
automatic details (call stack, timestamp, request id...) on every error it
creates. Both are fixed at construction; the factory is immutable and safe
to share.

Composition order on ``new(message, *details, **named_details)``:

    1. positional details, in the order given
    2. keyword details as ``(name, value)`` pairs, in the order given
    3. each detalizer's output, in registration order

The combined list goes to the store factory, so with the default
``DetailChain`` a detalizer's detail shadows a caller detail with the same
key, and the last detalizer wins among detalizers.

Manifesto:
    - **Explicit instances:** No hidden global state; callers build and
      inject the factory they want (``errdetails.defaults`` offers a
      settings-driven one for convenience)
    - **Fail fast:** A factory without a store factory is a programming
      error and is rejected at construction, not on first use
    - **Pluggable storage:** Any callable returning a DetailStore works

Examples:
    >>> from errdetails.detalizers import new_timestamp_detalizer
    >>> errors = ErrorFactory(new_timestamp_detalizer())
    >>> err = errors.new("Quota exceeded", ("tenant", "acme"))
    >>> err.get("tenant")
    'acme'

    Upgrading a plain exception:

    >>> errors.convert_to_error(KeyError("user")).message
    "'user'"

Guardrails:
    ❌ DON'T: Pass ``store_factory=None`` to get "no details"
    ✅ DO: Pass a store factory that returns ``None``

    ❌ DON'T: Do slow work inside a detalizer's call
    ✅ DO: Capture cheaply and render lazily in the value's ``display()``

Tags:
    error-factory, detalizer, composition, dependency-injection, errdetails

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from errdetails.chain import Detail, DetailChain, as_detail
from errdetails.decorated import DecoratedError
from errdetails.errors import MisconfiguredFactoryError
from errdetails.logging import get_logger
from errdetails.protocols import DetailedError, Detalizer, StoreFactory

logger = get_logger(__name__)


class ErrorFactory:
    """
    Builds ``DecoratedError`` values from a message and details.

    Args:
        *detalizers: Detail providers invoked on every ``new()`` call, in
            order. ``None`` entries are accepted and skipped.
        store_factory: Builds the detail store from the combined details.
            Defaults to ``DetailChain.from_pairs``.

    Raises:
        MisconfiguredFactoryError: If ``store_factory`` is ``None`` or not
            callable.
    """

    def __init__(
        self,
        *detalizers: Detalizer | None,
        store_factory: StoreFactory | None = DetailChain.from_pairs,
    ):
        if store_factory is None or not callable(store_factory):
            logger.error("error_factory_misconfigured", store_factory=repr(store_factory))
            raise MisconfiguredFactoryError(store_factory)
        self._store_factory = store_factory
        self._detalizers: tuple[Detalizer | None, ...] = tuple(detalizers)

    @property
    def detalizers(self) -> tuple[Detalizer | None, ...]:
        return self._detalizers

    @property
    def store_factory(self) -> StoreFactory:
        return self._store_factory

    def with_detalizers(self, *detalizers: Detalizer | None) -> ErrorFactory:
        """Return a new factory with ``detalizers`` registered after the current ones."""
        return ErrorFactory(*self._detalizers, *detalizers, store_factory=self._store_factory)

    def new(self, message: str, /, *details: Any, **named_details: Any) -> DecoratedError:
        """Create an error with ``message``, caller details and detalizer output."""
        combined: list[Detail] = [as_detail(pair) for pair in details]
        combined.extend(Detail(name, value) for name, value in named_details.items())
        for detalizer in self._detalizers:
            if detalizer is None:
                continue
            combined.extend(_collect(detalizer()))
        return DecoratedError(message, self._store_factory(combined), self)

    def errorf(self, fmt: str, /, *args: Any, **kwargs: Any) -> DecoratedError:
        """Create an error whose message is ``fmt.format(*args, **kwargs)``."""
        return self.new(fmt.format(*args, **kwargs))

    def convert_to_error(self, e: BaseException | None) -> DecoratedError | None:
        """
        Upgrade a plain exception to a decorated error.

        Errors already satisfying ``DetailedError`` are returned unchanged,
        ``None`` stays ``None``, anything else becomes ``new(str(e))``.
        """
        if isinstance(e, DetailedError):
            return e  # type: ignore[return-value]
        if e is None:
            return None
        return self.new(str(e))

    def __repr__(self) -> str:
        return f"ErrorFactory(detalizers={len(self._detalizers)})"


def _collect(pairs: Iterable[Any] | None) -> list[Detail]:
    if pairs is None:
        return []
    return [as_detail(pair) for pair in pairs]


__all__ = [
    "ErrorFactory",
]
