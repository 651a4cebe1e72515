"""Key/value accumulator shared by the unicode locale and transformed parsers.

Both extensions are a run of keys, each followed by its values:

    u: ukey uvalue*      (a key may stand alone: "u-ca" means "ca-true")
    t: tkey tvalue+      (a key without values is an error)

The accumulator is an explicit two-state machine:

    SEEKING_KEY          no key seen yet
    ACCUMULATING_VALUES  values attach to the active key

start_key() flushes the active key and activates a new one; finish() flushes
the last key. A key seen twice in one extension keeps its first position and
receives the later values ("u-ca-abc-nu-latn-ca-def" gives ca=(abc, def)).

One accumulator lives for one extension run and is never shared.
"""

from __future__ import annotations

from localeid.diagnostics import ErrorTemplate, LocaleSyntaxError, SourceSpan
from localeid.enums import KeywordState
from localeid.syntax.ast import Keyword

__all__ = ["KeywordAccumulator"]


class KeywordAccumulator:
    """Collect ordered, unique keys with their values.

    Example:
        >>> acc = KeywordAccumulator(allow_empty=True)
        >>> acc.start_key("hc")
        >>> acc.add_value("h12")
        >>> acc.finish()
        (Keyword(key='hc', values=('h12',)),)
    """

    __slots__ = ("_allow_empty", "_entries", "_key", "_key_span", "_values", "state")

    def __init__(self, *, allow_empty: bool) -> None:
        """Initialize an empty accumulator.

        Args:
            allow_empty: Accept keys without values (unicode locale keys)
        """
        self._allow_empty = allow_empty
        self._entries: dict[str, list[str]] = {}
        self._key: str | None = None
        self._key_span: SourceSpan | None = None
        self._values: list[str] = []
        self.state = KeywordState.SEEKING_KEY

    def start_key(self, key: str, span: SourceSpan | None = None) -> None:
        """Flush the active key and make key the new active key."""
        self._flush()
        self._key = key.lower()
        self._key_span = span
        self.state = KeywordState.ACCUMULATING_VALUES

    def add_value(self, value: str) -> None:
        """Append value to the active key.

        Raises:
            LocaleSyntaxError: UNEXPECTED if no key is active; callers check
                state before adding
        """
        if self.state is not KeywordState.ACCUMULATING_VALUES:
            raise LocaleSyntaxError(
                ErrorTemplate.unexpected(f"value '{value}' added with no active key"),
                input_value=value,
            )
        self._values.append(value.lower())

    def finish(self) -> tuple[Keyword, ...]:
        """Flush the active key and return every keyword in encounter order."""
        self._flush()
        return tuple(
            Keyword(key=key, values=tuple(values))
            for key, values in self._entries.items()
        )

    def _flush(self) -> None:
        if self._key is None:
            return
        if not self._values and not self._allow_empty:
            raise LocaleSyntaxError(
                ErrorTemplate.invalid_subtag(
                    self._key,
                    "at least one value after the key",
                    self._key_span,
                    "transformed_extensions",
                ),
                input_value=self._key,
            )
        self._entries.setdefault(self._key, []).extend(self._values)
        self._key = None
        self._key_span = None
        self._values = []
