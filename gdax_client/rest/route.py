"""Path and query-string builder for request routes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from urllib.parse import quote, urlencode

# RFC 3986 pchar minus unreserved characters, which quote() never escapes.
_PATH_SAFE = "!$&'()*+,;=:@"


@dataclass(frozen=True, slots=True)
class Route:
    """Immutable path-and-query portion of a request URI.

    Builder methods return a new Route, so a partially built route can be
    shared as a prefix without aliasing::

        Route().add_segment("products").add_segment("BTC-USD").add_segment("book")
            .add_attribute_value("level", 2)

    renders as ``/products/BTC-USD/book?level=2``.
    """

    segments: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()

    def add_segment(self, segment: str) -> Route:
        return replace(self, segments=(*self.segments, str(segment)))

    def add_attribute_value(self, key: str, value: object) -> Route:
        return replace(self, attributes=(*self.attributes, (str(key), str(value))))

    @property
    def path(self) -> str:
        return "/" + "/".join(quote(segment, safe=_PATH_SAFE) for segment in self.segments)

    @property
    def query(self) -> str:
        """Encoded attributes without the leading ``?``; empty when there are none."""
        return urlencode(self.attributes)

    def to_string(self) -> str:
        query = self.query
        return f"{self.path}?{query}" if query else self.path

    def __str__(self) -> str:
        return self.to_string()
