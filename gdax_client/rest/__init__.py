"""Request abstraction and execution pipeline."""

from gdax_client.rest.client import USER_AGENT, RESTClient
from gdax_client.rest.decoding import decode_response
from gdax_client.rest.errors import ConnectorError, DecodeError, GdaxError, TransportError, UriError
from gdax_client.rest.pagination import After, Before, Cursor, Pagination
from gdax_client.rest.request import EndPointRequest, RestRequest
from gdax_client.rest.route import Route

__all__ = [
    "After",
    "Before",
    "ConnectorError",
    "Cursor",
    "DecodeError",
    "EndPointRequest",
    "GdaxError",
    "Pagination",
    "RESTClient",
    "RestRequest",
    "Route",
    "TransportError",
    "USER_AGENT",
    "UriError",
    "decode_response",
]
