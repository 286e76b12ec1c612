from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import InvalidRequestError, RequestTimeoutError, TransportError


@contextmanager
def handle_transport_errors() -> Generator[None, None, None]:
    """Context manager converting httpx failures into FlowNet errors.

    Wraps the network round trip only; HTTP status and decoding failures are
    classified by the transport core once a response has arrived.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        RequestTimeoutError: For connect, read, write and pool timeouts.
        InvalidRequestError: For URLs httpx refuses to send.
        TransportError: For every other connectivity failure.
    """
    try:
        yield
    except httpx.TimeoutException as e:
        raise RequestTimeoutError(e) from e
    except httpx.InvalidURL as e:
        raise InvalidRequestError(str(e)) from e
    except httpx.RequestError as e:
        raise TransportError(e) from e
