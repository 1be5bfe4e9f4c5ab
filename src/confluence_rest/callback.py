"""Callback interface for asynchronous requests."""

from typing import Callable, Generic, Optional, Protocol, TypeVar

import requests

T = TypeVar('T')
T_contra = TypeVar('T_contra', contravariant=True)


class Callback(Protocol[T_contra]):
    """Receives the outcome of an asynchronous request.

    Exactly one of the two methods is called, on the worker thread that
    performed the request.
    """

    def success(self, result: T_contra, response: requests.Response) -> None:
        ...

    def failure(self, error: Exception) -> None:
        ...


class FunctionCallback(Generic[T]):
    """Adapts plain functions to the Callback interface.

    Example:
        >>> callback = FunctionCallback(lambda content, response: print(content.id))
        >>> client.post_content_with_callback(content, callback)
    """

    def __init__(
        self,
        on_success: Callable[[T, requests.Response], None],
        on_failure: Optional[Callable[[Exception], None]] = None,
    ):
        self._on_success = on_success
        self._on_failure = on_failure

    def success(self, result: T, response: requests.Response) -> None:
        self._on_success(result, response)

    def failure(self, error: Exception) -> None:
        if self._on_failure is not None:
            self._on_failure(error)
