"""Round-robin pool of interchangeable RPC endpoints."""

from collections.abc import Iterable, Iterator

from bsc_balance_checker.exceptions import ConfigurationError


class EndpointPool:
    """
    Fixed, ordered list of RPC endpoints with a rotating cursor.

    The endpoint list never changes after construction; only the current
    index moves, always wrapping modulo the pool size.

    Parameters
    ----------
    urls : Iterable[str]
        Endpoint URLs in preference order

    """

    def __init__(self, urls: Iterable[str]) -> None:
        self._urls: tuple[str, ...] = tuple(urls)
        self._index = 0

    @property
    def index(self) -> int:
        """Position of the current endpoint."""
        return self._index

    def current(self) -> str:
        """
        Get the currently selected endpoint.

        Returns
        -------
        str
            Endpoint URL

        Raises
        ------
        ConfigurationError
            If the pool has no endpoints

        """
        self._ensure_not_empty()
        return self._urls[self._index]

    def rotate(self) -> str:
        """
        Advance to the next endpoint, wrapping after the last one.

        Returns
        -------
        str
            The newly selected endpoint URL

        Raises
        ------
        ConfigurationError
            If the pool has no endpoints

        """
        self._ensure_not_empty()
        self._index = (self._index + 1) % len(self._urls)
        return self._urls[self._index]

    def _ensure_not_empty(self) -> None:
        if not self._urls:
            msg = "Endpoint pool is empty. Configure at least one RPC URL."
            raise ConfigurationError(msg)

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(self._urls)

    def __repr__(self) -> str:
        return f"EndpointPool(size={len(self._urls)}, index={self._index})"
