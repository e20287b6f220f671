"""Peer address of the connection that sent a request."""

from starlette.requests import Request

from ..errors import PeerAddressError


def peer_address(request: Request) -> tuple[str, str]:
    """Return (ip, port) of the caller as strings.

    Raises:
        PeerAddressError: the server did not supply a usable address.
    """
    client = request.client
    if client is None:
        raise PeerAddressError("missing peer address")

    host, port = client.host, client.port
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not host:
        raise PeerAddressError(f"missing host in peer address {client.host}:{port}")
    if not isinstance(port, int) or isinstance(port, bool):
        raise PeerAddressError(f"invalid port in peer address {client.host}:{port}")
    return host, str(port)
