"""Client address detection from request headers."""

from collections.abc import Mapping


def _header_get(headers: "Mapping[str, object] | None", name: str) -> str:
    if not headers:
        return ""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() != wanted:
            continue
        if isinstance(value, str):
            return value
        values = list(value)
        return values[0] if values else ""
    return ""


def _split_host_port(hostport: str) -> str:
    """Return the host part of ``host:port``; raise ValueError if malformed."""
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise ValueError("missing ']' in address")
        if hostport[end + 1:end + 2] != ":":
            raise ValueError("missing port in address")
        host = hostport[1:end]
        port = hostport[end + 2:]
    else:
        idx = hostport.rfind(":")
        if idx < 0:
            raise ValueError("missing port in address")
        host = hostport[:idx]
        port = hostport[idx + 1:]
        if ":" in host:
            raise ValueError("too many colons in address")
    if "[" in port or "]" in port:
        raise ValueError("unexpected bracket in port")
    return host


def client_ip(headers: "Mapping[str, object] | None", remote_addr: str = "") -> str:
    """Best-effort client IP: X-Forwarded-For, then X-Real-Ip, then the peer address."""
    forwarded = _header_get(headers, "X-Forwarded-For")
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    real_ip = _header_get(headers, "X-Real-Ip").strip()
    if real_ip:
        return real_ip
    try:
        return _split_host_port(remote_addr.strip())
    except ValueError:
        return ""