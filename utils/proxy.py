def proxy_string_to_dict(proxy_str: str) -> dict[str, str]:
    """Convert a proxy string into the mapping expected by ``requests``.

    Accepted formats are 'host:port' and 'host:port:username:password'.

    Raises:
        ValueError: If the string doesn't match either format.
    """
    if not isinstance(proxy_str, str):
        raise ValueError("proxy_str must be a string")

    # Split into 4 parts max (allows ':' in password if present)
    parts = [p.strip() for p in proxy_str.strip().split(":", 3)]
    if len(parts) == 2 and all(parts):
        host, port = parts
        url = f"http://{host}:{port}"
    elif len(parts) == 4 and all(parts):
        host, port, username, password = parts
        url = f"http://{username}:{password}@{host}:{port}"
    else:
        raise ValueError("format: 'host:port' or 'host:port:username:password'")

    if not port.isdigit():
        raise ValueError(f"invalid proxy port: {port!r}")

    return {"http": url, "https": url}
