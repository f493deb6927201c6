"""Server side of sift: dispatch, error mapping, ASGI glue, and runners."""
