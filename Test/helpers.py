from unittest.mock import MagicMock


def make_response(status_code=200, content=b""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    return resp


def stat_lines(count):
    return "\n".join(f"{i + 1},{i + 10},{(i + 1) * 1000}" for i in range(count))
