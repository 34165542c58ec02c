import json

import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body=None):
        self.status_code = status_code
        if body is None:
            body = json.dumps(payload) if payload is not None else ""
        self.content = body.encode("utf-8")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return json.loads(self.content.decode("utf-8"))


class FakeSession:
    """Stands in for requests.Session; maps URL -> FakeResponse or exception."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True

    def get(self, url, timeout=None):
        self.calls.append(url)
        answer = self.routes.get(url)
        if answer is None:
            raise requests.ConnectionError(f"no route for {url}")
        if isinstance(answer, Exception):
            raise answer
        return answer


def bgpview_routes(asn, ipv4=(), ipv6=(), name="Example Net", status="ok"):
    prefixes = {
        "status": status,
        "data": {
            "ipv4_prefixes": [{"prefix": p} for p in ipv4],
            "ipv6_prefixes": [{"prefix": p} for p in ipv6],
        },
    }
    info = {"status": status, "data": {"name": name}}
    return {
        f"https://api.bgpview.io/asn/{asn}/prefixes": FakeResponse(prefixes),
        f"https://api.bgpview.io/asn/{asn}": FakeResponse(info),
    }
