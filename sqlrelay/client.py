# sqlrelay/client.py
from typing import NamedTuple

import requests
from .config import settings

class RelayResult(NamedTuple):
    ok: bool
    sql: str
    status_code: int | None
    code: str | None
    error: str | None

def relay_headers(api_key: str | None) -> dict[str, str]:
    # what the hosting platform's gateway expects in front of the relay
    if not api_key:
        return {}
    return {"apikey": api_key, "Authorization": f"Bearer {api_key}"}

def call_relay(question: str, api_url: str | None = None, api_key: str | None = None) -> RelayResult:
    """
    POSTs the question to the relay's /convert-to-sql endpoint.
    Relay-side failures come back as a RelayResult with ok=False;
    transport failures raise requests.exceptions.RequestException and a
    200 without a {"sql": str} body raises ValueError.
    """
    url = (api_url or settings.relay_url).rstrip("/") + "/convert-to-sql"
    r = requests.post(
        url,
        json={"query": question},
        headers=relay_headers(api_key if api_key is not None else settings.relay_api_key),
        timeout=60,
    )
    if r.status_code == 200:
        data = r.json()
        if not isinstance(data, dict) or not isinstance(data.get("sql"), str):
            raise ValueError(f"Unexpected relay response: {r.text[:200]}")
        return RelayResult(True, data["sql"], 200, None, None)

    try:
        data = r.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        return RelayResult(False, "", r.status_code, None, r.text)
    return RelayResult(False, "", r.status_code, data.get("code"), data.get("error"))
