import hashlib
import json


def payload_hash(payload: dict, prefix: str = "") -> str:
    """Stable SHA-256 key for a JSON-able payload, independent of key order"""
    body = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    return prefix + hashlib.sha256(body.encode()).hexdigest()
