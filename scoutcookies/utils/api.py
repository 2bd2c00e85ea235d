# --- scoutcookies/utils/api.py ---
from datetime import datetime, timezone


def _envelope(status, message, data):
    return {
        "status": status,
        "message": message,
        "data": {
            **(data or {}),
            "API_TIME": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        },
    }


def api_ok(message, data=None):
    return _envelope(True, message, data)


def api_error(message, data=None):
    return _envelope(False, message, data)


def json_object(req):
    """Request body when it is a JSON object, else an empty dict."""
    data = req.get_json(silent=True)
    return data if isinstance(data, dict) else {}
