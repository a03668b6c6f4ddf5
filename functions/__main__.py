# functions/__main__.py
import json
import sys

from core.logger import get_logger
from functions import HANDLERS

logger = get_logger(__name__)


def main(argv: list[str]) -> int:
    if len(argv) < 2 or argv[1] not in HANDLERS:
        print(f"usage: python -m functions {{{','.join(HANDLERS)}}} [id]", file=sys.stderr)
        return 1

    name = argv[1]
    if name == "submit-form":
        event = {"httpMethod": "POST", "body": sys.stdin.read()}
    else:
        params = {"id": argv[2]} if len(argv) > 2 else None
        event = {"httpMethod": "GET", "queryStringParameters": params}

    response = HANDLERS[name](event)
    body = response["body"]
    print(response["statusCode"])
    print(json.dumps(json.loads(body), indent=2) if body else "")
    return 0 if response["statusCode"] < 400 else 2


if __name__ == "__main__":
    try:
        raise SystemExit(main(sys.argv))
    except Exception as e:
        logger.exception("Fatal runner error: %s", e)
        raise SystemExit(2)
