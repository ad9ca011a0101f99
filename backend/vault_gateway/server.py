from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from vault_gateway.core.settings import get_settings
from vault_gateway.errors import ConfigurationError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Vault transit/transform demo gateway.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to bind (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(exc.message, file=sys.stderr)
        raise SystemExit(1)

    # The logger reads its file location from settings, so it loads after them.
    from vault_gateway.logger import gateway_logger as logger

    if settings.missing_vault_settings():
        # The gateway is useless without Vault; refuse to start.
        logger.error("Missing VAULT_ADDR or VAULT_TOKEN env vars.")
        print("Missing VAULT_ADDR or VAULT_TOKEN env vars.", file=sys.stderr)
        raise SystemExit(1)

    import uvicorn

    logger.info(f"Demo running on http://{args.host}:{args.port}")
    uvicorn.run("vault_gateway.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
