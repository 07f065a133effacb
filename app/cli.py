"""
Command-line interface for the shopmesh services.

Usage:
    shopmesh serve <service> [--host HOST] [--port PORT]
    shopmesh demo

Examples:
    shopmesh serve user
    shopmesh serve order --port 4003
    shopmesh demo
"""

import argparse
import sys

import uvicorn

from app.utils import settings

SERVICES = {
    "product": ("app.product_service.main:app", settings.PRODUCT_SERVICE_PORT),
    "user": ("app.user_service.main:app", settings.USER_SERVICE_PORT),
    "order": ("app.order_service.main:app", settings.ORDER_SERVICE_PORT),
    "notification": ("app.notification_service.main:app", settings.NOTIFICATION_SERVICE_PORT),
}


def serve(service: str, host: str, port: int | None) -> None:
    target, default_port = SERVICES[service]
    uvicorn.run(target, host=host, port=port or default_port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shopmesh",
        description="E-commerce microservices demo",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve_p = sub.add_parser("serve", help="Start one service with uvicorn")
    serve_p.add_argument("service", choices=sorted(SERVICES))
    serve_p.add_argument("--host", default="0.0.0.0")
    serve_p.add_argument("--port", type=int, default=None)

    sub.add_parser("demo", help="Walk the full customer flow against running services")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        serve(args.service, args.host, args.port)
        return 0

    if args.command == "demo":
        from app.demo import run_demo
        return 0 if run_demo() else 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
