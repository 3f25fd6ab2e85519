from __future__ import annotations
import argparse, os

DEFAULT_BASE_URL = "https://lambdaanimalspotter.vapor.cloud/api"

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Animal Spotter client")
    p.add_argument("--base-url", default=os.getenv("API_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--connect-timeout", type=float, default=float(os.getenv("CONNECT_TIMEOUT", "5")))
    p.add_argument("--read-timeout", type=float, default=float(os.getenv("READ_TIMEOUT", "30")))
    p.add_argument("--username", default=os.getenv("ANIMAL_SPOTTER_USERNAME"))
    p.add_argument("--password", default=os.getenv("ANIMAL_SPOTTER_PASSWORD"))

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("signup", help="create the account, then log in")
    sub.add_parser("names", help="list all animal names")
    show = sub.add_parser("show", help="show one animal")
    show.add_argument("name")
    image = sub.add_parser("image", help="download an animal's picture")
    image.add_argument("name")
    image.add_argument("--output", "-o", help="file to save to (default: <name>.<format>)")
    return p

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    if not args.username or not args.password:
        build_parser().error("--username and --password (or ANIMAL_SPOTTER_USERNAME/PASSWORD) are required")
    return args
