"""
Command-line entrypoint for the Animal Spotter client.

- Parses CLI args and config
- Initializes HttpClient and APIClient
- Logs in (after signing up for `signup`), then runs the subcommand:
    names        list all animal names
    show NAME    print one animal's details
    image NAME   download the animal's picture

Auth errors exit with 3 and a re-login hint; other client errors exit with 1.
"""
from __future__ import annotations
import argparse, asyncio, sys

from http_client import HttpClient

from .api import APIClient
from .config import parse_args
from .errors import AnimalSpotterError, BadAuth, NoAuth
from .models import AnimalDetail, Credentials
from .utils import encode_path_segment, epoch_to_iso8601_utc

def format_detail(animal: AnimalDetail) -> str:
    seen = epoch_to_iso8601_utc(animal.get("timeSeen"))
    lines = [
        f"Name        : {animal['name']}",
        f"Seen at     : {seen or 'unknown'}",
        f"Location    : {animal.get('latitude', '?')}, {animal.get('longitude', '?')}",
        f"Description : {animal.get('description', '')}",
        f"Image       : {animal.get('imageURL', '')}",
    ]
    return "\n".join(lines)

async def run(args: argparse.Namespace) -> None:
    credentials: Credentials = {"username": args.username, "password": args.password}
    async with HttpClient(
        base_url=args.base_url,
        connect_timeout=args.connect_timeout,
        read_timeout=args.read_timeout,
    ) as http:
        api = APIClient(http)
        print(f"""
            ====== Animal Spotter ======
            Base URL       : {args.base_url}
            User           : {args.username}
            Timeouts (s)   : connect={args.connect_timeout} read={args.read_timeout}
            ============================
        """)
        if args.command == "signup":
            await api.register(credentials)
            print(f"Signed up as {args.username}.")
        await api.authenticate(credentials)

        if args.command == "names":
            for name in await api.list_animal_names():
                print(name)
        elif args.command == "show":
            print(format_detail(await api.fetch_animal_detail(args.name)))
        elif args.command == "image":
            animal = await api.fetch_animal_detail(args.name)
            url = animal.get("imageURL")
            if not url:
                print(f"{animal['name']} has no image.", file=sys.stderr)
                return
            image = await api.fetch_image(url)
            fmt = (image.format or "png").lower()
            output = args.output or f"{encode_path_segment(animal['name'])}.{fmt}"
            image.save(output)
            print(f"Saved {image.width}x{image.height} {fmt} to {output}.")

def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        asyncio.run(run(args))
    except (NoAuth, BadAuth) as e:
        print(f"Not authorized ({e.kind.value}): log in again.", file=sys.stderr)
        sys.exit(3)
    except AnimalSpotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
