import argparse
import sys

from lunch.app.use_cases.manage_places import ManagePlacesUseCase
from lunch.app.use_cases.propose_place import ProposePlaceUseCase
from lunch.app.use_cases.record_outcome import RecordOutcomeUseCase
from lunch.core.entities import NEVER, Place, PlaceUpdate
from lunch.core.errors import PlaceError
from lunch.infrastructure.persistence.sqlite.place_repository import SQLitePlaceRepository
from lunch.utils.config import Settings
from lunch.utils.logging import setup_logging


def build_container(dbpath: str):
    repo = SQLitePlaceRepository(dbpath)
    return repo, ManagePlacesUseCase(repo), ProposePlaceUseCase(repo), RecordOutcomeUseCase(repo)


def _when(ts) -> str:
    return "never" if ts == NEVER else ts.strftime("%Y-%m-%d %H:%M")


def format_place(p: Place) -> str:
    return (
        f"{p.id} | {p.name} | {p.address or '-'} | "
        f"visited {_when(p.last_visited)} ({p.visit_count}) | "
        f"skipped {_when(p.last_skipped)} ({p.skip_count})"
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Pick where the team goes for lunch")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--team", required=True)
    common.add_argument("--dbpath", default=settings.db_path)

    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("add", parents=[common])
    p.add_argument("--name", required=True)
    p.add_argument("--address", default=None)

    sub.add_parser("list", parents=[common])

    for cmd in ("show", "delete", "visit", "skip"):
        p = sub.add_parser(cmd, parents=[common])
        p.add_argument("--id", required=True)

    p = sub.add_parser("update", parents=[common])
    p.add_argument("--id", required=True)
    p.add_argument("--name", default=None)
    p.add_argument("--address", default=None)
    p.add_argument("--clear-address", action="store_true")

    sub.add_parser("propose", parents=[common])
    return ap


def main(argv=None) -> int:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    args = build_parser(settings).parse_args(argv)

    repo = None
    try:
        repo, manage, propose, outcome = build_container(args.dbpath)
        if args.cmd == "add":
            print(format_place(manage.add(args.team, args.name, args.address)))
        elif args.cmd == "list":
            for p in manage.all_places(args.team):
                print(format_place(p))
        elif args.cmd == "show":
            print(format_place(manage.find_by_id(args.team, args.id)))
        elif args.cmd == "update":
            changes = PlaceUpdate(
                name=args.name, address=args.address, clear_address=args.clear_address
            )
            print(format_place(manage.update(args.team, args.id, changes)))
        elif args.cmd == "delete":
            manage.delete(args.team, args.id)
            print(f"Deleted {args.id}")
        elif args.cmd == "propose":
            print(format_place(propose.run(args.team)))
        elif args.cmd == "visit":
            print(format_place(outcome.visit(args.team, args.id)))
        elif args.cmd == "skip":
            outcome.skip(args.team, args.id)
            print(f"Skipped {args.id}")
    except PlaceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        if repo is not None:
            repo.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
