"""CLI entry point for a day's prayer times.

Look up an address (needs network access for the geocoder):
    prayerly-schedule --address "Ottawa, Canada" --date 2026-10-17

Or give coordinates directly, with a fixed standard offset:
    prayerly-schedule --lat 45.356 --lng -75.7579 --utc-offset -5

Settings come from PRAYERLY_* environment variables (see prayerly.config);
--method overrides PRAYERLY_METHOD.
"""

import argparse
import logging
import os
import sys
from datetime import date, datetime
from pathlib import Path

import pytz
from dotenv import load_dotenv

from prayerly.calculator import AstronomicalCalculator
from prayerly.compute import GeocodingError, compute_day_schedule, run
from prayerly.config import METHODS, ConfigError, load_settings
from prayerly.dst import dst_offset, no_dst
from prayerly.i18n import event_name
from prayerly.models import DaySchedule, GeoLocation, ObserverContext, QueryInput

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prayerly-schedule", description="Print the prayer times for one day."
    )
    parser.add_argument("--address", help="Address to geocode")
    parser.add_argument("--lat", type=float, help="Latitude in decimal degrees")
    parser.add_argument("--lng", type=float, help="Longitude in decimal degrees")
    parser.add_argument("--tz", help="IANA zone name for --lat/--lng")
    parser.add_argument(
        "--utc-offset", type=float, help="Standard UTC offset in hours for --lat/--lng"
    )
    parser.add_argument(
        "--no-dst", action="store_true", help="Ignore daylight saving with --utc-offset"
    )
    parser.add_argument("--date", help="Local date, YYYY-MM-DD (default: today)")
    parser.add_argument("--method", choices=sorted(METHODS), help="Calculation method")
    parser.add_argument("--lang", choices=("en", "ar"), default="en")
    parser.add_argument(
        "--save", nargs="?", const="", metavar="PATH", help="Also save a PNG dial"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _coordinates_schedule(args, day: date, settings) -> DaySchedule:
    if args.tz:
        context = ObserverContext(
            lat=args.lat,
            lng=args.lng,
            tz_name=args.tz,
            day=day,
            address_display=f"{args.lat:.4f}, {args.lng:.4f}",
        )
        return compute_day_schedule(context, settings)

    if args.utc_offset is None:
        raise ValueError("--lat/--lng need either --tz or --utc-offset")
    location = GeoLocation.from_degrees(args.lat, args.lng, args.utc_offset)
    calculator = AstronomicalCalculator(settings, dst=no_dst if args.no_dst else dst_offset)
    context = ObserverContext(
        lat=args.lat,
        lng=args.lng,
        tz_name=f"UTC{args.utc_offset:+g}",
        day=day,
        address_display=f"{args.lat:.4f}, {args.lng:.4f}",
    )
    return DaySchedule(
        context=context, location=location, schedule=calculator.calculate(location, day)
    )


def print_schedule(day_schedule: DaySchedule, lang: str = "en") -> None:
    ctx = day_schedule.context
    first = day_schedule.schedule.times[0]
    print(f"{ctx.address_display} ({ctx.tz_name}), {first.date_display}")
    for kind, time in day_schedule.schedule.items():
        print(f"  {event_name(kind, lang):<12} {time.display:>8}  {time.date_display}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    env = dict(os.environ)
    if args.method:
        env["PRAYERLY_METHOD"] = args.method
    try:
        settings = load_settings(env)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    when = args.date or date.today().strftime("%Y-%m-%d")
    try:
        if args.address:
            day_schedule = run(QueryInput(address=args.address, when=when), settings)
        elif args.lat is not None and args.lng is not None:
            day = datetime.strptime(when, "%Y-%m-%d").date()
            day_schedule = _coordinates_schedule(args, day, settings)
        else:
            build_parser().print_usage(sys.stderr)
            return 2
    except GeocodingError as e:
        logger.error("%s", e)
        return 1
    except (ValueError, pytz.UnknownTimeZoneError) as e:
        logger.error("Invalid input: %s", e)
        return 2

    print_schedule(day_schedule, args.lang)

    if args.save is not None:
        from prayerly.renderers.static import save_static_chart

        path = save_static_chart(day_schedule, Path(args.save) if args.save else None)
        print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
