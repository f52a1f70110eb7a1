from __future__ import annotations

import argparse
import logging
from datetime import date
import sys
import re
from typing import Optional


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _observer_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument(
        "--zenith",
        default="official",
        help="Zenith in degrees, or one of: official, civil, nautical, astronomical",
    )
    p.add_argument("--verbose", action="store_true", help="Log calculation details to stderr")
    return p


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def fmt_time(t) -> str:
    return t.clock()


def _resolve_zenith_or_exit(p: argparse.ArgumentParser, value: str) -> float:
    from suntimes.core.errors import SunTimesError
    from suntimes.core.zenith import resolve_zenith

    try:
        return resolve_zenith(value)
    except SunTimesError as e:
        p.error(str(e.args[0]))
    raise RuntimeError("unreachable")


def cmd_event(event: str, argv: list[str]) -> int:
    import suntimes

    p = _observer_parser(f"suntimes {event}", f"UTC time of sun{event} for a date and location")
    args = p.parse_args(argv)
    _configure_logging(args.verbose)
    zenith = _resolve_zenith_or_exit(p, args.zenith)

    t = suntimes.compute_event(event, args.date, args.lat, args.lon, zenith)
    if t is None:
        print(f"{args.date.isoformat()}  Sun does not {event} (zenith {zenith:g} deg).")
    else:
        print(f"{args.date.isoformat()}  {event:<4} {fmt_time(t)} UTC")
    return 0


def cmd_both(argv: list[str]) -> int:
    import suntimes

    p = _observer_parser("suntimes both", "UTC sunrise and sunset bounding one local day")
    args = p.parse_args(argv)
    _configure_logging(args.verbose)
    zenith = _resolve_zenith_or_exit(p, args.zenith)

    rs = suntimes.sunrise_sunset(args.date, args.lat, args.lon, zenith)
    for label, t in (("rise", rs.rise), ("set", rs.set)):
        if t is None:
            print(f"  {label:<4}: Sun does not {label}.")
        else:
            print(f"  {label:<4}: {t.date.isoformat()} {fmt_time(t)} UTC")
    if rs.day_length_hours is not None:
        print(f"  day length: {rs.day_length_hours:.4f} h")
    return 0


def cmd_solar(argv: list[str]) -> int:
    from suntimes.core.types import CalculationRequest
    from suntimes.reference import solar

    p = _observer_parser("suntimes solar", "Print the intermediate solar quantities of the rise/set formula.")
    p.add_argument("--event", choices=["rise", "set"], default="rise")
    args = p.parse_args(argv)
    _configure_logging(args.verbose)
    zenith = _resolve_zenith_or_exit(p, args.zenith)

    req = CalculationRequest(event=args.event, date=args.date, latitude=args.lat, longitude=args.lon, zenith=zenith)
    t = solar.approximate_time(req.event, req.day_of_year, req.longitude)
    pos = solar.solar_position(t)
    cos_h = solar.cos_local_hour_angle(req.zenith, pos.sin_declination, pos.cos_declination, req.latitude)

    print(f"Input:")
    print(f"  date = {req.date.isoformat()} (day {req.day_of_year})  event = {req.event}")
    print(f"  lat  = {req.latitude:.6f}  lon = {req.longitude:.6f}  zenith = {req.zenith:.4f}")
    print()
    print("Solar position (degrees):")
    print(f"  approximate time   (t)  = {pos.approximate_time:.6f} d")
    print(f"  mean anomaly       (M)  = {pos.mean_anomaly_deg:.6f}")
    print(f"  true longitude     (L)  = {pos.true_longitude_deg:.6f}")
    print(f"  right ascension    (RA) = {pos.right_ascension_deg:.6f}  ({pos.right_ascension_hours:.6f} h)")
    print(f"  sin declination         = {pos.sin_declination:.6f}")
    print()
    print(f"cos H = {cos_h:.6f}")
    if not solar.has_event(cos_h):
        print("  Sun does not cross this zenith on this date.")
    else:
        print(f"  local hour angle   (H)  = {solar.suns_local_hour(req.event, cos_h):.6f}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    commands = {
        "rise": lambda rest: cmd_event("rise", rest),
        "set": lambda rest: cmd_event("set", rest),
        "both": cmd_both,
        "solar": cmd_solar,
    }
    if argv and argv[0] in commands:
        return commands[argv[0]](argv[1:])

    p = argparse.ArgumentParser(prog="suntimes", description="Sunrise/sunset times (UTC) CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("rise", help="UTC sunrise for a date and location")
    sub.add_parser("set", help="UTC sunset for a date and location")
    sub.add_parser("both", help="UTC sunrise and sunset bounding one local day")
    sub.add_parser("solar", help="Intermediate solar quantities of the formula")

    # only reached for --help or a bad command; argparse exits
    p.parse_args(argv)
    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
