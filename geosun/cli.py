"""
Command-line interface for geosun.

Provides a CLI for:
- Computing sun position and shadow for a place, date and time
- Saving scene results as JSON or YAML
- Listing the built-in cities
"""

import argparse
import logging
import sys

from geosun import __version__


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def list_cities() -> int:
    """Print the built-in city table."""
    from geosun.core.constants import FAMOUS_CITIES
    from geosun.solar.timezones import time_zone_name
    from geosun.utils.angles import format_degree_minute

    for city in FAMOUS_CITIES:
        lat = format_degree_minute(city.latitude, kind="latitude")
        lon = format_degree_minute(city.longitude, kind="longitude")
        print(f"  {city.name:<16} {lat:>10} {lon:>11}  {time_zone_name(city.zone)}")
    return 0


def build_config(args: argparse.Namespace) -> dict:
    """Build a scene configuration dictionary from CLI arguments."""
    config = {
        "name": "cli_scene",
        "observer": {
            "name": "custom",
            "latitude": args.latitude if args.latitude is not None else 39.9,
            "longitude": args.longitude if args.longitude is not None else 0.0,
        },
        "time": {
            "day_of_year": args.day if args.day is not None else 173,
            "local_hour": args.hour if args.hour is not None else 12.0,
        },
        "shadow": {
            "object_height": args.height if args.height is not None else 1.0,
        },
    }
    if args.city:
        config["observer"]["city"] = args.city
    return config


def run_scene(args: argparse.Namespace) -> int:
    """Compute a scene and print or save it."""
    from geosun.core.scene import SolarScene
    from geosun.utils.angles import (
        format_clock_time,
        format_day_length,
        format_degree_minute,
    )
    from geosun.orbit.seasons import format_day_of_year

    if args.config:
        scene = SolarScene(args.config)
    else:
        scene = SolarScene(build_config(args))

    result = scene.run()

    if args.output:
        output_path = scene.save_result(result, args.output, format=args.format or "json")
        print(f"Results saved to: {output_path}")
        return 0

    config = result.config
    print(f"\nScene: {config.observer.name}")
    print(f"  Latitude: {format_degree_minute(result.latitude)}")
    print(f"  Date: {format_day_of_year(config.time.day_of_year)} (day {config.time.day_of_year})")
    print(f"  Local solar time: {format_clock_time(config.time.local_hour)}")
    print(f"  Subsolar latitude: {format_degree_minute(result.subsolar_latitude)}")
    print(f"  Sun altitude: {result.sun.altitude_deg:.2f} deg")
    print(f"  Sun azimuth: {result.sun.azimuth_deg:.2f} deg ({result.sun_direction})")
    if result.shadow.is_finite:
        print(f"  Shadow length: {result.shadow.length:.3f} x object height")
    else:
        print("  Shadow length: no finite shadow (sun at or below the horizon)")
    print(f"  Shadow direction: {result.shadow.direction_deg:.2f} deg ({result.shadow_direction_label})")
    print(f"  Day length: {format_day_length(result.day_length)}")
    if result.sunrise_sunset is not None:
        print(f"  Sunrise: {format_clock_time(result.sunrise_sunset.sunrise)}")
        print(f"  Sunset: {format_clock_time(result.sunrise_sunset.sunset)}")

    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="geosun: sun position and shadow geometry for teaching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Noon shadow in Beijing near the summer solstice
    geosun --city Beijing --day 173 --hour 12

    # Scene from a configuration file, saved as YAML
    geosun --config scene.yaml --output result.yaml --format yaml

    # Built-in cities
    geosun --list-cities
        """,
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geosun {__version__}",
    )
    parser.add_argument(
        "--list-cities",
        action="store_true",
        help="List built-in cities and exit",
    )

    # Configuration options
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to YAML or JSON scene configuration",
    )

    # Location options
    parser.add_argument(
        "--city",
        type=str,
        help="Built-in city name (overrides --latitude/--longitude)",
    )
    parser.add_argument(
        "--latitude",
        type=float,
        help="Observer latitude [deg, north positive]",
    )
    parser.add_argument(
        "--longitude",
        type=float,
        help="Observer longitude [deg, east positive]",
    )

    # Time options
    parser.add_argument(
        "--day",
        type=int,
        help="Day of year (1-365)",
    )
    parser.add_argument(
        "--hour",
        type=float,
        help="Local solar time [hours]",
    )

    # Shadow options
    parser.add_argument(
        "--height",
        type=float,
        help="Height of the shadow-casting object",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output file path",
    )
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=["json", "yaml"],
        help="Output format",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.list_cities:
        return list_cities()

    try:
        return run_scene(args)
    except Exception as e:
        logging.exception(f"Scene computation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
