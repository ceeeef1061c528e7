import json
import sys
from datetime import date

from solar_events.services.day_events import compute_day_events, hours_to_datetime, EngineConfig
from solar_events.services.transit_solver import Coordinate


def main() -> None:
    day = date.fromisoformat(sys.argv[1])
    coordinate = Coordinate(latitude=float(sys.argv[2]), longitude=float(sys.argv[3]))
    events = compute_day_events(day, coordinate, EngineConfig.from_env())

    def _fmt(hours):
        return None if hours is None else hours_to_datetime(day, hours).isoformat()

    print(
        json.dumps(
            {
                "date": day.isoformat(),
                "latitude": coordinate.latitude,
                "longitude": coordinate.longitude,
                "approximate_transit": events.approximate_transit,
                "transit": _fmt(events.transit),
                "sunrise": _fmt(events.sunrise),
                "sunset": _fmt(events.sunset),
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    if len(sys.argv) < 4:
        print("Usage: python cli.py YYYY-MM-DD LAT LON")
        sys.exit(1)
    main()
