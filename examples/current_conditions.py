"""Fetch and print current conditions without the orchestrator."""

import asyncio

from meteowidget import Coordinates, FetchError, LocationNamer, LocationResolver, WeatherFetcher
from meteowidget.formatters import format_view
from meteowidget.location import IPLocationProvider


async def main() -> None:
    provider = IPLocationProvider()
    fetcher = WeatherFetcher(temperature_unit="celsius", wind_speed_unit="kmh")
    namer = LocationNamer()
    try:
        coords = await LocationResolver(provider).resolve()
        print(f"Resolved location: {coords.latitude:.2f}, {coords.longitude:.2f}")

        try:
            snapshot = await fetcher.fetch(coords)
        except FetchError as exc:
            print(f"Could not fetch weather: {exc}")
            return

        view = format_view(snapshot, await namer.lookup(coords))
        print(f"{view.icon} {view.location}")
        print(f"  {view.temperature}° {view.description} ({view.feels_like})")
        print(f"  Humidity {view.humidity}, wind {view.wind_speed}, precipitation {view.precipitation}")

        # A fixed location works the same way.
        berlin = await fetcher.fetch(Coordinates(latitude=52.52, longitude=13.41))
        print(f"\nBerlin: {format_view(berlin, 'Berlin, Germany').temperature}°")
    finally:
        await provider.close()
        await fetcher.close()
        await namer.close()


if __name__ == "__main__":
    asyncio.run(main())
