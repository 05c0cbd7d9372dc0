"""Basic usage examples for the weather widget."""

import asyncio
import tempfile
from pathlib import Path

from meteowidget import ConsoleSurface, JsonFileStore, WidgetRuntime, WidgetSettings


async def main() -> None:
    cache_file = Path(tempfile.gettempdir()) / "meteowidget-example.json"
    settings = WidgetSettings()
    store = JsonFileStore(cache_file)

    # First run: if nothing is cached yet this waits on the network.
    print("=== First load ===")
    async with WidgetRuntime(ConsoleSurface(), settings=settings, store=store) as runtime:
        state = await runtime.orchestrator.start()
        print(f"  state: {state.value}")

    # Second run: the cached snapshot is shown at once, then refreshed.
    print("\n=== Second load (cached) ===")
    async with WidgetRuntime(ConsoleSurface(), settings=settings, store=store) as runtime:
        state = await runtime.orchestrator.start()
        print(f"  state: {state.value}")
        print(f"  background refreshes pending: {runtime.orchestrator.background_pending}")

    # Going offline only shows a warning.
    print("\n=== Offline ===")
    async with WidgetRuntime(ConsoleSurface(), settings=settings, store=store) as runtime:
        runtime.orchestrator.on_offline()
        print(f"  state: {runtime.orchestrator.state.value}")


if __name__ == "__main__":
    asyncio.run(main())
