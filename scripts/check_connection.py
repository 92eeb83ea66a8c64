import asyncio

from fbx4vrm_reporter.client.callback_adapter import CallbackAdapter
from fbx4vrm_reporter.client.reporter_service import ReporterService
from fbx4vrm_reporter.configuration.reporter_settings import ReporterSettings
from fbx4vrm_reporter.infrastructure.observability.logger_factory_service import configure_logging


async def main() -> None:
    # Server URL, verbosity and certificate handling come from FBX4VRM_* env vars
    settings = ReporterSettings()
    configure_logging(settings.log_level)

    service = ReporterService(settings)
    connected, message = await service.check_connection()
    print(("✅ " if connected else "❌ ") + message)
    if not connected:
        return

    def show_avatars(response):
        print(f"Got {len(response.avatars)} avatars")
        for avatar in response.avatars:
            print(f"  - {avatar.get_display_name()} (ID: {avatar.id}, Reports: {avatar.report_count})")

    adapter = CallbackAdapter(service.client)
    await adapter.get_avatar_list(show_avatars, lambda error: print(f"❌ Failed to get avatars: {error}"))
    await adapter.get_queue_stats(
        lambda stats: print(
            f"Queue: pending={stats.pending} processing={stats.processing} "
            f"completed={stats.completed} failed={stats.failed}"
        ),
        lambda error: print(f"❌ Failed to get queue stats: {error}"),
    )


if __name__ == "__main__":
    asyncio.run(main())
