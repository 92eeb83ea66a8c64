from fbx4vrm_reporter.configuration.reporter_settings import DEFAULT_SERVER_URL, ReporterSettings

__all__ = [
    "DEFAULT_SERVER_URL",
    "ReporterSettings",
]
