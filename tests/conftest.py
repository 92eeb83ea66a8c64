import pytest

from fbx4vrm_reporter.client.fbx4vrm_api_client import Fbx4vrmApiClient
from fbx4vrm_reporter.configuration.reporter_settings import ReporterSettings

BASE_URL = "https://reports.example.com:8443"

# Smallest valid PNG header: signature + IHDR for a 4x3 image
PNG_4X3 = (
    b"\x89PNG\r\n\x1a\n"
    b"\x00\x00\x00\rIHDR"
    b"\x00\x00\x00\x04\x00\x00\x00\x03"
    b"\x08\x02\x00\x00\x00"
)


@pytest.fixture
def settings():
    return ReporterSettings(
        server_url=BASE_URL + "/",
        timeout_seconds=5,
        verbose_logging=False,
        skip_certificate_validation=False,
        package_version="1.4.0",
        unity_version="2022.3.22f1",
    )


@pytest.fixture
def client(settings):
    return Fbx4vrmApiClient(settings)


@pytest.fixture
def png_bytes():
    return PNG_4X3
