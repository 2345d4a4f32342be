import pytest


class RecordingDockerClient:
    """Stands in for DockerClient and remembers every call."""

    def __init__(self, existing=(), result=True, binary="docker"):
        self.binary = binary
        self.existing = set(existing)
        self.result = result
        self.checked = []
        self.commands = []

    def volume_exists(self, volume_name):
        self.checked.append(volume_name)
        return volume_name in self.existing

    def list_volumes(self):
        return [{'Name': name, 'Driver': 'local'} for name in sorted(self.existing)]

    def execute(self, command):
        self.commands.append(command)
        return self.result


@pytest.fixture
def docker_client():
    return RecordingDockerClient()


@pytest.fixture
def archive_dir(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    return data
