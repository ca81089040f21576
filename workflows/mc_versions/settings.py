import os

from shared.launcher_meta import VERSION_MANIFEST_URL

DEFAULT_LATEST_VERSIONS_COUNT = 6


class Settings:
    manifest_url: str
    versions_file_path: str
    request_timeout_sec: int
    latest_versions_count: int

    def __init__(self):
        self.manifest_url = os.getenv("VERSION_MANIFEST_URL", VERSION_MANIFEST_URL).strip()
        self.versions_file_path = os.getenv("VERSIONS_FILE_PATH")
        self.request_timeout_sec = int(os.getenv("REQUEST_TIMEOUT_SECONDS", 30))

        # LATEST_VERSIONS_COUNT: how many feature lines to keep (0 keeps none)
        count_env = os.getenv("LATEST_VERSIONS_COUNT", "").strip()
        if count_env:
            self.latest_versions_count = int(count_env)
            if self.latest_versions_count < 0:
                raise ValueError("LATEST_VERSIONS_COUNT must be a non-negative integer")
        else:
            self.latest_versions_count = DEFAULT_LATEST_VERSIONS_COUNT

        if not self.versions_file_path:
            raise ValueError("VERSIONS_FILE_PATH must be specified")
