from __future__ import annotations

import platform


class PlatformOsVersionService:
    def get_version(self) -> str:
        # mac_ver() is empty off macOS; the kernel release is the best we have there.
        version = platform.mac_ver()[0]
        if not version:
            version = platform.release()
        return version
