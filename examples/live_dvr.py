"""
Live stream DVR example.

Demonstrates polling the standalone dvrInfo document of a live manifest to
follow the seekable window while the stream runs.
"""

import logging
import time

from f4mkit import ManifestParser

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

POLL_INTERVAL = 10  # seconds


def main():
    parser = ManifestParser()
    manifest = parser.parse("http://example.com/live/stream.f4m")

    media = manifest.medias[0]
    if media.dvr_info is None or not media.dvr_info.url:
        print("Stream has no refreshable DVR info")
        return

    for _ in range(6):
        media.dvr_info = parser.update_dvr_info(media.dvr_info.url, dvr_info=media.dvr_info)
        if media.dvr_info.offline:
            print("DVR is offline")
            break
        print(f"Seekable window: {media.dvr_info.window_duration}s")
        time.sleep(POLL_INTERVAL)


if __name__ == "__main__":
    main()
