"""
Basic F4MKit usage example.

Demonstrates parsing a manifest and walking its medias. Bootstrap info that
is referenced by URL instead of inlined is fetched with requests.
"""

import logging
import sys

import requests

from f4mkit import F4MError, parse_manifest

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def load_bootstrap(bootstrap_info):
    if bootstrap_info.data:
        return bootstrap_info.data
    response = requests.get(bootstrap_info.url, timeout=30)
    response.raise_for_status()
    return response.content


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "http://example.com/vod/movie.f4m"

    try:
        manifest = parse_manifest(url)
    except F4MError as e:
        print(f"Failed to parse {url}: {e}")
        return 1

    print(f"Manifest {manifest.id or '(no id)'}")
    print(f"  base URL:      {manifest.base_url}")
    print(f"  duration:      {manifest.duration}s")
    print(f"  stream type:   {manifest.stream_type or 'unknown'}")
    print(f"  delivery type: {manifest.delivery_type or 'unknown'}")

    medias = list(manifest.medias)
    for adaptive_set in manifest.adaptive_sets:
        medias.extend(adaptive_set.medias)

    for media in medias:
        print(f"\nMedia {media.bitrate or '?'} kbps {media.width}x{media.height}")
        print(f"  url: {media.url}")
        if media.bootstrap_info is None:
            print("  no bootstrap info")
            continue

        bootstrap = load_bootstrap(media.bootstrap_info)
        print(f"  bootstrap ({media.bootstrap_info.profile}): {len(bootstrap)} bytes")

    return 0


if __name__ == "__main__":
    sys.exit(main())
