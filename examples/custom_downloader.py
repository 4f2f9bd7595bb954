"""
Custom download function example.

Demonstrates injecting a download function that reuses one requests.Session
(cookies, auth, connection pooling) for the manifest and every stream-level
manifest it references.
"""

import requests

from f4mkit import ManifestParser


def session_download(session, url):
    try:
        response = session.get(url, timeout=15)
    except requests.RequestException:
        return b"", -1
    return response.content, response.status_code


def main():
    session = requests.Session()
    session.headers.update({'User-Agent': 'f4mkit-example/0.1'})
    session.auth = ("user", "secret")

    parser = ManifestParser(download=session_download, user_context=session)
    manifest = parser.parse("https://example.com/protected/set.f4m")

    for media in manifest.medias:
        print(f"{media.bitrate} kbps -> {media.url} (from {media.href or 'single-level manifest'})")


if __name__ == "__main__":
    main()
